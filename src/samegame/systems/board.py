import logging
from esper import World

from samegame.components.board import Board
from samegame.constants import BOARD_H, BOARD_W
from samegame.events.bus import EventBus, EVENT_GAME_RESET
from samegame.systems.board_ops import fill_board, spawn_tiles
from samegame.systems.labeling import label_components

logger = logging.getLogger(__name__)


class BoardSystem:
    """Owns the board entity and its tiles; refills them on every reset."""

    def __init__(self, world: World, event_bus: EventBus, cols: int = BOARD_W, rows: int = BOARD_H):
        self.world = world
        self.event_bus = event_bus
        # Create a single board entity with Board component
        self.board_entity = self.world.create_entity()
        board = Board(cols=cols, rows=rows)
        self.world.add_component(self.board_entity, board)
        spawn_tiles(self.world, board)
        self.event_bus.subscribe(EVENT_GAME_RESET, self.on_game_reset)
        self._init_board()

    def _init_board(self):
        filled = fill_board(self.world)
        counts = label_components(self.world)
        logger.debug("board filled: %d tiles in %d groups", len(filled), len(counts))

    def on_game_reset(self, sender, **kwargs):
        self._init_board()
