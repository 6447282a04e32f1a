import logging

from samegame.commands import Click, Command, Hover
from samegame.events.bus import EventBus, EVENT_MOUSE_PRESS, EVENT_MOUSE_MOVE
from samegame.ui.layout import cell_at_point

logger = logging.getLogger(__name__)


class InputSystem:
    """Translates window mouse events into the frame's board command.

    Only the last valid command of a frame survives; the window hands it to
    Game.update once per frame via consume_command.
    """

    def __init__(self, event_bus: EventBus, window, game):
        self.event_bus = event_bus
        self.window = window
        self.game = game
        self.pending_command: Command = None
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_MOUSE_MOVE, self.on_mouse_move)

    def on_mouse_move(self, sender, **kwargs):
        cell = self._cell_from_payload(kwargs)
        if cell is None:
            return
        self.pending_command = Hover(*cell)

    def on_mouse_press(self, sender, **kwargs):
        cell = self._cell_from_payload(kwargs)
        if cell is None:
            return
        logger.debug("click %s %s -> cell %d %d", kwargs.get('x'), kwargs.get('y'), *cell)
        self.pending_command = Click(*cell)

    def consume_command(self) -> Command:
        command = self.pending_command
        self.pending_command = None
        return command

    def _cell_from_payload(self, payload):
        x = payload.get('x')
        y = payload.get('y')
        if x is None or y is None:
            return None
        cell_x, cell_y = cell_at_point(x, y, self.window.height)
        if not self.game.is_valid_cell(cell_x, cell_y):
            return None
        return cell_x, cell_y
