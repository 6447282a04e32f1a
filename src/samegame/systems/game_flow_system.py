from __future__ import annotations

import logging

from esper import World

from samegame.components.game_state import GameMode
from samegame.events.bus import EVENT_BOARD_RESOLVED, EventBus
from samegame.utils.game_state import get_score, set_game_mode

logger = logging.getLogger(__name__)


class GameFlowSystem:
    """Moves the session into a terminal mode once the board can no longer be played."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_BOARD_RESOLVED, self._on_board_resolved)

    def _on_board_resolved(self, sender, **payload) -> None:
        remaining = payload.get("remaining")
        largest = payload.get("largest")
        if remaining is None or largest is None:
            return
        if remaining == 0:
            logger.info("board cleared, final score %d", get_score(self.world).total)
            set_game_mode(self.world, self.event_bus, GameMode.CLEARED)
        elif largest <= 1:
            logger.info("no removable group left, final score %d", get_score(self.world).total)
            set_game_mode(self.world, self.event_bus, GameMode.OVER)
