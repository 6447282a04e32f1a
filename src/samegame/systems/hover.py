from typing import Optional, Tuple

from esper import World

from samegame.components.active_switch import ActiveSwitch
from samegame.components.tile import ComponentLabel, UNLABELED
from samegame.events.bus import (
    EventBus,
    EVENT_TILE_HOVER,
    EVENT_HOVER_CHANGED,
    EVENT_BOARD_RESOLVED,
    EVENT_GAME_RESET,
)
from samegame.systems.board_ops import get_entity_at
from samegame.systems.scoring import NO_SELECTION, score_for_count
from samegame.utils.game_state import get_component_map, get_score, is_playing


class HoverSystem:
    """Keeps the Score preview fields in sync with the hovered cell.

    Purely advisory: reads the board and ComponentMap, never writes them.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.hovered: Optional[Tuple[int, int]] = None
        self.event_bus.subscribe(EVENT_TILE_HOVER, self.on_tile_hover)
        self.event_bus.subscribe(EVENT_BOARD_RESOLVED, self.on_board_resolved)
        self.event_bus.subscribe(EVENT_GAME_RESET, self.on_game_reset)

    def on_tile_hover(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None:
            return
        if not is_playing(self.world):
            return
        self.hovered = (x, y)
        self.preview(x, y)

    def on_board_resolved(self, sender, **kwargs):
        # Component ids were reassigned; refresh so the highlight tracks the new board.
        if self.hovered is not None:
            self.preview(*self.hovered)

    def on_game_reset(self, sender, **kwargs):
        self.hovered = None

    def preview(self, x: int, y: int) -> None:
        score = get_score(self.world)
        entity = get_entity_at(self.world, x, y)
        if not self.world.component_for_entity(entity, ActiveSwitch).active:
            score.hover_connected_count = 0
            score.hover_score = NO_SELECTION
            score.hover_component_id = UNLABELED
        else:
            component_id = self.world.component_for_entity(entity, ComponentLabel).component_id
            count = get_component_map(self.world).size_of(component_id)
            score.hover_connected_count = count
            score.hover_score = score_for_count(count)
            score.hover_component_id = component_id
        self.event_bus.emit(
            EVENT_HOVER_CHANGED,
            x=x,
            y=y,
            score=score.hover_score,
            count=score.hover_connected_count,
            component_id=score.hover_component_id,
        )
