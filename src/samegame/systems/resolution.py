import logging

from esper import World

from samegame.components.active_switch import ActiveSwitch
from samegame.components.tile import ComponentLabel
from samegame.events.bus import (
    EventBus,
    EVENT_TILE_CLICK,
    EVENT_GROUP_REMOVED,
    EVENT_GRAVITY_APPLIED,
    EVENT_COLUMNS_COMPACTED,
    EVENT_SCORE_CHANGED,
    EVENT_BOARD_RESOLVED,
)
from samegame.systems.board_ops import (
    apply_gravity_moves,
    compact_columns,
    compute_gravity_moves,
    count_active_tiles,
    deactivate_component,
    get_entity_at,
)
from samegame.systems.labeling import label_components
from samegame.systems.scoring import score_for_count
from samegame.utils.game_state import get_component_map, get_score, is_playing

logger = logging.getLogger(__name__)


class ResolutionSystem:
    """Removes the clicked group, settles the board and banks the points."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.last_delta: int | None = None
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)

    def on_tile_click(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None:
            return
        if not is_playing(self.world):
            return
        self.last_delta = self.resolve(x, y)

    def resolve(self, x: int, y: int) -> int | None:
        """Resolve a click at (x, y); returns the points earned, or None for a no-op."""
        world = self.world
        entity = get_entity_at(world, x, y)
        if not world.component_for_entity(entity, ActiveSwitch).active:
            return None
        component_id = world.component_for_entity(entity, ComponentLabel).component_id
        size = get_component_map(world).size_of(component_id)
        if size <= 1:
            return None

        # Points are fixed by the group as it stands before anything moves.
        delta = score_for_count(size)
        removed = deactivate_component(world, component_id)
        logger.debug("click (%d, %d): removed %d tiles of group %d", x, y, len(removed), component_id)
        self.event_bus.emit(EVENT_GROUP_REMOVED, positions=removed, size=len(removed), delta=delta)

        gravity_moves = compute_gravity_moves(world)
        apply_gravity_moves(world, gravity_moves)
        self.event_bus.emit(EVENT_GRAVITY_APPLIED, moves=gravity_moves)

        column_moves = compact_columns(world)
        self.event_bus.emit(EVENT_COLUMNS_COMPACTED, moves=column_moves)

        counts = label_components(world)

        score = get_score(world)
        score.total += delta
        self.event_bus.emit(EVENT_SCORE_CHANGED, total=score.total, delta=delta)
        self.event_bus.emit(
            EVENT_BOARD_RESOLVED,
            delta=delta,
            remaining=count_active_tiles(world),
            largest=max(counts.values(), default=0),
        )
        return delta

