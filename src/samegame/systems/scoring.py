from esper import World

from samegame.components.active_switch import ActiveSwitch
from samegame.components.tile import ComponentLabel
from samegame.systems.board_ops import get_entity_at
from samegame.utils.game_state import get_component_map

# Returned by probe_score for an empty cell; never added to the total.
NO_SELECTION = -1


def score_for_count(count: int) -> int:
    """Points for removing a group of ``count`` tiles: (count - 2) ** 2."""
    if count < 2:
        return 0
    return (count - 2) ** 2


def probe_score(world: World, x: int, y: int) -> int:
    entity = get_entity_at(world, x, y)
    if not world.component_for_entity(entity, ActiveSwitch).active:
        return NO_SELECTION
    component_id = world.component_for_entity(entity, ComponentLabel).component_id
    return score_for_count(get_component_map(world).size_of(component_id))
