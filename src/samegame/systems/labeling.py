"""Connected-component labeling of the tile board.

Tiles are grouped by 4-neighbour adjacency (no diagonals) and equal color.
Only active tiles take part: an empty cell never joins a group, whatever stale
color it still carries. Groups get ids in row-major order of their first cell,
so a given board always labels the same way.
"""
from __future__ import annotations

import logging
from typing import Dict, List

from esper import World

from samegame.components.active_switch import ActiveSwitch
from samegame.components.tile import ComponentLabel, TileColor, UNLABELED
from samegame.systems.board_ops import Position, position_index, require_dimensions
from samegame.utils.game_state import get_component_map

logger = logging.getLogger(__name__)

NEIGHBOUR_OFFSETS = ((0, -1), (0, 1), (-1, 0), (1, 0))


def label_components(world: World) -> Dict[int, int]:
    """Relabel every tile and rebuild the shared ComponentMap; returns its counts."""
    cols, rows = require_dimensions(world)
    index = position_index(world)
    component_map = get_component_map(world)
    component_map.clear()

    active: Dict[Position, int] = {}
    for pos, entity in index.items():
        world.component_for_entity(entity, ComponentLabel).component_id = UNLABELED
        if world.component_for_entity(entity, ActiveSwitch).active:
            active[pos] = world.component_for_entity(entity, TileColor).color

    next_id = 0
    for y in range(rows):
        for x in range(cols):
            seed = (x, y)
            if seed not in active:
                continue
            if world.component_for_entity(index[seed], ComponentLabel).component_id != UNLABELED:
                continue
            component_map.counts[next_id] = _flood(world, index, active, seed, next_id)
            next_id += 1

    logger.debug("labeled %d groups (largest=%d)", len(component_map.counts), component_map.largest())
    return component_map.counts


def _flood(
    world: World,
    index: Dict[Position, int],
    active: Dict[Position, int],
    seed: Position,
    component_id: int,
) -> int:
    color = active[seed]
    world.component_for_entity(index[seed], ComponentLabel).component_id = component_id
    pending: List[Position] = [seed]
    size = 0
    while pending:
        x, y = pending.pop()
        size += 1
        for dx, dy in NEIGHBOUR_OFFSETS:
            neighbour = (x + dx, y + dy)
            if active.get(neighbour) != color:
                continue
            label = world.component_for_entity(index[neighbour], ComponentLabel)
            if label.component_id != UNLABELED:
                continue
            label.component_id = component_id
            pending.append(neighbour)
    return size


def component_members(world: World, component_id: int) -> List[Position]:
    """Positions of active tiles labeled component_id, sorted."""
    members: List[Position] = []
    for pos, entity in position_index(world).items():
        if not world.component_for_entity(entity, ActiveSwitch).active:
            continue
        if world.component_for_entity(entity, ComponentLabel).component_id == component_id:
            members.append(pos)
    return sorted(members)
