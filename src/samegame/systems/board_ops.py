from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Tuple

from esper import World

from samegame.components.active_switch import ActiveSwitch
from samegame.components.board import Board
from samegame.components.board_position import BoardPosition
from samegame.components.tile import Cell, ComponentLabel, TileColor, UNLABELED
from samegame.components.tile_palette import TilePalette

Position = Tuple[int, int]

EMPTY_MARK = "."


@dataclass(slots=True)
class GravityMove:
    source: Position
    target: Position
    color: int


@dataclass(slots=True)
class ColumnMove:
    source: int
    target: int


def get_palette(world: World) -> TilePalette:
    for _, palette in world.get_component(TilePalette):
        return palette
    raise RuntimeError("TilePalette definitions not found")


def board_dimensions(world: World) -> Tuple[int, int] | None:
    """Return (cols, rows) of the board, or None before the board is spawned."""
    for _, board in world.get_component(Board):
        return board.cols, board.rows
    return None


def require_dimensions(world: World) -> Tuple[int, int]:
    dims = board_dimensions(world)
    if dims is None:
        raise RuntimeError("Board not found")
    return dims


def is_valid_cell(world: World, x: int, y: int) -> bool:
    dims = board_dimensions(world)
    if dims is None:
        return False
    cols, rows = dims
    return 0 <= x < cols and 0 <= y < rows


def position_index(world: World) -> Dict[Position, int]:
    """Map every (x, y) on the board to its tile entity."""
    for _, board in world.get_component(Board):
        return board.tiles
    return {}


def get_entity_at(world: World, x: int, y: int) -> int:
    """Return the tile entity at (x, y); out-of-board access is a programming error."""
    if not is_valid_cell(world, x, y):
        raise IndexError(f"cell ({x}, {y}) is outside the board")
    entity = position_index(world).get((x, y))
    if entity is None:
        raise RuntimeError(f"no tile entity at ({x}, {y})")
    return entity


def cell_at(world: World, x: int, y: int) -> Cell:
    entity = get_entity_at(world, x, y)
    return Cell(
        exists=world.component_for_entity(entity, ActiveSwitch).active,
        color=world.component_for_entity(entity, TileColor).color,
        component_id=world.component_for_entity(entity, ComponentLabel).component_id,
    )


def spawn_tiles(world: World, board: Board) -> Dict[Position, int]:
    """Create one tile entity per cell; tiles start inactive until filled."""
    index = board.tiles
    index.clear()
    cols, rows = board.cols, board.rows
    for y in range(rows):
        for x in range(cols):
            index[(x, y)] = world.create_entity(
                BoardPosition(x=x, y=y),
                ActiveSwitch(active=False),
                TileColor(),
                ComponentLabel(),
            )
    return index


def fill_board(world: World) -> List[Position]:
    """Populate every cell with a uniformly random color, row-major, drawn from world.random."""
    cols, rows = require_dimensions(world)
    rng: random.Random = world.random
    colors_count = get_palette(world).colors_count
    index = position_index(world)
    filled: List[Position] = []
    for y in range(rows):
        for x in range(cols):
            entity = index[(x, y)]
            world.component_for_entity(entity, TileColor).color = rng.randrange(colors_count)
            world.component_for_entity(entity, ActiveSwitch).active = True
            world.component_for_entity(entity, ComponentLabel).component_id = UNLABELED
            filled.append((x, y))
    return filled


def load_layout(world: World, rows: Sequence[str]) -> None:
    """Overwrite the board from rows of text: a digit is a color, '.' an empty cell."""
    cols, height = require_dimensions(world)
    if len(rows) != height or any(len(row) != cols for row in rows):
        raise ValueError(f"layout must be {height} rows of {cols} cells")
    index = position_index(world)
    for y, row in enumerate(rows):
        for x, mark in enumerate(row):
            entity = index[(x, y)]
            switch = world.component_for_entity(entity, ActiveSwitch)
            world.component_for_entity(entity, ComponentLabel).component_id = UNLABELED
            if mark == EMPTY_MARK:
                switch.active = False
                continue
            world.component_for_entity(entity, TileColor).color = int(mark)
            switch.active = True


def board_snapshot(world: World) -> List[str]:
    """Inverse of load_layout; handy for logs and assertions."""
    cols, rows = require_dimensions(world)
    index = position_index(world)
    lines: List[str] = []
    for y in range(rows):
        marks: List[str] = []
        for x in range(cols):
            entity = index[(x, y)]
            if world.component_for_entity(entity, ActiveSwitch).active:
                marks.append(str(world.component_for_entity(entity, TileColor).color))
            else:
                marks.append(EMPTY_MARK)
        lines.append("".join(marks))
    return lines


def count_active_tiles(world: World) -> int:
    return sum(1 for _, switch in world.get_component(ActiveSwitch) if switch.active)


def deactivate_component(world: World, component_id: int) -> List[Position]:
    """Mark every active tile carrying component_id as removed."""
    removed: List[Position] = []
    for entity, (position, switch, label) in world.get_components(
        BoardPosition, ActiveSwitch, ComponentLabel
    ):
        if switch.active and label.component_id == component_id:
            switch.active = False
            removed.append((position.x, position.y))
    return sorted(removed)


def compute_gravity_moves(world: World) -> List[GravityMove]:
    """Moves that settle each column's surviving tiles onto the bottom rows."""
    dims = board_dimensions(world)
    if dims is None:
        return []
    cols, rows = dims
    index = position_index(world)
    moves: List[GravityMove] = []
    for x in range(cols):
        # Bottom-up so every target is already vacated when its move is applied.
        target_y = rows - 1
        for y in range(rows - 1, -1, -1):
            entity = index[(x, y)]
            if not world.component_for_entity(entity, ActiveSwitch).active:
                continue
            if y != target_y:
                color = world.component_for_entity(entity, TileColor).color
                moves.append(GravityMove(source=(x, y), target=(x, target_y), color=color))
            target_y -= 1
    return moves


def apply_gravity_moves(world: World, moves: Iterable[GravityMove]) -> None:
    index = position_index(world)
    for move in moves:
        src_entity = index[move.source]
        dst_entity = index[move.target]
        src_switch: ActiveSwitch = world.component_for_entity(src_entity, ActiveSwitch)
        if not src_switch.active:
            continue
        dst_switch: ActiveSwitch = world.component_for_entity(dst_entity, ActiveSwitch)
        world.component_for_entity(dst_entity, TileColor).color = move.color
        dst_switch.active = True
        src_switch.active = False


def column_is_empty(world: World, x: int, index: Dict[Position, int] | None = None) -> bool:
    _, rows = require_dimensions(world)
    index = index if index is not None else position_index(world)
    return not any(
        world.component_for_entity(index[(x, y)], ActiveSwitch).active for y in range(rows)
    )


def compact_columns(world: World) -> List[ColumnMove]:
    """Shift non-empty columns left over empty ones; trailing columns end up empty."""
    dims = board_dimensions(world)
    if dims is None:
        return []
    cols, rows = dims
    index = position_index(world)
    moves: List[ColumnMove] = []
    target = 0
    for source in range(cols):
        if column_is_empty(world, source, index):
            continue
        if source != target:
            for y in range(rows):
                src_entity = index[(source, y)]
                dst_entity = index[(target, y)]
                src_switch = world.component_for_entity(src_entity, ActiveSwitch)
                world.component_for_entity(dst_entity, ActiveSwitch).active = src_switch.active
                world.component_for_entity(dst_entity, TileColor).color = (
                    world.component_for_entity(src_entity, TileColor).color
                )
            moves.append(ColumnMove(source=source, target=target))
        target += 1
    for x in range(target, cols):
        for y in range(rows):
            world.component_for_entity(index[(x, y)], ActiveSwitch).active = False
    return moves
