from __future__ import annotations

from collections import deque
from typing import Dict, List, Sequence, Tuple

from samegame.game import Game
from samegame.systems.board_ops import load_layout
from samegame.systems.labeling import label_components


def make_game(rows: Sequence[str], seed: int = 0) -> Game:
    """Build a game whose board is exactly ``rows`` (digit = color, '.' = empty)."""

    game = Game(seed=seed, cols=len(rows[0]), rows=len(rows))
    load_layout(game.world, rows)
    label_components(game.world)
    return game


def reference_groups(rows: Sequence[str]) -> List[List[Tuple[int, int]]]:
    """Independent BFS grouping of a text layout, used to cross-check the labeler."""

    height = len(rows)
    width = len(rows[0])
    seen: set[Tuple[int, int]] = set()
    groups: List[List[Tuple[int, int]]] = []
    for y in range(height):
        for x in range(width):
            if rows[y][x] == "." or (x, y) in seen:
                continue
            color = rows[y][x]
            queue = deque([(x, y)])
            seen.add((x, y))
            group: List[Tuple[int, int]] = []
            while queue:
                cx, cy = queue.popleft()
                group.append((cx, cy))
                for nx, ny in ((cx + 1, cy), (cx - 1, cy), (cx, cy + 1), (cx, cy - 1)):
                    if 0 <= nx < width and 0 <= ny < height and (nx, ny) not in seen and rows[ny][nx] == color:
                        seen.add((nx, ny))
                        queue.append((nx, ny))
            groups.append(group)
    return groups


def labels_by_position(game: Game) -> Dict[Tuple[int, int], int]:
    snapshot = game.snapshot()
    cols, rows = len(snapshot[0]), len(snapshot)
    labels: Dict[Tuple[int, int], int] = {}
    for y in range(rows):
        for x in range(cols):
            cell = game.cell(x, y)
            if cell.exists:
                labels[(x, y)] = cell.component_id
    return labels
