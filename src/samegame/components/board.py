from dataclasses import dataclass, field
from typing import Dict, Tuple

@dataclass(slots=True)
class Board:
    cols: int
    rows: int
    # (x, y) -> tile entity, filled once when the tiles are spawned.
    tiles: Dict[Tuple[int, int], int] = field(default_factory=dict)
