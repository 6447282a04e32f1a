from dataclasses import dataclass

@dataclass(slots=True)
class BoardPosition:
    """Fixed cell coordinate of a tile entity; x is the column, y the row (0 = top)."""
    x: int
    y: int
