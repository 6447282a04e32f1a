from dataclasses import dataclass

UNLABELED = -1


@dataclass(slots=True)
class TileColor:
    """Palette index of the tile occupying a cell."""
    color: int = 0


@dataclass(slots=True)
class ComponentLabel:
    """Connected-group id assigned by the labeler; UNLABELED until labeled."""
    component_id: int = UNLABELED


@dataclass(frozen=True, slots=True)
class Cell:
    """Read-only view of one board cell handed to callers outside the world."""
    exists: bool
    color: int
    component_id: int
