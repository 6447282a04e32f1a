from dataclasses import dataclass, field
from typing import List, Tuple

@dataclass(slots=True)
class TilePalette:
    """Color definitions stored on a single entity.

    Tiles carry only an index; drawing code resolves it through this palette.
    """
    colors: List[Tuple[int, int, int]] = field(default_factory=list)
    colors_count: int = 0

    def __post_init__(self) -> None:
        if self.colors_count <= 0:
            self.colors_count = len(self.colors)
        if self.colors_count > len(self.colors):
            raise ValueError(
                f"palette defines {len(self.colors)} colors, {self.colors_count} requested"
            )

    def background_for(self, color: int) -> Tuple[int, int, int]:
        return self.colors[color]
