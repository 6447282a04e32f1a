from dataclasses import dataclass

from samegame.components.tile import UNLABELED

@dataclass(slots=True)
class Score:
    """Cumulative score plus the last hover preview."""
    total: int = 0
    hover_score: int = 0
    hover_connected_count: int = 0
    hover_component_id: int = UNLABELED

    def clear_preview(self) -> None:
        self.hover_score = 0
        self.hover_connected_count = 0
        self.hover_component_id = UNLABELED
