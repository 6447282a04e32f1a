from dataclasses import dataclass, field
from typing import Dict

@dataclass(slots=True)
class ComponentMap:
    """Component id -> member count, rebuilt from scratch on every relabel."""
    counts: Dict[int, int] = field(default_factory=dict)

    def size_of(self, component_id: int) -> int:
        return self.counts.get(component_id, 0)

    def largest(self) -> int:
        return max(self.counts.values(), default=0)

    def clear(self) -> None:
        self.counts.clear()
