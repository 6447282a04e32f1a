from dataclasses import dataclass

@dataclass(slots=True)
class ActiveSwitch:
    """Per-tile occupancy flag.

    active: True if the cell currently holds a tile; False once removed.
    Color and label of an inactive cell are stale and must not be read.
    """
    active: bool = True
