from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"            # payload: x, y, button
EVENT_MOUSE_MOVE = "mouse_move"              # payload: x, y, dx, dy
EVENT_TILE_HOVER = "tile_hover"              # payload: x=int, y=int (board cell)
EVENT_TILE_CLICK = "tile_click"              # payload: x=int, y=int (board cell)


# ============================================================================
# TILE & BOARD MECHANICS
# ============================================================================
EVENT_GROUP_REMOVED = "group_removed"              # payload: positions=[(x,y),...], size=int, delta=int
EVENT_GRAVITY_APPLIED = "gravity_applied"          # payload: moves=list[GravityMove]
EVENT_COLUMNS_COMPACTED = "columns_compacted"      # payload: moves=list[ColumnMove]
EVENT_BOARD_RESOLVED = "board_resolved"            # payload: delta=int, remaining=int, largest=int


# ============================================================================
# SCORING & PREVIEW
# ============================================================================
EVENT_SCORE_CHANGED = "score_changed"      # payload: total=int, delta=int
EVENT_HOVER_CHANGED = "hover_changed"      # payload: x=int, y=int, score=int, count=int, component_id=int


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_MODE_CHANGED = "game_mode_changed"    # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_GAME_RESET = "game_reset"                  # payload: seed=int
