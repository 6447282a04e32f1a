from typing import Tuple

from samegame.constants import CELL_SIZE, PANEL_HEIGHT


def cell_at_point(px: float, py: float, window_height: int, cell_size: int = CELL_SIZE) -> Tuple[int, int]:
    """Map a window point to a board cell.

    Arcade's y axis points up while board row 0 is the top row, so y is flipped
    against the window top. The result may lie off the board; callers validate it.
    """
    cell_x = int(px // cell_size)
    cell_y = int((window_height - py) // cell_size)
    return cell_x, cell_y


def cell_rect(x: int, y: int, window_height: int, cell_size: int = CELL_SIZE) -> Tuple[float, float, float, float]:
    """Return (left, right, bottom, top) of cell (x, y) in window coordinates."""
    left = x * cell_size
    top = window_height - y * cell_size
    return left, left + cell_size, top - cell_size, top


def panel_rect(window_width: int, panel_height: int = PANEL_HEIGHT) -> Tuple[float, float, float, float]:
    """Return (left, right, bottom, top) of the score panel along the window bottom."""
    return 0, window_width, 0, panel_height
