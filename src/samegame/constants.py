import os

WINDOW_TITLE = "samegame"
FPS = 30

BOARD_W = 20
BOARD_H = 10
COLORS_COUNT = 5

CELL_SIZE = 40
# Score panel strip drawn below the board.
PANEL_HEIGHT = 82
SCREEN_WIDTH = BOARD_W * CELL_SIZE
SCREEN_HEIGHT = BOARD_H * CELL_SIZE + PANEL_HEIGHT

# Gap between a tile rectangle and its cell edge.
TILE_PADDING = 2

# Panel text anchors, measured from the left edge and from the panel top.
PANEL_TEXT_X = 290
PANEL_POINTING_OFFSET = 5
PANEL_SCORE_OFFSET = 38
PANEL_FONT_SIZE = 22
BANNER_FONT_SIZE = 32

BACKGROUND_COLOR = (0, 0, 0)
PANEL_COLOR = (128, 128, 128)
TEXT_COLOR = (255, 255, 255)
GAME_OVER_COLOR = (255, 255, 255)
CLEAR_COLOR = (255, 255, 0)
HOVER_OUTLINE_COLOR = (255, 255, 255)

# Tile palette indexed by color id; length must be at least COLORS_COUNT.
TILE_PALETTE = [
    (214, 60, 60),     # red
    (70, 160, 80),     # green
    (70, 100, 200),    # blue
    (220, 200, 70),    # yellow
    (170, 80, 170),    # purple
]

# Fixes the session seed when set; otherwise wall-clock seconds are used.
SEED_ENV_VAR = "SAMEGAME_SEED"


def seed_override() -> int | None:
    raw = os.environ.get(SEED_ENV_VAR)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{SEED_ENV_VAR} must be an integer, got {raw!r}") from exc
