from typing import Any

from samegame.constants import TILE_PADDING
from samegame.rendering.board_renderer import BoardRenderer
from samegame.rendering.panel_renderer import PanelRenderer
from samegame.systems.board_ops import get_palette
from samegame.utils.game_state import get_score


class RenderSystem:
    def __init__(self, game, window):
        self.game = game
        self.window = window
        self._last_tile_layout: dict[tuple[int, int], dict[str, Any]] = {}
        self._last_highlight: list[tuple[int, int]] = []
        self._last_panel_lines: list[str] = []
        self._last_banner: str | None = None
        self._board_renderer = BoardRenderer(self, padding=TILE_PADDING)
        self._panel_renderer = PanelRenderer(self)

    @property
    def world(self):
        return self.game.world

    def process(self):
        # Background cleared by Arcade window prior to on_draw.
        # Local import keeps tests headless without creating a window.
        import arcade
        # Headless safeguard: without an active Arcade window (unit tests) skip draw calls but still build layout cache.
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        palette = get_palette(self.world)
        hover_component_id = get_score(self.world).hover_component_id
        self._board_renderer.render(arcade, palette, hover_component_id, headless=headless)
        self._panel_renderer.render(arcade, self.game, headless=headless)
