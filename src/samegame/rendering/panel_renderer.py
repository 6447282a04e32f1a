from __future__ import annotations

from typing import TYPE_CHECKING, List, Tuple

from samegame.constants import (
    BANNER_FONT_SIZE,
    CLEAR_COLOR,
    GAME_OVER_COLOR,
    PANEL_COLOR,
    PANEL_FONT_SIZE,
    PANEL_POINTING_OFFSET,
    PANEL_SCORE_OFFSET,
    PANEL_TEXT_X,
    TEXT_COLOR,
)
from samegame.ui.layout import panel_rect

if TYPE_CHECKING:
    from samegame.game import Game
    from samegame.systems.render import RenderSystem


def format_panel_lines(game: Game) -> List[str]:
    return [
        f"POINTING: {game.hover_score:5}",
        f"SCORE: {game.score:8}",
    ]


def banner_for(game: Game) -> Tuple[str, Tuple[int, int, int]] | None:
    if game.is_over:
        return "GAME OVER", GAME_OVER_COLOR
    if game.is_clear:
        return "CLEAR!!", CLEAR_COLOR
    return None


class PanelRenderer:
    """Score strip below the board plus the end-of-round banner."""

    def __init__(self, render_system: RenderSystem):
        self._rs = render_system

    def render(self, arcade, game: Game, headless: bool) -> None:
        rs = self._rs
        width = rs.window.width
        height = rs.window.height
        lines = format_panel_lines(game)
        banner = banner_for(game)
        rs._last_panel_lines = lines
        rs._last_banner = banner[0] if banner else None
        if headless:
            return

        left, right, bottom, top = panel_rect(width)
        arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, PANEL_COLOR)
        offsets = (PANEL_POINTING_OFFSET, PANEL_SCORE_OFFSET)
        for text, offset in zip(lines, offsets):
            arcade.draw_text(
                text,
                PANEL_TEXT_X,
                top - offset,
                TEXT_COLOR,
                PANEL_FONT_SIZE,
                anchor_y="top",
            )
        if banner is not None:
            text, color = banner
            arcade.draw_text(
                text,
                width / 2,
                height / 2,
                color,
                BANNER_FONT_SIZE,
                anchor_x="center",
                anchor_y="center",
            )
