from __future__ import annotations

from typing import TYPE_CHECKING

from samegame.components.active_switch import ActiveSwitch
from samegame.components.board_position import BoardPosition
from samegame.components.tile import ComponentLabel, TileColor, UNLABELED
from samegame.constants import HOVER_OUTLINE_COLOR
from samegame.ui.layout import cell_rect

if TYPE_CHECKING:
    from samegame.components.tile_palette import TilePalette
    from samegame.systems.render import RenderSystem


class BoardRenderer:
    def __init__(self, render_system: RenderSystem, padding: int = 2):
        self._rs = render_system
        self._padding = padding

    def render(self, arcade, palette: TilePalette, hover_component_id: int, headless: bool) -> None:
        rs = self._rs
        world = rs.world
        rs._last_tile_layout = {}
        outline_commands: list[tuple[float, float, float, float]] = []
        highlighted: list[tuple[int, int]] = []

        for ent, (pos, switch, tile) in world.get_components(BoardPosition, ActiveSwitch, TileColor):
            if not switch.active:
                continue
            left, right, bottom, top = cell_rect(pos.x, pos.y, rs.window.height)
            left += self._padding
            right -= self._padding
            bottom += self._padding
            top -= self._padding
            color = palette.background_for(tile.color)
            rs._last_tile_layout[(pos.x, pos.y)] = {
                "entity": ent,
                "rect": (left, right, bottom, top),
                "color": color,
            }
            if hover_component_id != UNLABELED:
                label = world.component_for_entity(ent, ComponentLabel)
                if label.component_id == hover_component_id:
                    outline_commands.append((left, right, bottom, top))
                    highlighted.append((pos.x, pos.y))
            if headless:
                continue
            arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, color)

        rs._last_highlight = sorted(highlighted)
        if headless:
            return
        for left, right, bottom, top in outline_commands:
            arcade.draw_lrbt_rectangle_outline(left, right, bottom, top, HOVER_OUTLINE_COLOR, 2)
