"""Session controller: the one object the presentation layer talks to.

A Game wires the ECS world, the event bus and the board systems together and
exposes the command contract: ``update(command)`` with ``None``, ``Hover`` or
``Click``, read accessors for drawing, and ``reset`` for a fresh round.
"""
from __future__ import annotations

import logging
import random
import time
from typing import Dict

from samegame.commands import Click, Command, Hover
from samegame.components.game_state import GameMode
from samegame.components.tile import Cell
from samegame.constants import BOARD_H, BOARD_W, COLORS_COUNT, seed_override
from samegame.events.bus import EventBus, EVENT_GAME_RESET, EVENT_TILE_CLICK, EVENT_TILE_HOVER
from samegame.systems.board import BoardSystem
from samegame.systems.board_ops import board_snapshot, cell_at, is_valid_cell
from samegame.systems.game_flow_system import GameFlowSystem
from samegame.systems.hover import HoverSystem
from samegame.systems.resolution import ResolutionSystem
from samegame.utils.game_state import get_component_map, get_game_state, get_score, set_game_mode
from samegame.world import create_world

logger = logging.getLogger(__name__)


def default_seed() -> int:
    override = seed_override()
    if override is not None:
        return override
    return int(time.time())


class Game:
    def __init__(
        self,
        seed: int | None = None,
        *,
        cols: int = BOARD_W,
        rows: int = BOARD_H,
        colors_count: int = COLORS_COUNT,
    ) -> None:
        if seed is None:
            seed = default_seed()
        logger.info("random seed = %d", seed)
        self.event_bus = EventBus()
        self.world = create_world(seed=seed, colors_count=colors_count)
        self.board_system = BoardSystem(self.world, self.event_bus, cols=cols, rows=rows)
        self.resolution_system = ResolutionSystem(self.world, self.event_bus)
        self.hover_system = HoverSystem(self.world, self.event_bus)
        self.game_flow_system = GameFlowSystem(self.world, self.event_bus)

    @classmethod
    def new(cls, seed: int | None = None, **kwargs) -> "Game":
        return cls(seed, **kwargs)

    def update(self, command: Command) -> None:
        if command is not None and not isinstance(command, (Hover, Click)):
            raise TypeError(f"unsupported command: {command!r}")
        if self.mode != GameMode.PLAYING or command is None:
            return
        if isinstance(command, Click):
            self.event_bus.emit(EVENT_TILE_CLICK, x=command.x, y=command.y)
        else:
            self.event_bus.emit(EVENT_TILE_HOVER, x=command.x, y=command.y)

    def reset(self, seed: int | None = None) -> None:
        """Start over in PLAYING with a new seed and a freshly randomized board."""
        if seed is None:
            seed = default_seed()
        logger.info("reset, random seed = %d", seed)
        setattr(self.world, "random", random.Random(seed))
        get_game_state(self.world).seed = seed
        score = get_score(self.world)
        score.total = 0
        score.clear_preview()
        self.event_bus.emit(EVENT_GAME_RESET, seed=seed)
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)

    def is_valid_cell(self, x: int, y: int) -> bool:
        return is_valid_cell(self.world, x, y)

    def cell(self, x: int, y: int) -> Cell:
        return cell_at(self.world, x, y)

    def component_sizes(self) -> Dict[int, int]:
        return dict(get_component_map(self.world).counts)

    def snapshot(self) -> list[str]:
        return board_snapshot(self.world)

    @property
    def mode(self) -> GameMode:
        return get_game_state(self.world).mode

    @property
    def seed(self) -> int:
        return get_game_state(self.world).seed

    @property
    def is_over(self) -> bool:
        return self.mode == GameMode.OVER

    @property
    def is_clear(self) -> bool:
        return self.mode == GameMode.CLEARED

    @property
    def score(self) -> int:
        return get_score(self.world).total

    @property
    def hover_score(self) -> int:
        return get_score(self.world).hover_score

    @property
    def hover_connected_count(self) -> int:
        return get_score(self.world).hover_connected_count

    @property
    def hover_component_id(self) -> int:
        return get_score(self.world).hover_component_id
