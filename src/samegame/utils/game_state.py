from __future__ import annotations

import logging

from esper import World

from samegame.components.component_map import ComponentMap
from samegame.components.game_state import GameMode, GameState
from samegame.components.score import Score
from samegame.events.bus import EVENT_GAME_MODE_CHANGED, EventBus

logger = logging.getLogger(__name__)


def get_game_state(world: World) -> GameState:
    for _, state in world.get_component(GameState):
        return state
    raise RuntimeError("GameState not found")


def get_score(world: World) -> Score:
    for _, score in world.get_component(Score):
        return score
    raise RuntimeError("Score not found")


def get_component_map(world: World) -> ComponentMap:
    for _, component_map in world.get_component(ComponentMap):
        return component_map
    raise RuntimeError("ComponentMap not found")


def is_playing(world: World) -> bool:
    states = list(world.get_component(GameState))
    if not states:
        return False
    return states[0][1].mode == GameMode.PLAYING


def set_game_mode(world: World, event_bus: EventBus, mode: GameMode) -> None:
    """Update the session mode and emit a change event when it differs."""

    state = get_game_state(world)
    previous_mode = state.mode
    if previous_mode == mode:
        return
    state.mode = mode
    logger.info("game mode %s -> %s", previous_mode.name, mode.name)
    event_bus.emit(
        EVENT_GAME_MODE_CHANGED,
        previous_mode=previous_mode,
        new_mode=mode,
    )
