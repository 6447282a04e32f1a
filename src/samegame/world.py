import logging
import random

from esper import World
from samegame.components.component_map import ComponentMap
from samegame.components.game_state import GameState, GameMode
from samegame.components.score import Score
from samegame.components.tile_palette import TilePalette
from samegame.constants import COLORS_COUNT, TILE_PALETTE

logger = logging.getLogger(__name__)


def create_world(
    *,
    seed: int = 0,
    colors_count: int = COLORS_COUNT,
) -> World:
    """Create the world with its session and palette entities.

    The board itself is spawned by BoardSystem, which owns the tile entities.
    """
    world = World()
    setattr(world, "random", random.Random(seed))

    world.create_entity(
        GameState(mode=GameMode.PLAYING, seed=seed),
        Score(),
        ComponentMap(),
    )
    world.create_entity(
        TilePalette(colors=list(TILE_PALETTE), colors_count=colors_count),
    )
    logger.debug("world created (seed=%d, colors=%d)", seed, colors_count)
    return world
