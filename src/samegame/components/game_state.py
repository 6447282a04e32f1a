"""Game state resource describing the session mode."""
from dataclasses import dataclass
from enum import Enum, auto


class GameMode(Enum):
    """Session modes; CLEARED and OVER ignore board commands."""
    PLAYING = auto()
    CLEARED = auto()
    OVER = auto()


@dataclass
class GameState:
    """Singleton component storing the session mode and its RNG seed."""
    mode: GameMode = GameMode.PLAYING
    seed: int = 0
