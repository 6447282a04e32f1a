"""Commands the presentation layer feeds into Game.update.

``None`` stands for "nothing happened this frame". Coordinates are board
cells and must already pass ``Game.is_valid_cell``.
"""
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True, slots=True)
class Hover:
    x: int
    y: int


@dataclass(frozen=True, slots=True)
class Click:
    x: int
    y: int


Command = Optional[Union[Hover, Click]]
