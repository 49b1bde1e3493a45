"""
Value types shared by the grid engine, the spawner and the session boundary.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple, Optional


class Direction(IntEnum):
    """
    Swipe direction.

    The numbering follows the action convention (0: left, 1: up, 2: right, 3: down).
    The ``y`` axis grows upward, so ``UP`` compacts tiles towards ``y = height - 1``.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @property
    def is_vertical(self) -> bool:
        """True for swipes that move tiles along a column."""
        return self in (Direction.UP, Direction.DOWN)

    @property
    def towards_max(self) -> bool:
        """True when the target wall sits at the highest coordinate of the lane."""
        return self in (Direction.UP, Direction.RIGHT)


class TileView(NamedTuple):
    """Read-only copy of a tile, as handed to the presentation layer."""

    x: int
    y: int
    value: int


@dataclass(eq=False)
class Tile:
    """
    A live tile owned by a grid.

    Attributes
    ----------
    x : int
        Column, from 0 (left) to ``width - 1``.
    y : int
        Row, from 0 (bottom) to ``height - 1``.
    value : int
        Power-of-two exponent; the displayed value is ``2 ** value``.
    merged : bool
        Set while a swipe is being resolved once the tile absorbed another one.
    """

    x: int
    y: int
    value: int = 0
    merged: bool = False

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    def view(self) -> TileView:
        """Freeze the tile into a ``TileView``."""
        return TileView(self.x, self.y, self.value)


class SwipeResult(NamedTuple):
    """
    Outcome of a swipe.

    Attributes
    ----------
    changed : bool
        True if any tile moved or was merged away.
    merges : int
        Number of merges performed.
    """

    changed: bool
    merges: int = 0


class TickResult(NamedTuple):
    """
    Outcome of one session tick.

    Attributes
    ----------
    direction : Direction, optional
        The direction resolved in this tick, None if nothing was pending.
    changed : bool
        Whether the swipe changed the grid.
    spawned : TileView, optional
        The tile added after a changing swipe.
    terminal : bool
        Whether the grid is full after the tick.
    """

    direction: Optional[Direction]
    changed: bool
    spawned: Optional[TileView]
    terminal: bool
