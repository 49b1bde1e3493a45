"""
Conversion of tile snapshots into array boards for drawing and inspection.
"""

from typing import Iterable

from numpy import full, int64, ndarray

from tilemerge.core.gameboard import EMPTY
from tilemerge.core.tiles import TileView


def to_array(snapshot: Iterable[TileView], width: int, height: int) -> ndarray:
    """
    Lay a snapshot out as a 2D board of exponents.

    Parameters
    ----------
    snapshot : Iterable[TileView]
        Tiles to place.
    width, height : int
        Grid dimensions.

    Returns
    -------
    ndarray
        Array of shape (height, width); row 0 is the top row (``y = height - 1``) and
        empty cells hold ``EMPTY``.

    Example
    -------
    >>> to_array([TileView(0, 0, 1)], width=2, height=2)
    array([[-1, -1],
           [ 1, -1]])
    """
    board = full((height, width), EMPTY, dtype=int64)
    for tile in snapshot:
        board[height - 1 - tile.y, tile.x] = tile.value
    return board


def render_text(snapshot: Iterable[TileView], width: int, height: int) -> str:
    """Render a snapshot as tab separated displayed values, top row first."""
    board = to_array(snapshot, width, height)
    lines = []
    for row in board.tolist():
        lines.append(' \t'.join('.' if value == EMPTY else str(2**value) for value in row))
    return '\n'.join(lines)
