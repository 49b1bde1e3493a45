"""
Move utilities for the tile-merge puzzle, providing functions for determining legal
and illegal swipe directions.
"""

from tilemerge.core.gameboard import GridState
from tilemerge.core.tiles import Direction


def can_swipe(grid: GridState, direction: Direction) -> bool:
    """
    Check if a swipe would change the grid.

    Parameters
    ----------
    grid : GridState
        The grid to check. Not modified.
    direction : Direction
        Direction to check.

    Returns
    -------
    bool
        True if at least one tile would move or merge.
    """
    return grid.copy().apply_swipe(direction).changed


def legal_directions(grid: GridState) -> list[Direction]:
    """
    Determine the directions that change the grid.

    Parameters
    ----------
    grid : GridState
        The current grid.

    Returns
    -------
    list[Direction]
        Directions in action order (left, up, right, down).
    """
    return [direction for direction in Direction if can_swipe(grid, direction)]


def illegal_directions(grid: GridState) -> list[Direction]:
    """
    Determine the directions that leave the grid untouched.

    Notes
    -----
    A no-op swipe never spawns a tile, so these directions do not advance the game.
    """
    return [direction for direction in Direction if not can_swipe(grid, direction)]
