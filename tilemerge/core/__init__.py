# -*- coding: utf-8 -*-
"""
This module provides the grid engine of the tile-merge puzzle.

It includes the tile value types, the grid state with its swipe transition and terminal check,
the random spawner, and helpers for checking legal and illegal directions.
"""

from .gameboard import EMPTY, GridState, swipe_lane
from .gamemove import can_swipe, illegal_directions, legal_directions
from .spawner import GridFullError, fill_cells, spawn_one
from .tiles import Direction, SwipeResult, TickResult, Tile, TileView

__all__ = [
    "EMPTY",
    "Direction",
    "GridFullError",
    "GridState",
    "SwipeResult",
    "TickResult",
    "Tile",
    "TileView",
    "can_swipe",
    "fill_cells",
    "illegal_directions",
    "legal_directions",
    "spawn_one",
    "swipe_lane",
]
