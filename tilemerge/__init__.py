# -*- coding: utf-8 -*-
"""
Sliding-tile merge puzzle engine.
"""

from .config import GameConfig, SpawnConfig
from .core import Direction, GridFullError, GridState, TileView
from .envs import TileMergeSession

__all__ = ["Direction", "GameConfig", "GridFullError", "GridState", "SpawnConfig", "TileMergeSession", "TileView"]
