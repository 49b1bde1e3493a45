# -*- coding: utf-8 -*-
"""
Session boundary of the tile-merge puzzle.

This module provides the `TileMergeSession` class, which queues swipe commands from a host, resolves
them tick by tick and exposes read-only snapshots of the grid.
"""

from .session import TileMergeSession

__all__ = ["TileMergeSession"]
