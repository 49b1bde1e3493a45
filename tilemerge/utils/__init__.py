# -*- coding: utf-8 -*-
"""
This module provides presentation helpers for the tile-merge puzzle.

It includes key bindings, value-to-color and value-to-label mapping, and conversion of snapshots
into array boards. The Matplotlib window lives in ``tilemerge.utils.windows`` and is imported
explicitly by hosts that need it.
"""

from .board import render_text, to_array
from .keys import KEY_BINDINGS, direction_for_key
from .palette import TILE_COLORS, text_color, tile_color, tile_label

__all__ = [
    "KEY_BINDINGS",
    "TILE_COLORS",
    "direction_for_key",
    "render_text",
    "text_color",
    "tile_color",
    "tile_label",
    "to_array",
]
