"""
Value-to-color and value-to-label mapping used when drawing tiles.
"""

# ##: RGB color per exponent; exponents past the table reuse the last entry.
TILE_COLORS: tuple[tuple[float, float, float], ...] = (
    (0.9, 0.9, 0.9),
    (0.8, 0.2, 0.8),
    (0.7, 0.7, 0.2),
    (0.6, 0.6, 0.6),
    (0.5, 0.2, 0.5),
    (0.4, 0.4, 0.2),
    (0.3, 0.3, 0.3),
    (0.2, 0.2, 0.2),
    (0.1, 0.1, 0.1),
    (0.0, 0.0, 0.0),
)

BACKGROUND_COLOR = (0.1, 0.1, 0.15)


def tile_color(value: int) -> tuple[float, float, float]:
    """
    Color of a tile.

    Parameters
    ----------
    value : int
        Tile exponent.

    Returns
    -------
    tuple[float, float, float]
        RGB components in [0, 1].
    """
    return TILE_COLORS[min(value, len(TILE_COLORS) - 1)]


def text_color(value: int) -> str:
    """Dark text on light tiles, white text on dark ones."""
    red, green, blue = tile_color(value)
    return 'black' if (red + green + blue) / 3 > 0.5 else 'white'


def tile_label(value: int) -> str:
    return str(2**value)
