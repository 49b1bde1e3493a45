"""Translate raw key names into swipe directions."""

from tilemerge.core.tiles import Direction

# ##>: WASD layout, plus the arrow key names reported by matplotlib.
KEY_BINDINGS: dict[str, Direction] = {
    'w': Direction.UP,
    'a': Direction.LEFT,
    's': Direction.DOWN,
    'd': Direction.RIGHT,
    'up': Direction.UP,
    'left': Direction.LEFT,
    'down': Direction.DOWN,
    'right': Direction.RIGHT,
}


def direction_for_key(key: str | None) -> Direction | None:
    """
    Map a key name to a direction.

    Parameters
    ----------
    key : str, optional
        Key name, case-insensitive.

    Returns
    -------
    Direction, optional
        The bound direction, or None for unbound keys.
    """
    if not key:
        return None
    return KEY_BINDINGS.get(key.lower())
