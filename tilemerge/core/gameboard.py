"""
Core functionality of the tile-merge puzzle: grid ownership, lane resolution and the swipe transition.
"""

import logging
from itertools import groupby, product

from numpy import ndarray

from tilemerge.core.tiles import Direction, SwipeResult, Tile, TileView

# ##>: Marker for empty cells in array boards, since exponent 0 is a real tile.
EMPTY = -1

# ##>: Module logger.
_logger = logging.getLogger(__name__)


def _axis_coordinate(tile: Tile, direction: Direction) -> int:
    return tile.y if direction.is_vertical else tile.x


def _lane_key(tile: Tile, direction: Direction) -> int:
    return tile.x if direction.is_vertical else tile.y


def _place(tile: Tile, direction: Direction, coordinate: int) -> None:
    if direction.is_vertical:
        tile.y = coordinate
    else:
        tile.x = coordinate


def swipe_lane(lane: list[Tile], direction: Direction, length: int) -> list[Tile]:
    """
    Compact and merge the tiles of a single lane towards the wall.

    Parameters
    ----------
    lane : list[Tile]
        Tiles sharing the same column (vertical swipe) or row (horizontal swipe).
        Positions and values are updated in place.
    direction : Direction
        The swipe direction.
    length : int
        Number of cells in the lane.

    Returns
    -------
    list[Tile]
        Tiles absorbed by a merge; the caller removes them from the grid.

    Notes
    -----
    - The tile closest to the wall always snaps to the wall coordinate.
    - A tile is compared with the previous tile of the compacted stack, not with its
      neighbour in the original grid.
    - A tile that absorbed another one is flagged ``merged`` and cannot merge again.
    """
    if not lane:
        return []

    ordered = sorted(lane, key=lambda tile: _axis_coordinate(tile, direction), reverse=direction.towards_max)
    step = -1 if direction.towards_max else 1
    wall = length - 1 if direction.towards_max else 0

    # ##: The leading tile snaps to the wall.
    previous = ordered[0]
    _place(previous, direction, wall)

    removed = []
    for tile in ordered[1:]:
        if not previous.merged and previous.value == tile.value:
            previous.value += 1
            previous.merged = True
            removed.append(tile)
            _logger.debug('Merge at %s into value %d', previous.position, previous.value)
        else:
            _place(tile, direction, _axis_coordinate(previous, direction) + step)
            previous = tile
    return removed


class GridState:
    """
    The set of live tiles of a game.

    The grid exclusively owns its tiles. Callers outside the engine read it through
    ``snapshot()`` and never mutate tiles directly.
    """

    def __init__(self, width: int = 4, height: int = 4):
        """
        Initialize an empty grid.

        Parameters
        ----------
        width : int, optional
            Number of columns (default is 4).
        height : int, optional
            Number of rows (default is 4).
        """
        if width <= 0 or height <= 0:
            raise ValueError(f'grid dimensions must be positive, got {width}x{height}')
        self.width = width
        self.height = height
        self._tiles: list[Tile] = []

    @classmethod
    def from_array(cls, board: ndarray) -> 'GridState':
        """
        Build a grid from a 2D board of exponents.

        Parameters
        ----------
        board : ndarray
            Array of shape (height, width). Row 0 is the top row (``y = height - 1``);
            cells holding ``EMPTY`` (-1) have no tile.

        Returns
        -------
        GridState
            A new grid holding one tile per non-empty cell.
        """
        height, width = board.shape
        grid = cls(width=width, height=height)
        for row, col in product(range(height), range(width)):
            value = int(board[row, col])
            if value != EMPTY:
                grid.add_tile(col, height - 1 - row, value)
        return grid

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self):
        return iter(self._tiles)

    @property
    def cells(self) -> int:
        return self.width * self.height

    def occupied(self) -> set[tuple[int, int]]:
        return {tile.position for tile in self._tiles}

    def free_cells(self) -> list[tuple[int, int]]:
        """Unoccupied cells, sorted by (x, y)."""
        every_cell = set(product(range(self.width), range(self.height)))
        return sorted(every_cell - self.occupied())

    def tile_at(self, x: int, y: int) -> Tile | None:
        for tile in self._tiles:
            if tile.x == x and tile.y == y:
                return tile
        return None

    def add_tile(self, x: int, y: int, value: int = 0) -> Tile:
        """
        Add a tile on an empty cell.

        Raises
        ------
        ValueError
            If the cell is outside the grid, already occupied, or the value is negative.
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ValueError(f'cell ({x}, {y}) is outside the {self.width}x{self.height} grid')
        if value < 0:
            raise ValueError(f'tile value must be a non-negative exponent, got {value}')
        if self.tile_at(x, y) is not None:
            raise ValueError(f'cell ({x}, {y}) is already occupied')

        tile = Tile(x=x, y=y, value=value)
        self._tiles.append(tile)
        return tile

    def clear(self) -> None:
        """Remove every tile."""
        self._tiles.clear()

    def copy(self) -> 'GridState':
        clone = GridState(width=self.width, height=self.height)
        clone._tiles = [Tile(x=tile.x, y=tile.y, value=tile.value) for tile in self._tiles]
        return clone

    def lane_length(self, direction: Direction) -> int:
        return self.height if direction.is_vertical else self.width

    def lanes(self, direction: Direction) -> list[list[Tile]]:
        """
        Group tiles into the independent lanes of a swipe.

        Lanes are columns for vertical swipes and rows for horizontal ones. Tiles inside a
        lane are ordered by ascending coordinate along the swipe axis.
        """
        ordered = sorted(
            self._tiles, key=lambda tile: (_lane_key(tile, direction), _axis_coordinate(tile, direction))
        )
        return [list(lane) for _, lane in groupby(ordered, key=lambda tile: _lane_key(tile, direction))]

    def apply_swipe(self, direction: Direction) -> SwipeResult:
        """
        Slide every lane towards the wall of ``direction`` and merge equal neighbours.

        Parameters
        ----------
        direction : Direction
            The swipe direction.

        Returns
        -------
        SwipeResult
            Whether anything moved or merged, and how many merges occurred.

        Notes
        -----
        - The grid is mutated in place: positions are updated, absorbed tiles removed,
          surviving values incremented.
        - Merge flags are cleared on every tile before returning.
        - A swipe on an empty grid is a no-op.
        """
        before = [(tile, tile.position) for tile in self._tiles]

        removed = []
        length = self.lane_length(direction)
        for lane in self.lanes(direction):
            removed.extend(swipe_lane(lane, direction, length))

        if removed:
            self._tiles = [tile for tile in self._tiles if not any(tile is gone for gone in removed)]
        moved = any(tile.position != position for tile, position in before)

        for tile in self._tiles:
            tile.merged = False

        result = SwipeResult(changed=moved or bool(removed), merges=len(removed))
        _logger.debug('Swipe %s: changed=%s merges=%d', direction.name, result.changed, result.merges)
        return result

    def is_terminal(self) -> bool:
        """
        Check whether the grid is full.

        Returns
        -------
        bool
            True if every cell holds a tile, even when merges would still be possible.
        """
        return len(self._tiles) == self.cells

    def max_value(self) -> int | None:
        return max((tile.value for tile in self._tiles), default=None)

    def snapshot(self) -> tuple[TileView, ...]:
        """Frozen copy of the tiles, ordered row by row from the bottom-left cell."""
        return tuple(sorted((tile.view() for tile in self._tiles), key=lambda view: (view.y, view.x)))
