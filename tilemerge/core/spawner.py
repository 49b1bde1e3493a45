"""
Random tile spawning on the free cells of a grid.
"""

import logging

from numpy.random import PCG64DXSM, Generator, default_rng

from tilemerge.config import SpawnConfig
from tilemerge.core.gameboard import GridState
from tilemerge.core.tiles import Tile

# ##>: Module-level generator, used when the caller provides neither a generator nor a seed.
_GENERATOR = default_rng(PCG64DXSM())

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class GridFullError(ValueError):
    """Raised when a tile is spawned into a grid without free cells."""


def _resolve_rng(rng: Generator | None, seed: int | None) -> Generator:
    if rng is not None:
        return rng
    return default_rng(seed) if seed is not None else _GENERATOR


def spawn_one(
    grid: GridState, spawn: SpawnConfig | None = None, rng: Generator | None = None, seed: int | None = None
) -> Tile:
    """
    Add one tile on a uniformly chosen free cell.

    Parameters
    ----------
    grid : GridState
        The grid to spawn into. **Modified in-place.**
    spawn : SpawnConfig, optional
        Starting-value distribution (default always spawns exponent 0).
    rng : Generator, optional
        Random generator to draw from.
    seed : int, optional
        Seed for a fresh generator, ignored when ``rng`` is given.

    Returns
    -------
    Tile
        The new tile.

    Raises
    ------
    GridFullError
        If the grid has no free cell. Callers check ``is_terminal()`` first.
    """
    free = grid.free_cells()
    if not free:
        raise GridFullError(f'cannot spawn into a full {grid.width}x{grid.height} grid')

    spawn = spawn or SpawnConfig()
    rng = _resolve_rng(rng, seed)

    x, y = free[int(rng.integers(len(free)))]
    value = int(rng.choice(spawn.values, p=spawn.probabilities))

    tile = grid.add_tile(x, y, value)
    _logger.debug('Spawned value %d at %s', value, tile.position)
    return tile


def fill_cells(
    grid: GridState,
    number_tile: int,
    spawn: SpawnConfig | None = None,
    rng: Generator | None = None,
    seed: int | None = None,
) -> list[Tile]:
    """
    Spawn several tiles, one after the other.

    If there are fewer free cells than requested, every free cell is filled.
    """
    rng = _resolve_rng(rng, seed)
    count = min(number_tile, len(grid.free_cells()))
    return [spawn_one(grid, spawn=spawn, rng=rng) for _ in range(count)]
