"""
Tests for random tile spawning.
"""

from unittest import TestCase, main

import numpy as np

from tilemerge.config import SpawnConfig
from tilemerge.core.gameboard import GridState
from tilemerge.core.spawner import GridFullError, fill_cells, spawn_one


class TestSpawnOne(TestCase):
    """Test single tile spawning."""

    def setUp(self):
        self.grid = GridState(width=4, height=4)

    def test_spawn_on_empty_grid(self):
        """Spawning adds exactly one tile with the default starting value."""
        tile = spawn_one(self.grid, seed=42)

        self.assertEqual(len(self.grid), 1)
        self.assertIs(self.grid.tile_at(*tile.position), tile)
        self.assertEqual(tile.value, 0)
        self.assertFalse(tile.merged)

    def test_spawn_exclusivity(self):
        """Spawning never picks an occupied cell, until the grid is full."""
        rng = np.random.default_rng(3)
        seen = set()
        for _ in range(16):
            tile = spawn_one(self.grid, rng=rng)

            # ##>: Every spawn lands on a fresh cell.
            self.assertNotIn(tile.position, seen)
            seen.add(tile.position)

        self.assertTrue(self.grid.is_terminal())
        self.assertEqual(len(seen), 16)

    def test_single_free_cell(self):
        """With one free cell left, the spawn goes there."""
        for x in range(4):
            for y in range(4):
                if (x, y) != (2, 1):
                    self.grid.add_tile(x, y, 5)

        tile = spawn_one(self.grid, seed=0)
        self.assertEqual(tile.position, (2, 1))

    def test_full_grid_fails_fast(self):
        """Spawning into a full grid is a contract violation."""
        grid = GridState(width=1, height=1)
        grid.add_tile(0, 0)

        with self.assertRaises(GridFullError):
            spawn_one(grid)

        # ##>: The error is a ValueError for callers catching the broad case.
        self.assertTrue(issubclass(GridFullError, ValueError))

    def test_seed_reproducibility(self):
        """Same seed gives the same cell and value."""
        spawn = SpawnConfig.classic()
        first = spawn_one(GridState(), spawn=spawn, seed=11)
        second = spawn_one(GridState(), spawn=spawn, seed=11)

        self.assertEqual(first.view(), second.view())

    def test_configured_values(self):
        """Starting values come from the configured distribution."""
        rng = np.random.default_rng(5)
        spawn = SpawnConfig(values=(1, 2), probabilities=(0.5, 0.5))
        values = {spawn_one(GridState(), spawn=spawn, rng=rng).value for _ in range(100)}
        self.assertEqual(values, {1, 2})

    def test_default_always_lowest_value(self):
        """The default distribution only produces exponent 0."""
        rng = np.random.default_rng(9)
        tiles = fill_cells(self.grid, 16, rng=rng)
        self.assertEqual({tile.value for tile in tiles}, {0})


class TestFillCells(TestCase):
    """Test multi-tile spawning."""

    def test_fill_requested_count(self):
        grid = GridState()
        tiles = fill_cells(grid, 2, seed=1)

        self.assertEqual(len(tiles), 2)
        self.assertEqual(len(grid), 2)
        self.assertNotEqual(tiles[0].position, tiles[1].position)

    def test_fill_caps_at_free_cells(self):
        """Asking for more tiles than free cells fills the grid."""
        grid = GridState(width=2, height=2)
        grid.add_tile(0, 0)

        tiles = fill_cells(grid, 10, seed=1)

        self.assertEqual(len(tiles), 3)
        self.assertTrue(grid.is_terminal())

    def test_fill_zero(self):
        grid = GridState()
        self.assertEqual(fill_cells(grid, 0), [])
        self.assertEqual(len(grid), 0)


if __name__ == '__main__':
    main()
