"""
Tests for presentation helpers: key bindings, palette and array boards.
"""

from unittest import TestCase, main

import numpy as np

from tilemerge.core.gameboard import EMPTY
from tilemerge.core.tiles import Direction, TileView
from tilemerge.utils import (
    TILE_COLORS,
    direction_for_key,
    render_text,
    text_color,
    tile_color,
    tile_label,
    to_array,
)


class TestKeys(TestCase):
    def test_wasd(self):
        """W/A/S/D map to up/left/down/right."""
        self.assertEqual(direction_for_key('w'), Direction.UP)
        self.assertEqual(direction_for_key('a'), Direction.LEFT)
        self.assertEqual(direction_for_key('s'), Direction.DOWN)
        self.assertEqual(direction_for_key('d'), Direction.RIGHT)

    def test_case_and_arrows(self):
        self.assertEqual(direction_for_key('D'), Direction.RIGHT)
        self.assertEqual(direction_for_key('up'), Direction.UP)

    def test_unbound(self):
        self.assertIsNone(direction_for_key('escape'))
        self.assertIsNone(direction_for_key(''))


class TestPalette(TestCase):
    def test_color_table(self):
        """Exponents 0 to 9 have their own color."""
        self.assertEqual(len(set(TILE_COLORS)), 10)
        self.assertEqual(tile_color(0), (0.9, 0.9, 0.9))
        self.assertEqual(tile_color(9), (0.0, 0.0, 0.0))

    def test_color_fallback(self):
        """Exponents past the table use the last color."""
        self.assertEqual(tile_color(12), tile_color(9))

    def test_text_contrast(self):
        self.assertEqual(text_color(0), 'black')
        self.assertEqual(text_color(9), 'white')

    def test_label(self):
        self.assertEqual(tile_label(0), '1')
        self.assertEqual(tile_label(11), '2048')


class TestBoard(TestCase):
    def test_to_array_orientation(self):
        """Row 0 of the array is the top row of the grid."""
        snapshot = (TileView(0, 0, 1), TileView(2, 1, 3))
        board = to_array(snapshot, width=3, height=2)

        expected = np.array([[EMPTY, EMPTY, 3], [1, EMPTY, EMPTY]])
        np.testing.assert_array_equal(board, expected)

    def test_render_text(self):
        text = render_text((TileView(0, 0, 1),), width=2, height=2)
        self.assertEqual(text, '. \t.\n2 \t.')


if __name__ == '__main__':
    main()
