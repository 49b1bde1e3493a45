from unittest import TestCase, main

from numpy import array

from tilemerge.core.gameboard import EMPTY, GridState
from tilemerge.core.gamemove import can_swipe, illegal_directions, legal_directions
from tilemerge.core.tiles import Direction

_ = EMPTY


class TestGameMove(TestCase):
    def setUp(self):
        self.grid = GridState.from_array(array([[_, _, _, _], [_, _, _, _], [0, _, _, _], [0, _, _, _]]))

    def test_illegal_directions(self):
        """
        Test if illegal directions are correctly identified.
        """
        self.assertEqual(set(illegal_directions(self.grid)), {Direction.LEFT})

    def test_legal_directions(self):
        """
        Test if legal directions are correctly identified.
        """
        self.assertEqual(set(legal_directions(self.grid)), {Direction.UP, Direction.RIGHT, Direction.DOWN})

    def test_queries_do_not_mutate(self):
        """
        Test that checking directions leaves the grid untouched.
        """
        before = self.grid.snapshot()
        legal_directions(self.grid)
        self.assertTrue(can_swipe(self.grid, Direction.DOWN))
        self.assertEqual(self.grid.snapshot(), before)

    def test_empty_grid_has_no_legal_direction(self):
        """
        Test that nothing is legal on an empty grid.
        """
        self.assertEqual(legal_directions(GridState()), [])
        self.assertEqual(illegal_directions(GridState()), list(Direction))

    def test_full_grid_without_pairs(self):
        """
        Test that a full grid with no equal neighbours is stuck.
        """
        grid = GridState.from_array(array([[0, 1, 2, 3], [4, 5, 6, 7], [8, 9, 10, 11], [12, 13, 14, 15]]))
        self.assertTrue(grid.is_terminal())
        self.assertEqual(legal_directions(grid), [])


if __name__ == '__main__':
    main()
