"""Game session: the command/query boundary between the grid engine and a host frame loop."""

import logging
from collections import deque

from numpy.random import default_rng

from tilemerge.config import GameConfig
from tilemerge.core.gameboard import GridState
from tilemerge.core.spawner import fill_cells, spawn_one
from tilemerge.core.tiles import Direction, TickResult, TileView
from tilemerge.utils.board import render_text
from tilemerge.utils.keys import direction_for_key

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class TileMergeSession:
    """
    Tile-merge game session.

    The host pushes directions with ``submit_direction`` (or ``submit_key``), calls ``tick`` once
    per frame and redraws from ``snapshot``. Each tick resolves at most one direction: swipe,
    spawn if the grid changed, then terminal check.
    """

    def __init__(self, config: GameConfig | None = None):
        """
        Initialize the session and spawn the initial tiles.

        Parameters
        ----------
        config : GameConfig, optional
            Session configuration (default is a 4x4 grid).
        """
        self.config = config or GameConfig()
        self._grid = GridState(width=self.config.width, height=self.config.height)
        self._pending: deque[Direction] = deque()
        self._rng = default_rng(self.config.seed)
        self.moves = 0

        self.reset()

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def is_finished(self) -> bool:
        """
        Check if the session reached the terminal state.

        Returns
        -------
        bool
            True if the grid is full.
        """
        return self._grid.is_terminal()

    @property
    def max_value(self) -> int | None:
        """Highest exponent on the grid, None when it is empty."""
        return self._grid.max_value()

    @property
    def pending(self) -> tuple[Direction, ...]:
        return tuple(self._pending)

    def reset(self, seed: int | None = None) -> tuple[TileView, ...]:
        """
        Clear the grid and pending commands, then spawn the initial tiles.

        Parameters
        ----------
        seed : int, optional
            Reseed the session generator for reproducibility.

        Returns
        -------
        tuple[TileView, ...]
            The new snapshot.
        """
        if seed is not None:
            self._rng = default_rng(seed)

        self._grid.clear()
        self._pending.clear()
        self.moves = 0
        fill_cells(self._grid, self.config.initial_tiles, spawn=self.config.spawn, rng=self._rng)

        _logger.info('New session on a %dx%d grid', self.width, self.height)
        return self.snapshot()

    def submit_direction(self, direction: Direction) -> None:
        """
        Queue a swipe command.

        Raises
        ------
        TypeError
            If ``direction`` is not a ``Direction``.
        """
        if not isinstance(direction, Direction):
            raise TypeError(f'expected a Direction, got {direction!r}')
        self._pending.append(direction)

    def submit_key(self, key: str | None) -> Direction | None:
        """
        Queue the direction bound to a key (W/A/S/D or arrows).

        Returns
        -------
        Direction, optional
            The queued direction, None if the key is not bound.
        """
        direction = direction_for_key(key)
        if direction is not None:
            self.submit_direction(direction)
        return direction

    def take_pending_direction(self) -> Direction | None:
        """Pop the oldest pending direction, if any."""
        if not self._pending:
            return None
        return self._pending.popleft()

    def tick(self) -> TickResult:
        """
        Resolve at most one pending direction.

        Returns
        -------
        TickResult
            The resolved direction, whether the grid changed, the spawned tile and the
            terminal flag.

        Notes
        -----
        - No tile is spawned after a swipe that changed nothing.
        - With ``coalesce_input`` the remaining pending directions are dropped.
        """
        direction = self.take_pending_direction()
        if direction is None:
            return TickResult(direction=None, changed=False, spawned=None, terminal=self.is_finished)

        if self.config.coalesce_input and self._pending:
            _logger.debug('Dropping %d coalesced directions', len(self._pending))
            self._pending.clear()

        result = self._grid.apply_swipe(direction)

        spawned = None
        if result.changed:
            self.moves += 1
            spawned = spawn_one(self._grid, spawn=self.config.spawn, rng=self._rng).view()

        terminal = self._grid.is_terminal()
        if terminal:
            _logger.info('Grid full after %d moves, highest value %d', self.moves, self.max_value)
        return TickResult(direction=direction, changed=result.changed, spawned=spawned, terminal=terminal)

    def drain(self) -> list[TickResult]:
        """Tick until no direction is pending."""
        results = []
        while self._pending:
            results.append(self.tick())
        return results

    def snapshot(self) -> tuple[TileView, ...]:
        """
        Get the current tiles.

        Returns
        -------
        tuple[TileView, ...]
            Immutable tile copies ordered row by row from the bottom-left cell.
        """
        return self._grid.snapshot()

    def render(self) -> None:
        """
        Print the grid to the console, top row first.
        """
        print(render_text(self.snapshot(), self.width, self.height))
