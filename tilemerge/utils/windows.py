# -*- coding: utf-8 -*-
"""
Graphical window for the tile-merge puzzle.

This module draws a session snapshot with Matplotlib, forwards key presses to a handler and
drives a periodic timer that the game loop uses as its frame tick.
"""
from typing import Callable, Iterable, Optional

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event

from tilemerge.core.gameboard import EMPTY
from tilemerge.core.tiles import TileView
from tilemerge.utils.board import to_array
from tilemerge.utils.palette import BACKGROUND_COLOR, text_color, tile_color, tile_label


class WindowBoard:
    """
    A class for rendering the tile grid using Matplotlib.

    Methods
    -------
    show_snapshot(snapshot: Iterable[TileView])
        Update the display with the current tiles.
    register_key_handler(key_handler: Callable)
        Register a function to handle keyboard events.
    start_timer(interval: int, callback: Callable)
        Call a function periodically from the Matplotlib event loop.
    show(block: bool = True)
        Display the game window.
    close()
        Close the game window.
    """

    def __init__(self, title: str, width: int, height: int):
        """
        Initialize the game board window.

        Parameters
        ----------
        title : str
            The title of the window.
        width, height : int
            Grid dimensions.
        """
        self.width = width
        self.height = height
        self.fig, self.axe = plt.subplots()
        self.fig.canvas.manager.set_window_title(title)
        self._setup_axes()
        self.closed = False
        self._timer = None
        self.fig.canvas.mpl_connect("close_event", self._close_handler)

    def _setup_axes(self):
        """
        Create one subplot per cell, top row first.
        """
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=1, wspace=0.05, hspace=0.05)
        self.axe.set_facecolor(BACKGROUND_COLOR)

        # ##: Remove all ticks and labels for a cleaner game board appearance.
        self.axe.tick_params(axis="both", which="both", length=0)
        self.axe.set_xticks([])
        self.axe.set_yticks([])

        self.texts = []
        self.axes = [
            self.fig.add_subplot(self.height, self.width, r * self.width + c + 1)
            for r in range(self.height)
            for c in range(self.width)
        ]
        for ax in self.axes:
            text = ax.text(0.5, 0.5, "", ha="center", va="center", fontsize="x-large", fontweight="demibold")
            self.texts.append(text)
            ax.set_xticks([])
            ax.set_yticks([])

    def _close_handler(self, event: Optional[Event] = None):
        """
        Handle the window close event.
        """
        self.closed = True
        if self._timer is not None:
            self._timer.stop()

    def show_snapshot(self, snapshot: Iterable[TileView]):
        """
        Show or update the tiles.

        Parameters
        ----------
        snapshot : Iterable[TileView]
            Tiles to draw.
        """
        board = to_array(snapshot, self.width, self.height)
        for ax, text, value in zip(self.axes, self.texts, board.flat):
            value = int(value)
            if value == EMPTY:
                text.set_text("")
                ax.set_facecolor(BACKGROUND_COLOR)
            else:
                text.set_text(tile_label(value))
                text.set_color(text_color(value))
                ax.set_facecolor(tile_color(value))

        self.fig.canvas.draw_idle()

    def register_key_handler(self, key_handler: Callable):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler : Callable
            A function called with the Matplotlib key event.
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    def start_timer(self, interval: int, callback: Callable[[], None]):
        """
        Call ``callback`` every ``interval`` milliseconds while the window is open.
        """
        self._timer = self.fig.canvas.new_timer(interval=interval)
        self._timer.add_callback(callback)
        self._timer.start()

    @classmethod
    def show(cls, block: bool = True):
        """
        Show the window and start the Matplotlib event loop.
        """
        if not block:
            plt.ion()
        plt.show()

    def close(self):
        """
        Close the window.
        """
        if self._timer is not None:
            self._timer.stop()
        plt.close(self.fig)
        self.closed = True
