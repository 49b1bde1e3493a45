# -*- coding: utf-8 -*-
"""
Play the tile-merge puzzle in a Matplotlib window.
"""
import argparse
import logging
from typing import Any

from tilemerge import GameConfig, SpawnConfig, TileMergeSession
from tilemerge.utils.windows import WindowBoard

# ##: Frame tick, in milliseconds.
TICK_INTERVAL = 50


def redraw(window: WindowBoard, session: TileMergeSession):
    """
    Redraw the game board.

    Parameters
    ----------
    window: WindowBoard
        Class to draw the game board

    session: TileMergeSession
        The game session to draw
    """
    window.show_snapshot(session.snapshot())


def reset(session: TileMergeSession, window: WindowBoard):
    """
    Reset and redraw the game board.
    """
    session.reset()
    redraw(window, session)


def tick(session: TileMergeSession, window: WindowBoard):
    """
    Resolve one pending swipe and redraw if anything happened.

    Parameters
    ----------
    session: TileMergeSession
        The game session

    window: WindowBoard
        Class to draw the game board
    """
    result = session.tick()
    if result.direction is None:
        return None

    print(f"{result.direction.name.lower()}: moves={session.moves} max={2 ** (session.max_value or 0)}")
    redraw(window, session)
    if result.terminal:
        print("terminated!")
        reset(session, window)


def key_handler(session: TileMergeSession, window: WindowBoard, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    session: TileMergeSession
        The game session

    window: WindowBoard
        Class to draw the game board

    event: Any
        event to handle
    """
    if event.key == "escape":
        window.close()
        return None

    if event.key == "backspace":
        reset(session, window)
        return None

    session.submit_key(event.key)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Play the tile-merge puzzle")
    parser.add_argument("--width", type=int, default=4)
    parser.add_argument("--height", type=int, default=4)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--classic", action="store_true", help="Spawn value 1 tiles 10%% of the time")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    spawn = SpawnConfig.classic() if args.classic else SpawnConfig()
    game = TileMergeSession(GameConfig(width=args.width, height=args.height, spawn=spawn, seed=args.seed))

    window_board = WindowBoard(title="Tile Merge", width=game.width, height=game.height)
    window_board.register_key_handler(lambda event: key_handler(game, window_board, event))
    window_board.start_timer(TICK_INTERVAL, lambda: tick(game, window_board))

    redraw(window_board, game)

    # Blocking event loop
    window_board.show(block=True)
