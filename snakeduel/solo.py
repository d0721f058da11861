"""Single-player snake on a small board."""

from __future__ import annotations

import argparse
import curses
import random
import time
from typing import Optional, Sequence

from .model import Board, Direction, Snake
from .screen import _hide_cursor, _key_from_code, _put, board_cells

SOLO_WIDTH = 40
SOLO_HEIGHT = 10
SOLO_MAX_LENGTH = 100
FRAME_DELAY = 0.1
QUIT_KEY = "e"

_BINDINGS = {
    "KEY_LEFT": Direction.LEFT,
    "KEY_RIGHT": Direction.RIGHT,
    "KEY_UP": Direction.UP,
    "KEY_DOWN": Direction.DOWN,
}


class SoloGame:
    """One snake chasing food; walls block it rather than ending the game."""

    def __init__(
        self,
        width: int = SOLO_WIDTH,
        height: int = SOLO_HEIGHT,
        rng: Optional[random.Random] = None,
    ):
        self.board = Board(width, height)
        self.rng = rng if rng is not None else random.Random()
        self.snake = Snake(1, 1, Direction.RIGHT)
        self.score = 0
        self.over = False
        self.aborted = False
        self.food = (self.rng.randrange(width), self.rng.randrange(height))

    def handle_key(self, key: Optional[str]) -> bool:
        """Apply a key press; return whether this frame should go on to a tick."""
        if key == QUIT_KEY:
            self.aborted = True
            return False
        direction = _BINDINGS.get(key) if key is not None else None
        if direction is not None and not self.snake.turn(direction):
            return False
        return True

    def tick(self) -> bool:
        """Advance the snake one step; False when a wall stopped it."""
        snake = self.snake
        target = snake.next_position()
        if snake.hits_self(*target):
            self.over = True
        if not self.board.inside(*target):
            self.over = True
            return False
        snake.move()
        if self.food == snake.head():
            self.food = self.board.random_food(self.rng)
            self.score += 1
            if snake.length < SOLO_MAX_LENGTH:
                snake.grow()
        return True


def render_solo(game: SoloGame) -> list[str]:
    """The screen as text lines: board, a blank line, score and exit hint."""
    width, height = game.board.width, game.board.height
    cells = board_cells(width, height)
    *trail, head = game.snake.body
    cells.update((cell, "o") for cell in trail if cell is not None)
    if head is not None:
        cells[head] = "O"
    cells[game.food] = "&"
    rows = [
        "".join(cells.get((x, y), " ") for x in range(width + 2))
        for y in range(height + 2)
    ]
    return rows + ["", f"Score Player 1: {game.score}", "Press e to exit the game!"]


def _run(stdscr) -> None:
    game = SoloGame()
    stdscr.keypad(True)
    stdscr.nodelay(True)
    _hide_cursor()
    while True:
        key = _key_from_code(stdscr.getch())
        if not game.handle_key(key):
            if game.aborted:
                return
            continue
        if not game.tick():
            time.sleep(FRAME_DELAY)
            continue
        stdscr.erase()
        for row, line in enumerate(render_solo(game)):
            _put(stdscr, row, 0, line)
        time.sleep(FRAME_DELAY)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="snakeduel-solo",
        description="Single-player snake: arrows steer, e exits.",
    )
    parser.parse_args(argv)
    curses.wrapper(_run)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())