"""Terminal front end for the two-player duel."""

from __future__ import annotations

import argparse
import curses
import time
from typing import Optional, Sequence

from .model import Duel, Position, Snake
from .results import banner, decide_outcome, save_score

WIDTH = 40
HEIGHT = 20
FRAME_DELAY = 0.1
RESTART_KEY = "g"
QUIT_KEY = "e"

_SPECIAL_KEYS = {
    curses.KEY_LEFT: "KEY_LEFT",
    curses.KEY_RIGHT: "KEY_RIGHT",
    curses.KEY_UP: "KEY_UP",
    curses.KEY_DOWN: "KEY_DOWN",
}


def _key_from_code(code: int) -> Optional[str]:
    """Turn a getch() code into the key name the game logic understands."""
    if code in _SPECIAL_KEYS:
        return _SPECIAL_KEYS[code]
    if 0 <= code < 0x110000:
        return chr(code)
    return None


def _hide_cursor() -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        pass


def _put(stdscr, row: int, col: int, text: str) -> None:
    """Write text at a position, ignoring writes that fall off the screen."""
    try:
        stdscr.addstr(row, col, text)
    except curses.error:
        pass


def board_cells(width: int, height: int) -> dict[Position, str]:
    """The wall characters keyed by (x, y); side walls overwrite the corners."""
    cells: dict[Position, str] = {}
    for x in range(width + 2):
        cells[(x, 0)] = "~"
        cells[(x, height + 1)] = "~"
    for y in range(height + 2):
        cells[(0, y)] = "#"
        cells[(width + 1, y)] = "#"
    return cells


def game_over_lines(
    height: int, width: int, score1: int, score2: int, dead1: bool, dead2: bool
) -> list[tuple[int, int, str]]:
    """The (row, column, text) pieces of the game-over screen."""
    lines = [
        (height + 5, 0, "Time's up!"),
        (height // 2, width // 2 - 5, "GAME OVER!"),
        (height + 1, 0, "Press 'g' to restart or 'e' to exit."),
        (height + 3, 0, f"Score Player 1: {score1 * 10}"),
        (height + 3, 20, f"Score Player 2: {score2 * 10}"),
    ]
    message = banner(decide_outcome(score1, score2, dead1, dead2))
    if message is not None:
        offset = 4 if message == "It's a tie!" else 6
        lines.append((height // 2 + 1, width // 2 - offset, message))
    return lines


def _draw_snake(stdscr, snake: Snake, body_char: str, head_char: str) -> None:
    *trail, head = snake.body
    for cell in trail:
        if cell is not None:
            _put(stdscr, cell[1], cell[0], body_char)
    if head is not None:
        _put(stdscr, head[1], head[0], head_char)


def _draw_frame(stdscr, duel: Duel) -> None:
    stdscr.erase()
    for (x, y), char in board_cells(duel.board.width, duel.board.height).items():
        _put(stdscr, y, x, char)
    food_x, food_y = duel.food
    _draw_snake(stdscr, duel.snake1, "o", "O")
    _put(stdscr, food_y, food_x, "&")
    _draw_snake(stdscr, duel.snake2, "x", "X")
    _put(stdscr, food_y, food_x, "&")
    height = duel.board.height
    _put(stdscr, height + 3, 0, f"Score Player 1: {duel.score1 * 10}")
    _put(stdscr, height + 3, 20, f"Score Player 2: {duel.score2 * 10}")
    _put(stdscr, height + 4, 0, "Press e to exit the game!")


def _play_round(stdscr, duel: Duel) -> None:
    stdscr.keypad(True)
    stdscr.nodelay(True)
    _hide_cursor()
    while not duel.over:
        key = _key_from_code(stdscr.getch())
        if not duel.handle_key(key):
            if duel.aborted:
                break
            continue
        duel.tick()
        _draw_frame(stdscr, duel)
        time.sleep(FRAME_DELAY)


def _wait_for(stdscr, accepted: set[str]) -> str:
    while True:
        key = _key_from_code(stdscr.getch())
        if key in accepted:
            return key


def play(stdscr) -> None:
    """Run duels on a curses window until the players choose to exit."""
    while True:
        duel = Duel(WIDTH, HEIGHT)
        _play_round(stdscr, duel)

        stdscr.erase()
        for row, col, text in game_over_lines(
            HEIGHT, WIDTH, duel.score1, duel.score2, duel.dead1, duel.dead2
        ):
            _put(stdscr, row, col, text)
        save_score(duel.score1, duel.score2, duel.dead1, duel.dead2)
        stdscr.refresh()
        stdscr.nodelay(False)

        if _wait_for(stdscr, {RESTART_KEY, QUIT_KEY}) == QUIT_KEY:
            return


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="snakeduel",
        description="Two-player snake duel: arrows steer player 1, WASD steers player 2.",
    )
    parser.parse_args(argv)
    curses.wrapper(play)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())