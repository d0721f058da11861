"""Game state for the two-player snake duel: snakes, board and the tick rules."""

from __future__ import annotations

import random
import time
from enum import Enum
from typing import Callable, Optional

Position = tuple[int, int]

MAX_LENGTH = 500
START_LENGTH = 10
TIME_LIMIT = 120

QUIT_KEY = "e"


class Direction(Enum):
    """A unit step on the board; y grows downwards."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction((-self.dx, -self.dy))


class Snake:
    """A snake: head position, heading and a fixed-length trail of cells.

    The trail holds ``length`` slots, oldest first; the last one is the head
    after the most recent move. Slots not yet reached are ``None``.
    """

    def __init__(self, x: int, y: int, direction: Direction, length: int = START_LENGTH):
        if length < 1:
            raise ValueError("a snake needs at least one cell")
        self.x = x
        self.y = y
        self.direction = direction
        self.body: list[Optional[Position]] = [None] * length

    @property
    def length(self) -> int:
        return len(self.body)

    def head(self) -> Position:
        return (self.x, self.y)

    def turn(self, direction: Direction) -> bool:
        """Change heading; a reversal is refused and returns False."""
        if direction is self.direction.opposite:
            return False
        self.direction = direction
        return True

    def next_position(self) -> Position:
        return (self.x + self.direction.dx, self.y + self.direction.dy)

    def hits_self(self, x: int, y: int) -> bool:
        return (x, y) in self.body

    def move(self) -> None:
        """Step the head forward and drag the trail along behind it."""
        self.x, self.y = self.next_position()
        self.body = self.body[1:] + [self.head()]

    def grow(self) -> bool:
        """Add one cell at the head, up to the maximum length."""
        if self.length >= MAX_LENGTH:
            return False
        self.body.append(self.head())
        return True


class Board:
    """The playing field; cells 1..width by 1..height lie inside the walls."""

    def __init__(self, width: int = 40, height: int = 20):
        if width < 2 or height < 2:
            raise ValueError("board must be at least 2 by 2")
        self.width = width
        self.height = height

    def inside(self, x: int, y: int) -> bool:
        return 1 <= x <= self.width and 1 <= y <= self.height

    def random_food(self, rng: random.Random) -> Position:
        return (rng.randrange(self.width - 1) + 1, rng.randrange(self.height - 1) + 1)


class Duel:
    """Two snakes racing for food against the clock."""

    def __init__(
        self,
        width: int = 40,
        height: int = 20,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
        time_limit: float = TIME_LIMIT,
    ):
        self.board = Board(width, height)
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock
        self.time_limit = time_limit
        self.started = clock()

        self.snake1 = Snake(1, 1, Direction.RIGHT)
        self.snake2 = Snake(width - 5, 1, Direction.LEFT)
        self.score1 = 0
        self.score2 = 0
        self.dead1 = False
        self.dead2 = False
        self.over = False
        self.aborted = False
        self.food: Position = (self.rng.randrange(width), self.rng.randrange(height))

        self._bindings = {
            "KEY_LEFT": (self.snake1, Direction.LEFT),
            "KEY_RIGHT": (self.snake1, Direction.RIGHT),
            "KEY_UP": (self.snake1, Direction.UP),
            "KEY_DOWN": (self.snake1, Direction.DOWN),
            "a": (self.snake2, Direction.LEFT),
            "d": (self.snake2, Direction.RIGHT),
            "w": (self.snake2, Direction.UP),
            "s": (self.snake2, Direction.DOWN),
        }

    @property
    def finished(self) -> bool:
        return self.over or self.aborted

    def handle_key(self, key: Optional[str]) -> bool:
        """Apply a key press; return whether this frame should go on to a tick.

        Also ends the game once the time limit is reached.
        """
        if self.clock() - self.started >= self.time_limit:
            self.over = True
        if key == QUIT_KEY:
            self.aborted = True
            return False
        binding = self._bindings.get(key) if key is not None else None
        if binding is not None:
            snake, direction = binding
            if not snake.turn(direction):
                return False
        return True

    def tick(self) -> None:
        """Advance both snakes one step and resolve collisions and food."""
        s1, s2 = self.snake1, self.snake2

        next1 = s1.next_position()
        if s1.hits_self(*next1):
            self.dead1 = True
            self.over = True
        if not self.board.inside(*next1):
            self.dead1 = True
            self.over = True
            return

        next2 = s2.next_position()
        if s2.hits_self(*next2):
            self.dead2 = True
            self.over = True
        if not self.board.inside(*next2):
            self.dead2 = True
            self.over = True
            return

        s1.move()
        s2.move()

        if s1.head() in s2.body[:-1]:
            self.dead1 = True
            self.over = True
        if s2.head() in s1.body[:-1]:
            self.dead2 = True
            self.over = True

        if s1.head() == s2.head():
            if s1.length > s2.length:
                self.dead2 = True
            elif s2.length > s1.length:
                self.dead1 = True
            else:
                self.over = True

        if self.food == s1.head():
            self.food = self.board.random_food(self.rng)
            self.score1 += 1
            s1.grow()
        if self.food == s2.head():
            self.food = self.board.random_food(self.rng)
            self.score2 += 1
            s2.grow()