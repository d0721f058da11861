import random

import pytest

from snakeduel.model import Board, Direction, Duel, Snake


def quiet_duel(**kwargs):
    duel = Duel(rng=random.Random(1), **kwargs)
    duel.food = (duel.board.width, duel.board.height)
    return duel


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.LEFT, (4, 5)),
        (Direction.RIGHT, (6, 5)),
        (Direction.UP, (5, 4)),
        (Direction.DOWN, (5, 6)),
    ],
)
def test_direction_steps_and_opposites(direction, expected):
    snake = Snake(5, 5, direction)
    assert snake.next_position() == expected
    assert snake.turn(direction.opposite) is False
    assert snake.direction is direction


def test_snake_refuses_reversal():
    snake = Snake(5, 5, Direction.RIGHT)
    assert snake.turn(Direction.LEFT) is False
    assert snake.direction is Direction.RIGHT
    assert snake.turn(Direction.UP) is True
    assert snake.direction is Direction.UP


def test_snake_move_shifts_trail():
    snake = Snake(5, 5, Direction.RIGHT, length=3)
    assert snake.next_position() == (6, 5)
    snake.move()
    snake.move()
    assert snake.head() == (7, 5)
    assert snake.body == [None, (6, 5), (7, 5)]
    assert snake.length == 3


def test_snake_hits_self():
    snake = Snake(5, 5, Direction.RIGHT, length=4)
    for _ in range(3):
        snake.move()
    assert snake.hits_self(6, 5)
    assert not snake.hits_self(5, 5)


def test_snake_grow_and_limit():
    snake = Snake(1, 1, Direction.RIGHT, length=499)
    assert snake.grow() is True
    assert snake.length == 500
    assert snake.body[-1] == (1, 1)
    assert snake.grow() is False
    assert snake.length == 500


def test_snake_needs_a_cell():
    with pytest.raises(ValueError):
        Snake(1, 1, Direction.RIGHT, length=0)


def test_board_inside():
    board = Board(40, 20)
    assert board.inside(1, 1)
    assert board.inside(40, 20)
    assert not board.inside(0, 5)
    assert not board.inside(41, 5)
    assert not board.inside(5, 21)


def test_random_food_stays_inside():
    board = Board(40, 20)
    rng = random.Random(7)
    for _ in range(200):
        assert board.inside(*board.random_food(rng))


def test_starting_positions():
    duel = quiet_duel()
    assert duel.snake1.head() == (1, 1)
    assert duel.snake2.head() == (35, 1)
    assert duel.snake1.length == 10
    assert duel.snake2.direction is Direction.LEFT


def test_turn_then_tick():
    duel = quiet_duel()
    assert duel.handle_key("KEY_DOWN") is True
    duel.tick()
    assert duel.snake1.head() == (1, 2)
    assert duel.snake2.head() == (34, 1)


def test_reversal_key_skips_frame():
    duel = quiet_duel()
    assert duel.handle_key("KEY_LEFT") is False
    assert duel.snake1.direction is Direction.RIGHT
    assert duel.handle_key("d") is False
    assert duel.snake2.direction is Direction.LEFT


def test_quit_key():
    duel = quiet_duel()
    assert duel.handle_key("e") is False
    assert duel.aborted
    assert duel.finished


def test_player1_hits_wall():
    duel = quiet_duel()
    duel.handle_key("KEY_UP")
    duel.tick()
    assert duel.dead1 and duel.over
    assert not duel.dead2


def test_player2_hits_wall():
    duel = quiet_duel()
    duel.handle_key("w")
    duel.tick()
    assert duel.dead2 and duel.over
    assert not duel.dead1


def test_equal_heads_collide_ends_without_deaths():
    duel = quiet_duel()
    while not duel.finished:
        duel.handle_key(None)
        duel.tick()
    assert duel.snake1.head() == duel.snake2.head()
    assert not duel.dead1 and not duel.dead2


def test_longer_snake_wins_head_collision():
    duel = quiet_duel()
    duel.snake1.grow()
    for _ in range(17):
        duel.tick()
    assert duel.snake1.head() == duel.snake2.head()
    assert duel.dead2
    assert not duel.dead1


def test_eating_food():
    duel = quiet_duel()
    duel.food = (2, 1)
    duel.tick()
    assert duel.score1 == 1
    assert duel.score2 == 0
    assert duel.snake1.length == 11
    assert duel.board.inside(*duel.food)


def test_time_limit():
    now = [0.0]
    duel = quiet_duel(clock=lambda: now[0])
    duel.handle_key(None)
    assert not duel.over
    now[0] = 120.0
    duel.handle_key(None)
    assert duel.over
    assert not duel.aborted