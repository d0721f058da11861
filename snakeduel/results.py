"""Deciding the winner of a duel and recording results."""

from __future__ import annotations

import os
from enum import Enum
from typing import Optional, Union


class Outcome(Enum):
    PLAYER1 = "player1"
    PLAYER2 = "player2"
    PLAYER1_ON_SCORE = "player1_on_score"
    PLAYER2_ON_SCORE = "player2_on_score"
    TIE = "tie"
    BOTH_DEAD = "both_dead"


_BANNERS = {
    Outcome.PLAYER1: "Player 1 Wins!",
    Outcome.PLAYER2: "Player 2 Wins!",
    Outcome.PLAYER1_ON_SCORE: "Player 1 Wins (Score)!",
    Outcome.PLAYER2_ON_SCORE: "Player 2 Wins (Score)!",
    Outcome.TIE: "It's a tie!",
}

_RECORDS = {
    Outcome.PLAYER1: "Winner: Player 1\n",
    Outcome.PLAYER2: "Winner: Player 2\n",
    Outcome.PLAYER1_ON_SCORE: "Winner: Player 1 (Score)\n",
    Outcome.PLAYER2_ON_SCORE: "Winner: Player 2 (Score)\n",
    Outcome.TIE: "Result: Tie\n",
}


def decide_outcome(score1: int, score2: int, dead1: bool, dead2: bool) -> Outcome:
    """A lone survivor wins; with both alive the higher score wins."""
    if dead1 and not dead2:
        return Outcome.PLAYER2
    if dead2 and not dead1:
        return Outcome.PLAYER1
    if dead1 and dead2:
        return Outcome.BOTH_DEAD
    if score1 > score2:
        return Outcome.PLAYER1_ON_SCORE
    if score2 > score1:
        return Outcome.PLAYER2_ON_SCORE
    return Outcome.TIE


def banner(outcome: Outcome) -> Optional[str]:
    """The message shown on the game-over screen, or None when both died."""
    return _BANNERS.get(outcome)


def record_line(score1: int, score2: int, outcome: Outcome) -> str:
    """The text appended to the score file for one game."""
    return f"Player 1: {score1} | Player 2: {score2} | " + _RECORDS.get(outcome, "")


def save_score(
    score1: int,
    score2: int,
    dead1: bool,
    dead2: bool,
    path: Union[str, os.PathLike] = "score.txt",
) -> bool:
    """Append a game's result to the score file; False if it cannot be opened."""
    line = record_line(score1, score2, decide_outcome(score1, score2, dead1, dead2))
    try:
        with open(path, "a", encoding="utf-8") as handle:
            handle.write(line)
    except OSError:
        return False
    return True