from __future__ import annotations
from enum import Enum, IntEnum
from numbers import Integral
from typing import Any, List


class InvalidMove(ValueError):
    """Raised when a value is not one of Rock, Paper or Scissors."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"{value!r} is not a valid move, expected one of "
            f"{[move.name.capitalize() for move in Move]} or 0-2"
        )


class Move(IntEnum):
    """
    The three choices of the game, doubling as row/column index into the
    payoff table.

    ...

    Attributes:
    ----------
    ROCK:
        Index 0. Crushes scissors.
    PAPER:
        Index 1. Covers rock.
    SCISSORS:
        Index 2. Cuts paper.

    Methods
    -------
    validate(value):
        Return the Move for a Move or int 0-2, raise InvalidMove otherwise.
    from_name(name):
        Parse "rock", "R", "Paper", ... into a Move.
    """

    ROCK = 0
    PAPER = 1
    SCISSORS = 2

    @classmethod
    def validate(cls, value: Any) -> Move:
        # bool is an int subclass, True would silently become PAPER
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise InvalidMove(value)
        try:
            return cls(int(value))
        except ValueError:
            raise InvalidMove(value) from None

    @classmethod
    def from_name(cls, name: str) -> Move:
        if not isinstance(name, str):
            raise InvalidMove(name)
        cleaned = name.strip().upper()
        for move in cls:
            if cleaned in (move.name, move.name[0]):
                return move
        # isdigit would let through superscripts that int() rejects
        if cleaned.isdecimal():
            return cls.validate(int(cleaned))
        raise InvalidMove(name)

    @property
    def label(self) -> str:
        return self.name.capitalize()


class Outcome(Enum):
    """Result of a round for player one, valued by its payoff."""

    WIN = 1
    DRAW = 0
    LOSE = -1

    @property
    def opposite(self) -> Outcome:
        return Outcome(-self.value)

    @property
    def winner(self) -> str:
        if self is Outcome.WIN:
            return "left"
        elif self is Outcome.LOSE:
            return "right"
        return "draw"


rps_moves: List[Move] = list(Move)
