from typing import Any, Dict, Tuple
import numpy as np
from rpsbot.rps.rps_moves import Move, Outcome, rps_moves


class InvalidPayoffTable(ValueError):
    pass


# Rows are the left player's move, columns the right player's move,
# entries the left player's payoff.
PAYOFF_TABLE = np.array(
    [
        # Rock, Paper, Scissors
        [0, -1, 1],  # Rock
        [1, 0, -1],  # Paper
        [-1, 1, 0],  # Scissors
    ],
    dtype=int,
)
PAYOFF_TABLE.setflags(write=False)


def validate_payoff_table(table) -> np.ndarray:
    table = np.asarray(table)
    num_moves = len(rps_moves)
    if table.shape != (num_moves, num_moves):
        raise InvalidPayoffTable(
            f"Payoff table must be {num_moves}x{num_moves}, got shape {table.shape}"
        )
    if not np.isin(table, [-1, 0, 1]).all():
        raise InvalidPayoffTable("Payoff table entries must be one of -1, 0 or 1")
    if np.any(np.diag(table) != 0):
        raise InvalidPayoffTable("Identical moves must draw, diagonal has to be 0")
    if not np.array_equal(table, -table.T):
        raise InvalidPayoffTable("Payoff table is not zero sum, table != -table.T")
    return table


validate_payoff_table(PAYOFF_TABLE)


def resolve_outcome(left_move: Any, right_move: Any) -> Outcome:
    """Outcome for the left player, read straight from the payoff table."""
    left_move = Move.validate(left_move)
    right_move = Move.validate(right_move)
    return Outcome(int(PAYOFF_TABLE[left_move, right_move]))


def determine_suit_winner(left_move: Move, right_move: Move) -> str:
    # Branching version of the table lookup, kept as a reference that the
    # table has to agree with
    left_move = Move.validate(left_move)
    right_move = Move.validate(right_move)

    if left_move == right_move:
        return "draw"

    if left_move == Move.ROCK:
        # Rock beats Scissors
        if right_move == Move.SCISSORS:
            return "left"
        # Rock loses to paper
        elif right_move == Move.PAPER:
            return "right"
    elif left_move == Move.PAPER:
        # Paper covers rock
        if right_move == Move.ROCK:
            return "left"
        # Paper gets cut by scissors
        elif right_move == Move.SCISSORS:
            return "right"
    elif left_move == Move.SCISSORS:
        # Scissors get crushed by rock
        if right_move == Move.ROCK:
            return "right"
        # Scissors cut paper
        elif right_move == Move.PAPER:
            return "left"


def determine_score(winner: str) -> Tuple[int, int]:

    if winner == "left":
        left_score = 1
        right_score = 0
    elif winner == "right":
        left_score = 0
        right_score = 1
    else:  # Draw
        left_score = 0
        right_score = 0

    return left_score, right_score


def determine_rps_outcome(left_move: Any, right_move: Any) -> Tuple[str, int, int]:

    outcome = resolve_outcome(left_move, right_move)
    left_score, right_score = determine_score(outcome.winner)

    return outcome.winner, left_score, right_score


def generate_rps_payoff_lookup() -> Dict[Tuple[Move, Move], Dict[str, Any]]:

    pay_off_matrix = {}
    for left_move in rps_moves:
        for right_move in rps_moves:
            outcome = resolve_outcome(left_move, right_move)
            left_score, right_score = determine_score(outcome.winner)
            pay_off_matrix[(left_move, right_move)] = {
                "left": outcome.value,
                "right": outcome.opposite.value,
                "winner": outcome.winner,
                "outcome": outcome,
                "left_score": left_score,
                "right_score": right_score,
            }

    return pay_off_matrix
