from typing import Dict
import nashpy as nash
import numpy as np
from rpsbot.rps.rps_moves import Move, rps_moves
from rpsbot.rps.rps_rules import PAYOFF_TABLE


def policy_vector(policy: Dict[Move, float]) -> np.ndarray:
    return np.array([policy.get(move, 0.0) for move in rps_moves], dtype=float)


def get_nash_equilibria(A=PAYOFF_TABLE, return_value=False):
    """Equilibrium mixed strategies of the zero sum game with left payoffs A.

    For the standard table both players mix uniformly and the game is worth 0,
    which is why a uniform random opponent cannot be exploited.
    """
    A = np.asarray(A)
    rps = nash.Game(A, -A)
    eqs = rps.support_enumeration()
    player_1, player_2 = list(eqs)[0]
    optimum_1 = {move: float(prob) for move, prob in zip(rps_moves, player_1)}
    optimum_2 = {move: float(prob) for move, prob in zip(rps_moves, player_2)}

    if return_value:
        p1_value = np.array(player_1).T @ A @ np.array(player_2)
        return optimum_1, optimum_2, float(p1_value)
    return optimum_1, optimum_2


def expected_payoff(left_policy, right_policy, A=PAYOFF_TABLE) -> float:
    left_vector = policy_vector(left_policy)
    right_vector = policy_vector(right_policy)
    return float(left_vector.T @ np.asarray(A) @ right_vector)
