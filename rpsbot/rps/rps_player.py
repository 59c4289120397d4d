import random
import numpy as np
from rpsbot.generic_code.player import Player
from rpsbot.rps.rps_moves import Move, rps_moves
from rpsbot.rps.rps_equilibrium import get_nash_equilibria


def random_move() -> Move:
    """Uniform draw over the three moves, independent of any earlier draw."""
    return random.choice(rps_moves)


class RPSPlayer(Player):
    def __init__(self, strategy: str = "random", side: str = "left"):
        super().__init__(strategy=strategy, side=side)
        # Only the nash strategy samples from the equilibrium
        self.equilibrium = None
        if strategy == "nash":
            self.equilibrium, _ = get_nash_equilibria()

    def generate_initial_state(self) -> dict:
        state = {}
        state["score"] = 0
        state["rounds"] = 0
        state["moves"] = {move: 0 for move in rps_moves}
        return state

    def choose_move(self) -> Move:
        if self.strategy == "random":
            return self.random_strategy()
        elif self.strategy == "nash":
            return self.nash_strategy()
        else:
            raise NotImplementedError(
                f"The player does not know the suggested strategy {self.strategy!r}"
            )

    def update_specific_state(self, update_dict: dict, state: dict) -> None:
        state["score"] += update_dict["score"]
        state["rounds"] += 1
        for move in update_dict["moves"]:
            state["moves"][Move.validate(move)] += 1

    def random_strategy(self) -> Move:
        return random_move()

    def nash_strategy(self) -> Move:
        return self.sample_from_dict(self.equilibrium)

    @staticmethod
    def sample_from_dict(prob_dict) -> Move:
        moves = []
        probabilities = []
        for move, probability in prob_dict.items():
            moves.append(move)
            probabilities.append(probability)

        probabilities = np.array(probabilities, dtype=float)
        probabilities = probabilities / probabilities.sum()
        # Index first, np.random.choice would turn the moves into plain ints
        index = np.random.choice(len(moves), p=probabilities)
        return moves[index]
