from rpsbot.rps.rps_equilibrium import expected_payoff, get_nash_equilibria
from rpsbot.rps.rps_moves import Move, rps_moves
import numpy as np
import unittest


class TestEquilibrium(unittest.TestCase):
    def test_standard_table_is_uniform(self):
        player_1, player_2, value = get_nash_equilibria(return_value=True)
        for move in rps_moves:
            self.assertAlmostEqual(player_1[move], 1 / 3, places=6)
            self.assertAlmostEqual(player_2[move], 1 / 3, places=6)
        self.assertAlmostEqual(value, 0, places=6)

    def test_weighted_table(self):
        # Rock beating scissors pays double
        A = np.array([[0, -1, 2], [1, 0, -1], [-2, 1, 0]])
        player_1, player_2 = get_nash_equilibria(A)
        self.assertAlmostEqual(sum(player_1.values()), 1, places=6)
        self.assertAlmostEqual(player_1[Move.ROCK], 0.25, places=6)
        self.assertAlmostEqual(player_1[Move.PAPER], 0.5, places=6)
        self.assertAlmostEqual(player_1[Move.SCISSORS], 0.25, places=6)

    def test_uniform_policy_cannot_be_exploited(self):
        uniform = {move: 1 / 3 for move in rps_moves}
        for move in rps_moves:
            pure = {move: 1.0}
            self.assertAlmostEqual(expected_payoff(pure, uniform), 0, places=6)

    def test_pure_policies(self):
        assert expected_payoff({Move.ROCK: 1.0}, {Move.SCISSORS: 1.0}) == 1
        assert expected_payoff({Move.ROCK: 1.0}, {Move.PAPER: 1.0}) == -1
        assert expected_payoff({Move.PAPER: 1.0}, {Move.PAPER: 1.0}) == 0
