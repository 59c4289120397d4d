import random
import unittest
import pandas as pd
from rpsbot.rps.rps_moves import Move
from rpsbot.rps.rps_stats import is_uniform, run_games, sample_move_frequencies


class TestMoveFrequencies(unittest.TestCase):
    def test_random_opponent_is_uniform(self):
        random.seed(10)
        frequencies = sample_move_frequencies(num_trials=30000)
        assert list(frequencies.index) == ["Rock", "Paper", "Scissors"]
        self.assertAlmostEqual(frequencies.sum(), 1, places=6)
        assert is_uniform(frequencies)

    def test_biased_generator_detected(self):
        frequencies = sample_move_frequencies(
            num_trials=300, move_generator=lambda: Move.ROCK
        )
        assert frequencies["Rock"] == 1
        assert frequencies["Paper"] == 0
        assert not is_uniform(frequencies)

    def test_non_positive_trials(self):
        with self.assertRaises(ValueError):
            sample_move_frequencies(num_trials=0)


class TestRunGames(unittest.TestCase):
    def test_outcome_frame(self):
        random.seed(3)
        outcome_df = run_games(num_games=20, num_rounds=5)
        assert isinstance(outcome_df, pd.DataFrame)
        assert len(outcome_df) == 20
        assert (outcome_df.rounds == 5).all()
        assert (
            outcome_df.score_diff == outcome_df.left_score - outcome_df.right_score
        ).all()
        assert set(outcome_df.winner) <= {"left", "right", "draw"}
