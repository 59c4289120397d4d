import logging
from collections import Counter
import pandas as pd
from tqdm import tqdm
from rpsbot.rps.rps_arena import RPSArena
from rpsbot.rps.rps_moves import rps_moves
from rpsbot.rps.rps_player import random_move

log = logging.getLogger(__name__)

DEFAULT_NUM_TRIALS = 30000
# Roughly seven standard deviations of a 1/3 frequency over 30000 draws
DEFAULT_TOLERANCE = 0.02


def sample_move_frequencies(
    num_trials=DEFAULT_NUM_TRIALS, move_generator=random_move, progress=False
):
    """Draw num_trials moves and return the observed frequency per move label."""
    if num_trials <= 0:
        raise ValueError(f"num_trials has to be positive, got {num_trials}")

    draws = range(num_trials)
    if progress:
        draws = tqdm(draws, desc="Sampling moves ...")

    counter = Counter(move_generator() for _ in draws)
    frequencies = pd.Series(
        {move.label: counter[move] / num_trials for move in rps_moves},
        name="frequency",
    )
    log.debug(
        "Observed move frequencies over %d draws: %s",
        num_trials,
        frequencies.to_dict(),
    )
    return frequencies


def is_uniform(frequencies, tolerance=DEFAULT_TOLERANCE):
    expected = 1 / len(rps_moves)
    deviations = (frequencies - expected).abs()
    if (deviations > tolerance).any():
        log.warning(
            "Move frequencies deviate from uniform by up to %.4f", deviations.max()
        )
        return False
    return True


def run_games(
    num_games=100,
    left_strategy="random",
    right_strategy="random",
    num_rounds=10,
    progress=False,
):
    games = range(num_games)
    if progress:
        games = tqdm(games, desc="Running games ...")

    outcomes = []
    for _ in games:
        arena = RPSArena(
            left_strategy=left_strategy,
            right_strategy=right_strategy,
            num_rounds=num_rounds,
        )
        outcomes.append(arena.play_game())

    outcome_df = pd.DataFrame.from_records(
        outcomes, columns=["winner", "left_score", "right_score", "rounds"]
    )
    outcome_df["score_diff"] = outcome_df.left_score - outcome_df.right_score
    return outcome_df
