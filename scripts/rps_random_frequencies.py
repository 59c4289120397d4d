import logging
from rpsbot.common.logs import configure_logging
from rpsbot.rps.rps_equilibrium import get_nash_equilibria
from rpsbot.rps.rps_stats import is_uniform, run_games, sample_move_frequencies

configure_logging(level=logging.INFO, log_file="rps_random_frequencies.log")
log = logging.getLogger("rpsbot.scripts")

equilibrium, _, value = get_nash_equilibria(return_value=True)
log.info(
    "Equilibrium %s, game value %.3f",
    {move.label: prob for move, prob in equilibrium.items()},
    value,
)

frequencies = sample_move_frequencies(progress=True)
log.info("Random opponent frequencies:\n%s", frequencies)
log.info("Uniform within tolerance: %s", is_uniform(frequencies))

outcome_random_df = run_games(num_games=100, progress=True)
outcome_nash_df = run_games(num_games=100, right_strategy="nash", progress=True)

log.info("Random vs random mean score diff: %.3f", outcome_random_df.score_diff.mean())
log.info("Random vs nash mean score diff: %.3f", outcome_nash_df.score_diff.mean())
log.info("Winners random vs nash:\n%s", outcome_nash_df.winner.value_counts())
