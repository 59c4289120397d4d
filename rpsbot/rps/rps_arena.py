import logging
from rpsbot.generic_code.arena import Arena
from rpsbot.rps.rps_moves import Move
from rpsbot.rps.rps_player import RPSPlayer
import rpsbot.rps.rps_rules as rps

log = logging.getLogger(__name__)


class RPSArena(Arena):

    player_generator = RPSPlayer
    payoff_lookup = rps.generate_rps_payoff_lookup()

    def is_game_end(self, left_player, right_player):
        return len(self.history) >= self.num_rounds

    def evaluate_game_outcome(self, left_player, right_player):
        left_score = left_player.own_state["score"]
        right_score = right_player.own_state["score"]

        if left_score > right_score:
            winner = "left"
        elif right_score > left_score:
            winner = "right"
        else:
            winner = "draw"

        log.debug(
            "Game finished after %d rounds, %s wins %d:%d",
            len(self.history),
            winner,
            left_score,
            right_score,
        )
        return {
            "winner": winner,
            "left_score": left_score,
            "right_score": right_score,
            "rounds": len(self.history),
        }

    def evaluate_round_outcome(self, left_move, right_move):
        left_move = Move.validate(left_move)
        right_move = Move.validate(right_move)
        outcome = self.payoff_lookup[(left_move, right_move)]

        log.debug("%s vs %s: %s", left_move.label, right_move.label, outcome["winner"])
        outcome = self.build_outcome_container(
            winner=outcome["winner"],
            left_score=outcome["left_score"],
            right_score=outcome["right_score"],
            left_move=left_move,
            right_move=right_move,
        )

        return outcome

    @staticmethod
    def build_outcome_container(winner, left_score, right_score, left_move, right_move):

        outcome = {
            "left": {"score": left_score, "moves": [left_move]},
            "right": {"score": right_score, "moves": [right_move]},
            "winner": winner,
        }
        return outcome
