import logging
from rpsbot.rps.rps_moves import InvalidMove, Move, Outcome
from rpsbot.rps.rps_player import random_move
from rpsbot.rps.rps_rules import resolve_outcome

log = logging.getLogger(__name__)

PROMPT = "Your move (rock/paper/scissors, r/p/s or 0-2): "

messages = {
    Outcome.WIN: "You win!",
    Outcome.LOSE: "The computer wins.",
    Outcome.DRAW: "It's a draw.",
}


def ask_for_move(prompt=PROMPT):
    # Keeps asking until the input names a move
    while True:
        raw = input(prompt)
        try:
            return Move.from_name(raw)
        except InvalidMove as error:
            log.debug("Rejected input %r", raw)
            print(error)


def play_against_computer():
    player_move = ask_for_move()
    computer_move = random_move()
    outcome = resolve_outcome(player_move, computer_move)

    print(f"You played {player_move.label}, the computer played {computer_move.label}")
    print(messages[outcome])
    return outcome


def main():
    """Play one round, return the exit code for the shell."""
    try:
        play_against_computer()
    except (EOFError, KeyboardInterrupt):
        print()
        print("No move given, bye.")
        return 1
    return 0
