import io
import random
import unittest
from contextlib import redirect_stdout
from unittest import mock
from rpsbot.rps.rps_console import ask_for_move, main, play_against_computer
from rpsbot.rps.rps_moves import Move, Outcome


class TestAskForMove(unittest.TestCase):
    def test_valid_input(self):
        with mock.patch("builtins.input", side_effect=["paper"]):
            assert ask_for_move() == Move.PAPER

    def test_invalid_input_asks_again(self):
        output = io.StringIO()
        inputs = ["lizard", "²", "r"]
        with mock.patch("builtins.input", side_effect=inputs) as input_mock:
            with redirect_stdout(output):
                move = ask_for_move()

        assert move == Move.ROCK
        assert input_mock.call_count == 3
        assert "'lizard' is not a valid move" in output.getvalue()
        assert "'²' is not a valid move" in output.getvalue()


class TestPlayAgainstComputer(unittest.TestCase):
    def test_round_is_resolved(self):
        output = io.StringIO()
        with mock.patch("builtins.input", side_effect=["rock"]):
            with mock.patch(
                "rpsbot.rps.rps_console.random_move", return_value=Move.SCISSORS
            ):
                with redirect_stdout(output):
                    outcome = play_against_computer()

        assert outcome == Outcome.WIN
        assert "You played Rock, the computer played Scissors" in output.getvalue()
        assert "You win!" in output.getvalue()

    def test_main_returns_zero(self):
        random.seed(10)
        with mock.patch("builtins.input", side_effect=["s"]):
            with redirect_stdout(io.StringIO()):
                assert main() == 0

    def test_main_exits_cleanly_on_eof(self):
        output = io.StringIO()
        with mock.patch("builtins.input", side_effect=EOFError):
            with redirect_stdout(output):
                assert main() == 1
        assert "No move given" in output.getvalue()

    def test_main_exits_cleanly_on_interrupt(self):
        with mock.patch("builtins.input", side_effect=KeyboardInterrupt):
            with redirect_stdout(io.StringIO()):
                assert main() == 1
