from abc import ABC, abstractmethod


class Arena(ABC):
    @property
    @abstractmethod
    def player_generator(self):
        pass

    def __init__(
        self,
        left_strategy="random",
        right_strategy="random",
        left_generator=None,
        right_generator=None,
        num_rounds=10,
    ):
        left_generator = left_generator or self.player_generator
        right_generator = right_generator or self.player_generator
        self.left_player = left_generator(side="left", strategy=left_strategy)
        self.right_player = right_generator(side="right", strategy=right_strategy)
        self.num_rounds = num_rounds
        self.history = []

    def play_round(self):
        left_move = self.left_player.choose_move()
        right_move = self.right_player.choose_move()
        outcome = self.evaluate_round_outcome(left_move, right_move)
        self.left_player.update_state(outcome)
        self.right_player.update_state(outcome)
        self.history.append(outcome)
        return outcome

    def play_game(self):

        while not self.is_game_end(self.left_player, self.right_player):
            self.play_round()

        game_outcome = self.evaluate_game_outcome(self.left_player, self.right_player)
        return game_outcome

    @abstractmethod
    def is_game_end(self, left_player, right_player):
        pass

    @abstractmethod
    def evaluate_round_outcome(self, left_move, right_move):
        pass

    @abstractmethod
    def evaluate_game_outcome(self, left_player, right_player):
        pass
