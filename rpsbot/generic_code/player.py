from abc import ABC, abstractmethod


class Player(ABC):
    """
    Class for a player sitting on one side of an arena.
    A player is a strategy plus its bookkeeping of both sides of the table.

    ...

    Attributes:
    ----------
    strategy:
        Name of the strategy used to choose moves.
    side:
        Either "left" or "right".
    own_state / other_state:
        Running score and move counts for this player and its opponent.

    Methods
    -------
    choose_move():
        Pick the next move according to the strategy.
    update_state(update_dict):
        Apply a round outcome container to both states.
    """

    def __init__(self, strategy="random", side="left"):
        self.strategy = strategy
        self.side = side

        if side == "left":
            self.other_side = "right"
        else:
            self.other_side = "left"

        self.own_state = self.generate_initial_state()
        self.other_state = self.generate_initial_state()

    @abstractmethod
    def generate_initial_state(self):
        pass

    @abstractmethod
    def choose_move(self):
        pass

    def update_state(self, update_dict):
        # Updates internal representations of self and other
        self.update_specific_state(update_dict[self.side], self.own_state)
        self.update_specific_state(update_dict[self.other_side], self.other_state)

    @abstractmethod
    def update_specific_state(self, update_dict, state):
        pass
