"""Random agent - plays seat 0 without a person, for simulations."""

import random

from unotable.engine.actions import Action, ChooseColor, PlayCard
from unotable.engine.table import TableSnapshot


class RandomAgent:
    """Picks a random legal action, preferring plays over drawing."""

    def __init__(self, name: str = "random", seed: int | None = None):
        self._name = name
        self._rng = random.Random(seed)

    @property
    def name(self) -> str:
        return self._name

    def get_action(self, snapshot: TableSnapshot, legal_actions: list[Action]) -> Action | None:
        if not legal_actions:
            return None

        # Prefer playing over drawing to make game progress
        play_actions = [a for a in legal_actions if isinstance(a, (PlayCard, ChooseColor))]
        if play_actions:
            return self._rng.choice(play_actions)
        return self._rng.choice(legal_actions)
