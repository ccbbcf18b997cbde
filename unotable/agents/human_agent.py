"""Terminal agent for the human seat."""

from typing import Optional

import typer

from unotable.engine.actions import Action, ChooseColor, DrawCard
from unotable.engine.table import TableSnapshot


def describe_action(action: Action, snapshot: TableSnapshot) -> str:
    if isinstance(action, DrawCard):
        if snapshot.required_draws:
            return f"DRAW (penalty, {snapshot.required_draws} left)"
        return "DRAW"
    if isinstance(action, ChooseColor):
        return f"COLOR {action.color.value}"
    return f"PLAY {snapshot.my_hand[action.hand_index]}"


def parse_choice(raw: str, legal_actions: list[Action]) -> Optional[Action]:
    """Match typed input to a legal action.

    Accepts the listed number, "d" for the draw action, or a color name.
    """
    raw = raw.strip().lower()
    if raw.isdigit():
        idx = int(raw)
        return legal_actions[idx] if idx < len(legal_actions) else None
    for action in legal_actions:
        if raw == "d" and isinstance(action, DrawCard):
            return action
        if isinstance(action, ChooseColor) and raw == action.color.value:
            return action
    return None


class HumanAgent:
    """Asks the person at the terminal what seat 0 does."""

    def __init__(self, name: str = "You"):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def get_action(self, snapshot: TableSnapshot, legal_actions: list[Action]) -> Action | None:
        if not legal_actions:
            return None

        heading = "Choose a color" if isinstance(legal_actions[0], ChooseColor) else "Your turn"
        print(f"\n--- {heading} ---")
        print("Hand:", " ".join(str(c) for c in snapshot.my_hand))
        print(f"Top card: {snapshot.top_discard} (color {snapshot.active_color.value})")
        for number, action in enumerate(legal_actions):
            print(f"  [{number}] {describe_action(action, snapshot)}")

        choice = parse_choice(_read_line(), legal_actions)
        while choice is None:
            print("Not a legal choice, try again.")
            choice = parse_choice(_read_line(), legal_actions)
        return choice


def _read_line() -> str:
    try:
        return input("Choice: ")
    except EOFError:
        # stdin closed
        raise typer.Abort() from None
