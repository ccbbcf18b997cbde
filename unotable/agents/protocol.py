"""Interface for whoever drives seat 0."""

from typing import Protocol

from unotable.engine.actions import Action
from unotable.engine.table import TableSnapshot


class AgentProtocol(Protocol):
    """Picks seat 0's moves; computer seats are run by the scheduler instead."""

    @property
    def name(self) -> str: ...

    def get_action(self, snapshot: TableSnapshot, legal_actions: list[Action]) -> Action | None:
        """Return one of legal_actions.

        None lets the runner fall back to drawing (or the first legal action).
        """
        ...
