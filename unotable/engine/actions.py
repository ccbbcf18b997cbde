"""Seat actions: the legal moves for a seat and how to apply them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Union

from unotable.engine.card import BASE_COLORS, Color
from unotable.engine.rules import playable_indices
from unotable.engine.table import EnginePhase, TableState

if TYPE_CHECKING:
    from unotable.engine.turn_engine import TurnEngine


@dataclass
class PlayCard:
    """Action: play the card at hand_index."""

    hand_index: int


@dataclass
class DrawCard:
    """Action: draw a card (no legal play, or a forced draw is owed)."""

    pass


@dataclass
class ChooseColor:
    """Action: name the color after playing a wild card."""

    color: Color


Action = Union[PlayCard, DrawCard, ChooseColor]


def get_legal_actions(state: TableState, seat_index: int) -> List[Action]:
    """Return all legal actions for a seat."""
    if state.phase is EnginePhase.ROUND_ENDED:
        return []

    if state.phase is EnginePhase.AWAITING_HUMAN_FORCED_DRAW:
        # Owed draws come first; nothing else is allowed meanwhile
        if state.pending_draw.target_seat_index == seat_index:
            return [DrawCard()]
        return []

    if state.active_seat_index != seat_index:
        return []

    if state.phase is EnginePhase.AWAITING_COLOR_CHOICE:
        return [ChooseColor(color=color) for color in BASE_COLORS]

    hand = state.seats[seat_index].hand
    plays: List[Action] = [
        PlayCard(hand_index=i) for i in playable_indices(hand, state.top_discard(), state.active_color)
    ]
    # Drawing is only allowed with nothing to play
    return plays or [DrawCard()]


def apply_action(engine: TurnEngine, seat_index: int, action: Action) -> None:
    """Apply an action through the engine."""
    if isinstance(action, PlayCard):
        engine.play_card(seat_index, action.hand_index)
    elif isinstance(action, DrawCard):
        engine.draw_card(seat_index)
    elif isinstance(action, ChooseColor):
        engine.choose_color(action.color)
    else:
        raise ValueError(f"Unknown action: {action!r}")
