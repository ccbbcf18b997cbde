"""Game engine for Uno.

Import TurnEngine from unotable.engine.turn_engine.
"""

from unotable.engine.card import BASE_COLORS, Card, Color, Rank
from unotable.engine.deck import DECK_SIZE, DeckFactory, create_deck
from unotable.engine.errors import (
    DeckExhaustedError,
    InvalidDraw,
    InvalidPlay,
    NoColorChoicePending,
    OutOfTurnAction,
    RuleViolation,
)
from unotable.engine.table import (
    HUMAN_SEAT,
    Controller,
    EnginePhase,
    PendingDraw,
    Seat,
    TableSnapshot,
    TableState,
)
from unotable.engine.rules import can_play, has_legal_move, playable_indices
from unotable.engine.actions import (
    Action,
    ChooseColor,
    DrawCard,
    PlayCard,
    apply_action,
    get_legal_actions,
)

__all__ = [
    "BASE_COLORS",
    "Card",
    "Color",
    "Rank",
    "DECK_SIZE",
    "DeckFactory",
    "create_deck",
    "DeckExhaustedError",
    "InvalidDraw",
    "InvalidPlay",
    "NoColorChoicePending",
    "OutOfTurnAction",
    "RuleViolation",
    "HUMAN_SEAT",
    "Controller",
    "EnginePhase",
    "PendingDraw",
    "Seat",
    "TableSnapshot",
    "TableState",
    "can_play",
    "has_legal_move",
    "playable_indices",
    "Action",
    "ChooseColor",
    "DrawCard",
    "PlayCard",
    "apply_action",
    "get_legal_actions",
]
