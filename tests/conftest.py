"""Shared fixtures: tables built from a full deck, recording gateways."""

from itertools import chain

import pytest

from unotable.engine import Card, Color, Controller, DeckFactory, Rank, Seat, TableState
from unotable.engine.turn_engine import TurnEngine
from unotable.gateway.console import RecordedChoice


def card(spec: str) -> Card:
    """Parse "red_5", "blue_draw_two", "wild" or "wild_draw_four"."""
    if spec in ("wild", "wild_draw_four"):
        return Card(color=Color.WILD, rank=Rank(spec))
    color, rank = spec.split("_", 1)
    return Card(color=Color(color), rank=Rank(rank))


class RecordingAudio:
    def __init__(self) -> None:
        self.cues = []

    def cue(self, event, seat_index) -> None:
        self.cues.append((event, seat_index))


class RecordingRenderer:
    def __init__(self) -> None:
        self.snapshots = []

    def render(self, snapshot) -> None:
        self.snapshots.append(snapshot)


def build_engine(hands, top, active_color=None, active=0, direction=1, draw=()) -> TurnEngine:
    """Build an engine around a table with the given hands and top discard.

    Every other card of the 108-card deck goes to the draw pile; cards in
    `draw` are placed on top, first one drawn first.
    """
    deck = DeckFactory().build()
    seat_cards = [[card(c) for c in hand] for hand in hands]
    top_card = card(top)
    draw_cards = [card(c) for c in draw]
    for c in chain([top_card], draw_cards, *seat_cards):
        deck.remove(c)

    seats = [Seat(index=0, name="You", controller=Controller.HUMAN, hand=seat_cards[0])]
    for i, hand in enumerate(seat_cards[1:], start=1):
        seats.append(Seat(index=i, name=f"CPU {i}", controller=Controller.COMPUTER, hand=hand))

    state = TableState(
        seats=seats,
        draw_pile=DeckFactory(seed=7).shuffle(deck) + list(reversed(draw_cards)),
        discard_pile=[top_card],
        active_seat_index=active,
        active_color=active_color or top_card.color,
        direction=direction,
    )
    return TurnEngine(
        state,
        deck=DeckFactory(seed=1),
        render=RecordingRenderer(),
        audio=RecordingAudio(),
        choice=RecordedChoice(),
    )


@pytest.fixture
def table():
    return build_engine
