"""Deck construction, shuffling and dealing."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, List, Optional, Sequence

from unotable.engine.card import ACTION_RANKS, BASE_COLORS, NUMERAL_RANKS, Card, Color, Rank

if TYPE_CHECKING:
    from unotable.engine.table import Seat

DECK_SIZE = 108
# Skip, Reverse and Draw Two twice per color, plus 8 wilds
NON_NUMERAL_COUNT = 32


class DeckFactory:
    """Builds and deals the closed 108-card deck.

    A seed makes every shuffle (including reshuffles of the discard pile
    during play) reproducible.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def build(self) -> List[Card]:
        """Create a standard 108-card deck in fixed order.

        - 4 colors x (one 0, two each of 1-9, Skip, Reverse, Draw Two): 100 cards
        - 4 Wild, 4 Wild Draw Four: 8 cards
        """
        cards: List[Card] = []

        for color in BASE_COLORS:
            cards.append(Card(color=color, rank=Rank.ZERO))
            for rank in NUMERAL_RANKS[1:] + ACTION_RANKS:
                cards.append(Card(color=color, rank=rank))
                cards.append(Card(color=color, rank=rank))

        for _ in range(4):
            cards.append(Card(color=Color.WILD, rank=Rank.WILD))
            cards.append(Card(color=Color.WILD, rank=Rank.WILD_DRAW_FOUR))

        return cards

    def shuffle(self, cards: Sequence[Card]) -> List[Card]:
        """Return a shuffled copy of cards."""
        shuffled = list(cards)
        self._rng.shuffle(shuffled)
        return shuffled

    def deal(self, seats: Sequence[Seat], deck: List[Card], per_seat: int) -> None:
        """Deal per_seat cards to every seat, one at a time, from the top of deck."""
        for _ in range(per_seat):
            for seat in seats:
                seat.hand.append(deck.pop())

    def pick_initial_discard(self, deck: List[Card]) -> Card:
        """Remove and return the topmost numeral card of deck."""
        for i in range(len(deck) - 1, -1, -1):
            if deck[i].is_numeral:
                return deck.pop(i)
        raise ValueError("Deck holds no numeral card to start the discard pile")


def create_deck(seed: Optional[int] = None) -> List[Card]:
    """Build and shuffle a fresh deck."""
    factory = DeckFactory(seed=seed)
    return factory.shuffle(factory.build())


def max_hand_size(seat_count: int) -> int:
    """Largest hand size that still leaves a numeral card to start the discard pile."""
    return (DECK_SIZE - NON_NUMERAL_COUNT - 1) // seat_count
