"""Decision policy for computer-controlled seats.

Deliberately simple: play the leftmost legal card, and name the color
the seat holds most of after a wild.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import TYPE_CHECKING, Optional, Sequence

from unotable.engine.card import BASE_COLORS, Card, Color
from unotable.engine.rules import can_play

if TYPE_CHECKING:
    from unotable.engine.turn_engine import TurnEngine

logger = logging.getLogger(__name__)


class ComputerPolicy:
    """Chooses cards and colors for computer seats and plays their turns."""

    def choose_card_to_play(
        self,
        hand: Sequence[Card],
        top_discard: Optional[Card],
        active_color: Color,
    ) -> Optional[int]:
        """Index of the leftmost playable card, or None."""
        for i, card in enumerate(hand):
            if can_play(card, top_discard, active_color, hand):
                return i
        return None

    def choose_color_on_wild(self, hand: Sequence[Card]) -> Color:
        """Most frequent base color among non-wild cards, ties in Red/Blue/Green/Yellow order."""
        counts = Counter(card.color for card in hand if not card.is_wild)
        chosen = Color.RED  # Default if no colored cards in hand
        best = 0
        for color in BASE_COLORS:
            if counts[color] > best:
                best = counts[color]
                chosen = color
        return chosen

    def run_turn(self, engine: TurnEngine, seat_index: int) -> str:
        """Play one turn for a computer seat.

        Returns what happened: "blocked", "play", "draw_and_play" or "draw_and_pass".
        Further seats are chained by the scheduler, not from here.
        """
        if not engine.can_act(seat_index):
            logger.debug("seat %d turn skipped: blocked or not active", seat_index)
            return "blocked"

        state = engine.state
        hand = state.seats[seat_index].hand
        index = self.choose_card_to_play(hand, state.top_discard(), state.active_color)
        if index is not None:
            engine.play_card(seat_index, index)
            return "play"

        drawn = engine.draw_card(seat_index)
        # The engine keeps the turn with this seat only when the drawn card is playable
        if drawn is not None and engine.can_act(seat_index):
            engine.play_card(seat_index, len(hand) - 1)
            return "draw_and_play"
        return "draw_and_pass"
