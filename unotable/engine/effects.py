"""Special card effects.

resolve() returns True when the effect has taken over turn advancement
(forced draws, a pending human color choice) and the engine must not
advance the turn itself.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from unotable.engine.card import Card, Color, Rank
from unotable.engine.table import EnginePhase

if TYPE_CHECKING:
    from unotable.engine.turn_engine import TurnEngine

logger = logging.getLogger(__name__)


class SpecialEffectResolver:
    """Applies the effect of a just-played card for the engine it is bound to."""

    def __init__(self, engine: TurnEngine):
        self._engine = engine

    def resolve(self, card: Card, seat_index: int) -> bool:
        state = self._engine.state
        if not card.is_wild:
            state.active_color = card.color

        if card.rank is Rank.SKIP:
            return self._skip()
        if card.rank is Rank.REVERSE:
            return self._reverse()
        if card.rank is Rank.DRAW_TWO:
            self._engine.sequencer.begin(card.draw_count)
            return True
        if card.is_wild:
            return self._wild(card, seat_index)
        return False

    def _skip(self) -> bool:
        state = self._engine.state
        skipped = state.next_seat_index()
        state.record(f"{state.seats[skipped].name}'s turn is skipped")
        # Park on the skipped seat; the engine's advance moves one further
        state.active_seat_index = skipped
        return False

    def _reverse(self) -> bool:
        state = self._engine.state
        state.direction = -state.direction
        state.record(
            f"Direction reversed: now playing {'clockwise' if state.direction == 1 else 'counter-clockwise'}"
        )
        if state.seat_count == 2:
            # Reverse acts like Skip: the engine's advance brings the turn back
            state.active_seat_index = state.next_seat_index()
        return False

    def _wild(self, card: Card, seat_index: int) -> bool:
        state = self._engine.state
        seat = state.seats[seat_index]
        if not seat.is_computer:
            state.phase = EnginePhase.AWAITING_COLOR_CHOICE
            state.record(f"{seat.name} must choose a color")
            self._engine.choice.request_color_choice(seat_index)
            return True

        color = self._engine.policy.choose_color_on_wild(seat.hand)
        self.apply_color(color, seat_index)
        if card.rank is Rank.WILD_DRAW_FOUR:
            self._engine.sequencer.begin(card.draw_count)
            return True
        return False

    def apply_color(self, color: Color, seat_index: int) -> None:
        state = self._engine.state
        state.active_color = color
        state.record(f"{state.seats[seat_index].name} chose {color.value}")
        logger.debug("active color set to %s by seat %d", color.value, seat_index)
