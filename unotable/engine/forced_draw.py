"""Forced draws from Draw Two and Wild Draw Four.

A computer seat hit by a draw card takes its cards at once and loses its
turn. The human seat has to draw the owed cards one at a time; until it
has, every play is blocked and the human seat is temporarily active.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from unotable.engine.table import EnginePhase, PendingDraw
from unotable.gateway.protocol import AudioCue

if TYPE_CHECKING:
    from unotable.engine.card import Card
    from unotable.engine.turn_engine import TurnEngine

logger = logging.getLogger(__name__)


class ForcedDrawSequencer:
    """Runs multi-card draw obligations for the engine it is bound to."""

    def __init__(self, engine: TurnEngine):
        self._engine = engine

    def begin(self, count: int) -> None:
        """Make the seat after the active seat draw count cards and lose its turn."""
        state = self._engine.state
        if state.pending_draw is not None:
            raise RuntimeError("A forced draw is already outstanding")

        target = state.seats[state.next_seat_index()]
        if target.is_computer:
            for _ in range(count):
                self._engine.draw_into(target.index)
            state.record(f"{target.name} drew {count} cards (penalty) and is skipped")
            self._engine.hand_turn_to(state.step(target.index))
            return

        # Human target: hand it the table until the draws are done
        state.pending_draw = PendingDraw(
            owed_count=count,
            target_seat_index=target.index,
            restore_seat_index=state.active_seat_index,
        )
        state.active_seat_index = target.index
        state.phase = EnginePhase.AWAITING_HUMAN_FORCED_DRAW
        state.record(f"{target.name} must draw {count} cards")
        self._engine.audio.cue(AudioCue.FORCED_DRAW_REQUIRED, target.index)
        logger.info("seat %d owes %d forced draws", target.index, count)

    def resolve_one_human_draw(self) -> Card:
        """Draw one owed card; once none are owed, pass the turn past the drawing seat."""
        state = self._engine.state
        pending = state.pending_draw
        if pending is None:
            raise RuntimeError("No forced draw is outstanding")

        card = self._engine.draw_into(pending.target_seat_index)
        pending.owed_count -= 1
        drawer = state.seats[pending.target_seat_index]
        if pending.owed_count > 0:
            state.record(f"{drawer.name} drew a penalty card ({pending.owed_count} still owed)")
            return card

        state.record(f"{drawer.name} finished drawing penalty cards and is skipped")
        state.active_seat_index = pending.restore_seat_index
        state.pending_draw = None
        state.phase = EnginePhase.AWAITING_PLAY
        # One advance that skips the seat which just drew
        self._engine.hand_turn_to(state.step(pending.target_seat_index))
        return card
