"""Terminal and null gateway implementations."""

import logging
from typing import List

import typer

from unotable.engine.table import EnginePhase, TableSnapshot
from unotable.gateway.protocol import AudioCue

logger = logging.getLogger(__name__)


def format_snapshot(snapshot: TableSnapshot) -> str:
    """Format the table as text."""
    lines = [
        "=== Table ===",
        f"Top card: {snapshot.top_discard if snapshot.top_discard else 'None'}"
        f"   Color to match: {snapshot.active_color.value.upper()}",
        f"Direction: {'clockwise' if snapshot.direction == 1 else 'counter-clockwise'}"
        f"   Draw pile: {snapshot.draw_pile_size}",
    ]
    for index, name in enumerate(snapshot.seat_names):
        marker = ">" if index == snapshot.active_seat_index else " "
        low = " (one card!)" if snapshot.low_card_flags[index] else ""
        lines.append(f" {marker} {name}: {snapshot.num_cards_per_seat[index]} cards{low}")
    lines.append("Your hand: " + " ".join(str(c) for c in snapshot.my_hand))
    if snapshot.phase is EnginePhase.AWAITING_HUMAN_FORCED_DRAW:
        lines.append(f"You must draw {snapshot.required_draws} more card(s); your turn is skipped.")
    if snapshot.round_winner is not None:
        lines.append(f"*** {snapshot.seat_names[snapshot.round_winner]} won the round! ***")
    return "\n".join(lines)


class ConsoleRenderer:
    """Prints the table after every transition."""

    def __init__(self, show_history: bool = True):
        self._show_history = show_history
        self._printed_events = 0

    def render(self, snapshot: TableSnapshot) -> None:
        if self._show_history:
            unseen = snapshot.event_count - self._printed_events
            if unseen > 0:
                for event in snapshot.history[-unseen:]:
                    typer.echo(f"> {event}")
            self._printed_events = snapshot.event_count
        typer.echo(format_snapshot(snapshot))


class LoggingAudio:
    """Stands in for a sound system by logging each cue."""

    def cue(self, event: AudioCue, seat_index: int) -> None:
        logger.info("audio cue %s (seat %d)", event.value, seat_index)


class RecordedChoice:
    """Records color requests; the caller answers through TurnEngine.choose_color."""

    def __init__(self) -> None:
        self.requests: List[int] = []

    def request_color_choice(self, seat_index: int) -> None:
        self.requests.append(seat_index)
        logger.debug("color choice requested from seat %d", seat_index)


class NullRenderer:
    def render(self, snapshot: TableSnapshot) -> None:
        pass


class NullAudio:
    def cue(self, event: AudioCue, seat_index: int) -> None:
        pass
