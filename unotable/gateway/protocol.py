"""Gateway protocols - interfaces the engine calls for rendering, audio and color choice."""

from enum import Enum
from typing import Protocol

from unotable.engine.table import TableSnapshot


class AudioCue(str, Enum):
    """Audio events the engine emits."""

    CARD_PLAYED = "card_played"
    TURN_BEGAN = "turn_began"
    FORCED_DRAW_REQUIRED = "forced_draw_required"
    ROUND_WON = "round_won"
    LOW_CARD_ANNOUNCED = "low_card_announced"


class RenderGateway(Protocol):
    """Draws the table."""

    def render(self, snapshot: TableSnapshot) -> None:
        """Show the table after a committed transition.

        Fire-and-forget: the engine ignores anything returned.
        """
        ...


class AudioGateway(Protocol):
    """Plays sound effects."""

    def cue(self, event: AudioCue, seat_index: int) -> None:
        """Play the sound for event, triggered by seat_index."""
        ...


class ChoiceGateway(Protocol):
    """Asks the human seat for a color after it plays a wild card."""

    def request_color_choice(self, seat_index: int) -> None:
        """Prompt for a color.

        The engine stays suspended until TurnEngine.choose_color is called.
        """
        ...
