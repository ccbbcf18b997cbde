"""Table state: seats, piles and the phase of the round."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence

from unotable.engine.card import Card, Color
from unotable.engine.deck import DeckFactory, max_hand_size
from unotable.engine.errors import DeckExhaustedError

logger = logging.getLogger(__name__)

HUMAN_SEAT = 0
MIN_SEATS = 2
MAX_SEATS = 4


class Controller(str, Enum):
    HUMAN = "human"
    COMPUTER = "computer"


class EnginePhase(str, Enum):
    """What the table is waiting for."""

    AWAITING_PLAY = "awaiting_play"
    AWAITING_HUMAN_FORCED_DRAW = "awaiting_human_forced_draw"
    AWAITING_COLOR_CHOICE = "awaiting_color_choice"
    ROUND_ENDED = "round_ended"


@dataclass
class Seat:
    """A participant slot at the table."""

    index: int
    name: str
    controller: Controller
    hand: List[Card] = field(default_factory=list)
    has_announced_low_card: bool = False

    @property
    def is_computer(self) -> bool:
        return self.controller is Controller.COMPUTER


@dataclass
class PendingDraw:
    """Forced draws the human seat still owes.

    restore_seat_index is the seat that was active when the draw card
    resolved; it gets the turn back once owed_count reaches zero.
    """

    owed_count: int
    target_seat_index: int
    restore_seat_index: int


@dataclass
class TableState:
    """Mutable state of one round. Only the TurnEngine writes to it."""

    seats: List[Seat]
    draw_pile: List[Card]  # top is last
    discard_pile: List[Card]  # top is last
    active_seat_index: int
    active_color: Color
    direction: int = 1  # 1 = clockwise, -1 = counter-clockwise
    phase: EnginePhase = EnginePhase.AWAITING_PLAY
    pending_draw: Optional[PendingDraw] = None
    round_winner: Optional[int] = None
    history: List[str] = field(default_factory=list)

    @classmethod
    def deal(
        cls,
        seat_count: int,
        factory: DeckFactory,
        hand_size: int = 7,
    ) -> "TableState":
        """Create a fresh round: deal hand_size cards each, one numeral on discard.

        Seat 0 is the human seat and plays first.
        """
        if not MIN_SEATS <= seat_count <= MAX_SEATS:
            raise ValueError(f"Seat count must be {MIN_SEATS}-{MAX_SEATS}, got {seat_count}")
        if not 1 <= hand_size <= max_hand_size(seat_count):
            raise ValueError(
                f"Hand size must be 1-{max_hand_size(seat_count)} for {seat_count} seats, got {hand_size}"
            )

        seats = [Seat(index=0, name="You", controller=Controller.HUMAN)]
        for i in range(1, seat_count):
            seats.append(Seat(index=i, name=f"CPU {i}", controller=Controller.COMPUTER))

        deck = factory.shuffle(factory.build())
        factory.deal(seats, deck, hand_size)
        first_card = factory.pick_initial_discard(deck)
        return cls(
            seats=seats,
            draw_pile=deck,
            discard_pile=[first_card],
            active_seat_index=HUMAN_SEAT,
            active_color=first_card.color,
        )

    @property
    def seat_count(self) -> int:
        return len(self.seats)

    @property
    def active_seat(self) -> Seat:
        return self.seats[self.active_seat_index]

    def top_discard(self) -> Optional[Card]:
        """Return the top card on the discard pile."""
        return self.discard_pile[-1] if self.discard_pile else None

    def step(self, index: int, steps: int = 1) -> int:
        """Seat index reached by moving steps seats from index in the current direction."""
        return (index + steps * self.direction) % self.seat_count

    def next_seat_index(self) -> int:
        return self.step(self.active_seat_index)

    def total_cards(self) -> int:
        return len(self.draw_pile) + len(self.discard_pile) + sum(len(s.hand) for s in self.seats)

    def record(self, event: str) -> None:
        self.history.append(event)
        logger.debug(event)

    def draw_into(self, seat_index: int, shuffle: Callable[[Sequence[Card]], List[Card]]) -> Card:
        """Move the top card of the draw pile into a seat's hand.

        An empty draw pile is rebuilt from every discard but the top one.
        """
        if not self.draw_pile:
            self._reshuffle(shuffle)
        card = self.draw_pile.pop()
        self.seats[seat_index].hand.append(card)
        return card

    def _reshuffle(self, shuffle: Callable[[Sequence[Card]], List[Card]]) -> None:
        if len(self.discard_pile) < 2:
            raise DeckExhaustedError(
                f"No cards left to draw: draw pile empty, discard pile holds {len(self.discard_pile)}"
            )
        top = self.discard_pile[-1]
        self.draw_pile = shuffle(self.discard_pile[:-1])
        self.discard_pile = [top]
        logger.info("Draw pile empty, reshuffled %d discards", len(self.draw_pile))
        self.record(f"reshuffled {len(self.draw_pile)} discards into the draw pile")

    # Legacy flag queries, derived from the phase so they cannot drift.

    @property
    def is_drawing_cards(self) -> bool:
        return self.phase is EnginePhase.AWAITING_HUMAN_FORCED_DRAW

    @property
    def waiting_for_color_choice(self) -> bool:
        return self.phase is EnginePhase.AWAITING_COLOR_CHOICE

    @property
    def required_draws(self) -> int:
        return self.pending_draw.owed_count if self.pending_draw else 0

    @property
    def pending_draw_seat_index(self) -> Optional[int]:
        return self.pending_draw.restore_seat_index if self.pending_draw else None


@dataclass
class TableSnapshot:
    """Read-only view of the table as seat 0 sees it.

    Computer hands are reduced to card counts.
    """

    my_hand: List[Card]
    top_discard: Optional[Card]
    active_seat_index: int
    direction: int
    active_color: Color
    phase: EnginePhase
    required_draws: int
    round_winner: Optional[int]
    seat_names: tuple[str, ...]
    num_cards_per_seat: Dict[int, int]
    low_card_flags: Dict[int, bool]
    draw_pile_size: int
    event_count: int
    history: List[str]  # Recent table events

    @classmethod
    def from_state(cls, state: TableState, seat_index: int = HUMAN_SEAT) -> "TableSnapshot":
        """Create a snapshot for one seat, hiding everyone else's cards."""
        return cls(
            my_hand=list(state.seats[seat_index].hand),
            top_discard=state.top_discard(),
            active_seat_index=state.active_seat_index,
            direction=state.direction,
            active_color=state.active_color,
            phase=state.phase,
            required_draws=state.required_draws,
            round_winner=state.round_winner,
            seat_names=tuple(s.name for s in state.seats),
            num_cards_per_seat={s.index: len(s.hand) for s in state.seats},
            low_card_flags={s.index: s.has_announced_low_card for s in state.seats},
            draw_pile_size=len(state.draw_pile),
            event_count=len(state.history),
            history=list(state.history[-10:]),  # Last 10 events
        )
