"""Turn engine: owns the table and applies every play, draw and color choice."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, Callable, Iterator, List, Optional, Union

from unotable.engine.card import Card, Color, Rank
from unotable.engine.deck import DeckFactory
from unotable.engine.effects import SpecialEffectResolver
from unotable.engine.errors import (
    InvalidDraw,
    InvalidPlay,
    NoColorChoicePending,
    OutOfTurnAction,
    RuleViolation,
)
from unotable.engine.forced_draw import ForcedDrawSequencer
from unotable.engine.rules import can_play, has_legal_move
from unotable.engine.table import HUMAN_SEAT, EnginePhase, Seat, TableSnapshot, TableState
from unotable.gateway.console import NullAudio, NullRenderer, RecordedChoice
from unotable.gateway.protocol import AudioCue, AudioGateway, ChoiceGateway, RenderGateway

if TYPE_CHECKING:
    from unotable.agents.computer_policy import ComputerPolicy

logger = logging.getLogger(__name__)

TransitionListener = Callable[["TurnEngine"], None]


class TurnEngine:
    """The only writer of the table state.

    Every accepted operation bumps ``revision``, renders a snapshot and then
    notifies transition listeners (the scheduler among them). Rejected
    operations raise a RuleViolation and leave the table untouched; calls
    from computer seats that are simply out of turn are ignored instead.
    """

    def __init__(
        self,
        state: TableState,
        deck: Optional[DeckFactory] = None,
        render: Optional[RenderGateway] = None,
        audio: Optional[AudioGateway] = None,
        choice: Optional[ChoiceGateway] = None,
        policy: Optional[ComputerPolicy] = None,
        hand_size: int = 7,
    ):
        self.state = state
        self.deck = deck or DeckFactory()
        self.render_gateway: RenderGateway = render or NullRenderer()
        self.audio: AudioGateway = audio or NullAudio()
        self.choice: ChoiceGateway = choice or RecordedChoice()
        if policy is None:
            from unotable.agents.computer_policy import ComputerPolicy

            policy = ComputerPolicy()
        self.policy = policy
        self.sequencer = ForcedDrawSequencer(self)
        self.effects = SpecialEffectResolver(self)
        self.revision = 0
        self._hand_size = hand_size
        self._listeners: List[TransitionListener] = []
        self._busy = False

    @classmethod
    def start(
        cls,
        seat_count: int = 2,
        seed: Optional[int] = None,
        hand_size: int = 7,
        **kwargs,
    ) -> "TurnEngine":
        """Deal a new round and return an engine that owns it."""
        deck = DeckFactory(seed=seed)
        state = TableState.deal(seat_count, deck, hand_size=hand_size)
        engine = cls(state, deck=deck, hand_size=hand_size, **kwargs)
        engine._open_round()
        return engine

    # Queries

    @property
    def phase(self) -> EnginePhase:
        return self.state.phase

    def can_act(self, seat_index: int) -> bool:
        """True if seat_index may play or draw normally right now."""
        return self.state.phase is EnginePhase.AWAITING_PLAY and self.state.active_seat_index == seat_index

    def snapshot(self, seat_index: int = HUMAN_SEAT) -> TableSnapshot:
        return TableSnapshot.from_state(self.state, seat_index)

    def subscribe(self, listener: TransitionListener) -> Callable[[], None]:
        """Call listener after every committed transition. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # Operations

    def play_card(self, seat_index: int, hand_index: int) -> bool:
        """Play a card from a seat's hand.

        Returns False when an out-of-turn computer call was ignored.
        """
        with self._operation():
            seat = self._seat(seat_index)
            rejection = self._turn_rejection(seat, playing=True)
            if rejection is not None:
                return self._reject(seat, rejection, ignored=False)

            state = self.state
            hand = seat.hand
            if not 0 <= hand_index < len(hand):
                raise InvalidPlay(f"{seat.name} has no card at position {hand_index}")
            card = hand[hand_index]
            top = state.top_discard()
            if not can_play(card, top, state.active_color, hand):
                raise InvalidPlay(f"{card} cannot be played on {top} (color {state.active_color.value})")

            hand.pop(hand_index)
            state.discard_pile.append(card)
            state.record(f"{seat.name} played {card}")
            self.audio.cue(AudioCue.CARD_PLAYED, seat_index)
            logger.info("seat %d played %s", seat_index, card)

            # A seat that empties its hand wins before the card takes effect
            if not hand:
                self._end_round(seat)
            else:
                self._announce_if_low(seat)
                if not self.effects.resolve(card, seat_index):
                    self.hand_turn_to(state.next_seat_index())
        self._commit()
        return True

    def draw_card(self, seat_index: int) -> Optional[Card]:
        """Draw one card for a seat.

        While the human seat owes forced draws this draws one owed card.
        Otherwise drawing is only allowed without a legal play; the seat keeps
        the turn if the drawn card is playable, else the turn passes.
        Returns None when an out-of-turn computer call was ignored.
        """
        with self._operation():
            seat = self._seat(seat_index)
            state = self.state
            pending = state.pending_draw
            if pending is not None and pending.target_seat_index == seat_index:
                card = self.sequencer.resolve_one_human_draw()
            else:
                rejection = self._turn_rejection(seat, playing=False)
                if rejection is not None:
                    return self._reject(seat, rejection, ignored=None)
                top = state.top_discard()
                if has_legal_move(seat.hand, top, state.active_color):
                    raise InvalidDraw(f"{seat.name} has a card to play and cannot draw")

                card = self.draw_into(seat_index)
                state.record(f"{seat.name} drew a card")
                if can_play(card, top, state.active_color, seat.hand):
                    logger.debug("seat %d can play the drawn card %s", seat_index, card)
                else:
                    self.hand_turn_to(state.next_seat_index())
        self._commit()
        return card

    def choose_color(self, color: Union[Color, str]) -> None:
        """Name the active color after the human seat played a wild card."""
        with self._operation():
            state = self.state
            if state.phase is not EnginePhase.AWAITING_COLOR_CHOICE:
                raise NoColorChoicePending("No wild card is waiting for a color")
            try:
                color = Color(color)
            except ValueError:
                raise InvalidPlay(f"Unknown color: {color}") from None
            if color is Color.WILD:
                raise InvalidPlay("Choose red, blue, green or yellow")

            self.effects.apply_color(color, state.active_seat_index)
            state.phase = EnginePhase.AWAITING_PLAY
            if state.top_discard().rank is Rank.WILD_DRAW_FOUR:
                self.sequencer.begin(4)
            else:
                self.hand_turn_to(state.next_seat_index())
        self._commit()

    def announce_low_card(self, seat_index: int) -> None:
        """Mark a seat as having announced it is down to one card."""
        with self._operation():
            seat = self._seat(seat_index)
            seat.has_announced_low_card = True
            self.state.record(f"{seat.name} says UNO!")
            self.audio.cue(AudioCue.LOW_CARD_ANNOUNCED, seat_index)
        self._commit()

    def restart(self) -> None:
        """Throw the table away and deal a new round with the same seats."""
        with self._operation():
            self.state = TableState.deal(self.state.seat_count, self.deck, hand_size=self._hand_size)
        self._open_round()

    # Mutators for the effect resolver and forced-draw sequencer

    def draw_into(self, seat_index: int) -> Card:
        """Move one card from the draw pile into a seat's hand."""
        card = self.state.draw_into(seat_index, self.deck.shuffle)
        seat = self.state.seats[seat_index]
        if len(seat.hand) > 1:
            seat.has_announced_low_card = False
        return card

    def hand_turn_to(self, seat_index: int) -> None:
        """Give the turn to seat_index."""
        previous = self.state.active_seat_index
        self.state.active_seat_index = seat_index
        logger.debug("turn: seat %d -> seat %d", previous, seat_index)
        self.audio.cue(AudioCue.TURN_BEGAN, seat_index)

    # Internals

    @contextmanager
    def _operation(self) -> Iterator[None]:
        if self._busy:
            raise RuntimeError("Table is already being updated; operations cannot nest")
        self._busy = True
        try:
            yield
        finally:
            self._busy = False

    def _commit(self) -> None:
        self.revision += 1
        self.render_gateway.render(self.snapshot())
        for listener in list(self._listeners):
            listener(self)

    def _open_round(self) -> None:
        state = self.state
        state.record(f"New round: {state.top_discard()} starts the discard pile")
        self.hand_turn_to(state.active_seat_index)
        self._commit()

    def _seat(self, seat_index: int) -> Seat:
        if not 0 <= seat_index < self.state.seat_count:
            raise RuleViolation(f"No seat {seat_index} at this table")
        return self.state.seats[seat_index]

    def _turn_rejection(self, seat: Seat, playing: bool) -> Optional[RuleViolation]:
        state = self.state
        if state.phase is EnginePhase.ROUND_ENDED:
            return OutOfTurnAction("The round is over")
        if state.phase is EnginePhase.AWAITING_HUMAN_FORCED_DRAW:
            if playing and state.pending_draw.target_seat_index == seat.index:
                return InvalidPlay("You must finish drawing all required cards first!")
            return OutOfTurnAction(f"{state.seats[state.pending_draw.target_seat_index].name} is drawing cards")
        if state.phase is EnginePhase.AWAITING_COLOR_CHOICE:
            return OutOfTurnAction("Waiting for a color to be chosen")
        if state.active_seat_index != seat.index:
            return OutOfTurnAction(f"It is not {seat.name}'s turn")
        return None

    def _reject(self, seat: Seat, rejection: RuleViolation, ignored):
        if seat.is_computer:
            logger.debug("ignored call from seat %d: %s", seat.index, rejection)
            return ignored
        raise rejection

    def _announce_if_low(self, seat: Seat) -> None:
        if len(seat.hand) == 1 and not seat.has_announced_low_card:
            seat.has_announced_low_card = True
            self.state.record(f"{seat.name} says UNO!")
            self.audio.cue(AudioCue.LOW_CARD_ANNOUNCED, seat.index)

    def _end_round(self, seat: Seat) -> None:
        state = self.state
        state.round_winner = seat.index
        state.phase = EnginePhase.ROUND_ENDED
        state.record(f"{seat.name} played their last card and WON!")
        self.audio.cue(AudioCue.ROUND_WON, seat.index)
        logger.info("seat %d won the round", seat.index)
