"""Tests for forced draws owed by the human seat."""

import pytest
from conftest import card

from unotable.engine import (
    DeckExhaustedError,
    DeckFactory,
    DrawCard,
    EnginePhase,
    InvalidPlay,
    NoColorChoicePending,
    OutOfTurnAction,
    PendingDraw,
    TableState,
    get_legal_actions,
)
from unotable.gateway.protocol import AudioCue


def _three_seats(table, **kwargs):
    return table(
        [["green_1", "green_2"], ["yellow_1", "yellow_2"], ["red_draw_two", "blue_1"]],
        "red_3",
        active=2,
        **kwargs,
    )


def test_draw_two_on_human_starts_forced_draw(table) -> None:
    engine = _three_seats(table)
    engine.play_card(2, 0)
    state = engine.state
    assert state.pending_draw == PendingDraw(owed_count=2, target_seat_index=0, restore_seat_index=2)
    assert state.active_seat_index == 0
    assert engine.phase is EnginePhase.AWAITING_HUMAN_FORCED_DRAW
    assert state.is_drawing_cards
    assert state.required_draws == 2
    assert state.pending_draw_seat_index == 2
    assert (AudioCue.FORCED_DRAW_REQUIRED, 0) in engine.audio.cues
    assert get_legal_actions(state, 0) == [DrawCard()]
    assert get_legal_actions(state, 1) == []
    assert get_legal_actions(state, 2) == []


def test_everything_but_drawing_is_blocked(table) -> None:
    engine = _three_seats(table)
    engine.play_card(2, 0)
    with pytest.raises(InvalidPlay):
        engine.play_card(0, 0)
    with pytest.raises(NoColorChoicePending):
        engine.choose_color("red")
    assert engine.play_card(1, 0) is False
    assert engine.draw_card(1) is None
    assert engine.state.required_draws == 2


def test_human_draws_exactly_owed_cards(table) -> None:
    engine = _three_seats(table)
    engine.play_card(2, 0)
    state = engine.state

    engine.draw_card(0)
    assert state.required_draws == 1
    assert state.active_seat_index == 0
    assert engine.phase is EnginePhase.AWAITING_HUMAN_FORCED_DRAW

    engine.draw_card(0)
    assert len(state.seats[0].hand) == 4
    assert state.pending_draw is None
    assert not state.is_drawing_cards
    assert state.pending_draw_seat_index is None
    assert engine.phase is EnginePhase.AWAITING_PLAY
    # The turn lands on the seat after the human
    assert state.active_seat_index == 1

    with pytest.raises(OutOfTurnAction):
        engine.draw_card(0)
    assert len(state.seats[0].hand) == 4
    assert state.total_cards() == 108


def test_forced_draw_in_two_seats_returns_turn_to_player(table) -> None:
    engine = table([["green_1", "green_2"], ["red_draw_two", "blue_1"]], "red_3", active=1)
    engine.play_card(1, 0)
    engine.draw_card(0)
    engine.draw_card(0)
    assert engine.state.active_seat_index == 1
    assert engine.can_act(1)


def test_forced_draw_follows_reversed_direction(table) -> None:
    engine = table(
        [["green_1", "green_2"], ["red_draw_two", "blue_1"], ["yellow_1", "yellow_2"]],
        "red_3",
        active=1,
        direction=-1,
    )
    engine.play_card(1, 0)
    assert engine.state.pending_draw.target_seat_index == 0
    engine.draw_card(0)
    engine.draw_card(0)
    assert engine.state.active_seat_index == 2


def test_computer_wild_draw_four_on_human(table) -> None:
    engine = table([["green_1", "green_2"], ["wild_draw_four", "blue_1", "blue_2"]], "red_3", active=1)
    engine.play_card(1, 0)
    state = engine.state
    assert state.active_color.value == "blue"
    assert state.required_draws == 4
    for _ in range(4):
        engine.draw_card(0)
    assert len(state.seats[0].hand) == 6
    assert state.active_seat_index == 1


def test_drawn_cards_come_from_the_top(table) -> None:
    engine = _three_seats(table, draw=["blue_7", "yellow_8"])
    engine.play_card(2, 0)
    assert engine.draw_card(0) == card("blue_7")
    assert engine.draw_card(0) == card("yellow_8")


def test_only_one_forced_draw_at_a_time(table) -> None:
    engine = _three_seats(table)
    engine.play_card(2, 0)
    with pytest.raises(RuntimeError):
        engine.sequencer.begin(2)


def test_resolve_without_pending_draw(table) -> None:
    engine = _three_seats(table)
    with pytest.raises(RuntimeError):
        engine.sequencer.resolve_one_human_draw()


def test_reshuffle_during_forced_draw(table) -> None:
    engine = table([["red_draw_two", "blue_1"], ["green_1", "green_2"]], "red_3")
    state = engine.state
    state.discard_pile = state.draw_pile + state.discard_pile
    state.draw_pile = []
    engine.play_card(0, 0)
    assert len(state.seats[1].hand) == 4
    assert state.discard_pile == [card("red_draw_two")]
    assert state.total_cards() == 108


def test_both_piles_empty_raises() -> None:
    factory = DeckFactory(seed=3)
    state = TableState.deal(2, factory)
    state.draw_pile = []
    with pytest.raises(DeckExhaustedError):
        state.draw_into(0, factory.shuffle)
