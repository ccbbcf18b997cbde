"""Tests for the computer seat policy."""

from conftest import card

from unotable.agents.computer_policy import ComputerPolicy
from unotable.engine import Color


def test_choose_leftmost_playable_card() -> None:
    policy = ComputerPolicy()
    hand = [card("blue_1"), card("red_7"), card("wild"), card("red_9")]
    assert policy.choose_card_to_play(hand, card("red_3"), Color.RED) == 1
    assert policy.choose_card_to_play([card("blue_1")], card("red_3"), Color.RED) is None


def test_choose_most_frequent_color() -> None:
    policy = ComputerPolicy()
    hand = [card("green_1"), card("yellow_2"), card("green_skip"), card("wild")]
    assert policy.choose_color_on_wild(hand) is Color.GREEN


def test_color_ties_follow_fixed_order() -> None:
    policy = ComputerPolicy()
    assert policy.choose_color_on_wild([card("green_1"), card("blue_2")]) is Color.BLUE
    assert policy.choose_color_on_wild([card("yellow_1"), card("red_2")]) is Color.RED


def test_red_without_colored_cards() -> None:
    policy = ComputerPolicy()
    assert policy.choose_color_on_wild([]) is Color.RED
    assert policy.choose_color_on_wild([card("wild"), card("wild_draw_four")]) is Color.RED


def test_run_turn_blocked_when_not_active(table) -> None:
    engine = table([["red_5", "red_6"], ["red_1", "red_2"]], "red_3")
    assert engine.policy.run_turn(engine, 1) == "blocked"
    assert engine.revision == 0


def test_run_turn_plays(table) -> None:
    engine = table([["red_5", "red_6"], ["blue_1", "red_2"]], "red_3", active=1)
    assert engine.policy.run_turn(engine, 1) == "play"
    assert engine.state.top_discard() == card("red_2")


def test_run_turn_draws_and_plays(table) -> None:
    engine = table([["red_5", "red_6"], ["blue_1", "blue_2"]], "red_3", active=1, draw=["red_9"])
    assert engine.policy.run_turn(engine, 1) == "draw_and_play"
    assert engine.state.top_discard() == card("red_9")
    assert engine.state.seats[1].hand == [card("blue_1"), card("blue_2")]
    assert engine.state.active_seat_index == 0


def test_run_turn_draws_and_passes(table) -> None:
    engine = table([["red_5", "red_6"], ["blue_1", "blue_2"]], "red_3", active=1, draw=["green_9"])
    assert engine.policy.run_turn(engine, 1) == "draw_and_pass"
    assert len(engine.state.seats[1].hand) == 3
    assert engine.state.active_seat_index == 0
