"""Tests for board texture analysis and the texture penalty."""

import pytest

from poker_assistant.strategy.board_texture import (
    BoardTexture,
    adjust_for_board,
    analyze_board,
    has_straight_possibility,
)
from poker_assistant.utils.card import Card


def _cards(s: str) -> list[Card]:
    return [Card.from_str(c) for c in s.split()]


class TestAnalyzeBoard:
    def test_empty_board(self) -> None:
        assert analyze_board([]) == BoardTexture()

    def test_monotone_flop(self) -> None:
        t = analyze_board(_cards("2s 7s 9s"))
        assert t.flush_possible
        assert not t.straight_possible
        assert t.max_suit_count == 3
        assert t.high_card_rank == 9

    def test_connected_rainbow(self) -> None:
        t = analyze_board(_cards("Jh Td 8c"))
        assert t.straight_possible
        assert not t.flush_possible

    def test_two_cards_never_flag(self) -> None:
        t = analyze_board(_cards("8h 9h"))
        assert not t.is_analyzed
        assert not t.flush_possible
        assert not t.straight_possible

    def test_flush_on_river_among_five(self) -> None:
        t = analyze_board(_cards("Ah 2c 7h Kd 9h"))
        assert t.flush_possible

    def test_ace_is_high_only(self) -> None:
        # A-2-3 would be a wheel draw; Ace counts as 14 here.
        assert not analyze_board(_cards("Ah 2c 3d")).straight_possible

    def test_broadway_with_ace(self) -> None:
        assert analyze_board(_cards("Ah Kc Td")).straight_possible


class TestStraightPossibility:
    def test_window_edge_inclusive(self) -> None:
        assert has_straight_possibility([5, 9, 7])

    def test_window_exceeded(self) -> None:
        assert not has_straight_possibility([2, 7, 9])

    def test_consecutive_triples_only(self) -> None:
        assert has_straight_possibility([2, 9, 10, 12, 14])
        assert not has_straight_possibility([2, 3, 8, 9, 14])

    def test_fewer_than_three_values(self) -> None:
        assert not has_straight_possibility([5, 6])


class TestAdjustForBoard:
    def test_preflop_identity(self) -> None:
        assert adjust_for_board(72.0, []) == 72.0

    def test_turn_before_three_cards_identity(self) -> None:
        assert adjust_for_board(72.0, _cards("9s 8s")) == 72.0

    def test_flush_penalty(self) -> None:
        assert adjust_for_board(69.7, _cards("2s 7s 9s")) == pytest.approx(62.73)

    def test_straight_penalty(self) -> None:
        assert adjust_for_board(80.0, _cards("Jh Td 8c")) == pytest.approx(72.0)

    def test_both_penalties_stack(self) -> None:
        assert adjust_for_board(100.0, _cards("9h 8h 7h")) == pytest.approx(81.0)

    def test_dry_board_no_penalty(self) -> None:
        assert adjust_for_board(60.0, _cards("Kc 7d 2h")) == 60.0

    def test_custom_penalties(self) -> None:
        rate = adjust_for_board(
            100.0, _cards("9h 8h 7h"), flush_penalty=0.5, straight_penalty=1.0,
        )
        assert rate == pytest.approx(50.0)
