"""Tests for GameSnapshot construction and payload parsing."""

import pytest

from poker_assistant.core.game_snapshot import GameSnapshot, parse_amount
from poker_assistant.utils.card import Card
from poker_assistant.utils.constants import Street
from poker_assistant.utils.errors import (
    InsufficientInputError,
    InvalidSnapshotError,
    MalformedCardError,
)


def _cards(s: str) -> list[Card]:
    return [Card.from_str(c) for c in s.split()]


class TestSnapshotShape:
    def test_stores_tuples(self) -> None:
        snap = GameSnapshot(_cards("Ah Kh"), _cards("2c 3d 4s"), 10, 3, 100)
        assert snap.hole_cards == tuple(_cards("Ah Kh"))
        assert isinstance(snap.community_cards, tuple)

    def test_frozen(self) -> None:
        snap = GameSnapshot(_cards("Ah Kh"))
        with pytest.raises(AttributeError):
            snap.pot = 5.0  # type: ignore[misc]

    def test_one_hole_card(self) -> None:
        with pytest.raises(InsufficientInputError, match="got 1"):
            GameSnapshot(_cards("Ah"))

    def test_three_hole_cards(self) -> None:
        with pytest.raises(InvalidSnapshotError, match="exactly 2"):
            GameSnapshot(_cards("Ah Kh Qh"))

    def test_odd_board_sizes_accepted(self) -> None:
        snap = GameSnapshot(_cards("Ah Kh"), _cards("2c"))
        assert snap.street is None

    @pytest.mark.parametrize("board, street", [
        ("", Street.PREFLOP),
        ("2c 3d 4s", Street.FLOP),
        ("2c 3d 4s 5h", Street.TURN),
        ("2c 3d 4s 5h 9d", Street.RIVER),
    ])
    def test_street(self, board: str, street: Street) -> None:
        snap = GameSnapshot(_cards("Ah Kh"), _cards(board) if board else [])
        assert snap.street == street


class TestNonFiniteAmounts:
    @pytest.mark.parametrize("pot, stack", [
        (float("inf"), 100.0),
        (float("-inf"), 100.0),
        (float("nan"), 100.0),
        (10.0, float("inf")),
        (10.0, float("nan")),
    ])
    def test_rejected(self, pot: float, stack: float) -> None:
        with pytest.raises(InvalidSnapshotError, match="finite"):
            GameSnapshot(_cards("Ah Kh"), pot=pot, my_stack=stack)

    def test_payload_overflowing_number(self) -> None:
        with pytest.raises(InvalidSnapshotError, match="pot must be a finite number"):
            GameSnapshot.from_payload({"holeCards": ["Ah", "Kd"], "pot": float("inf")})

    def test_payload_overflowing_text(self) -> None:
        with pytest.raises(InvalidSnapshotError, match="my_stack"):
            GameSnapshot.from_payload({"holeCards": ["Ah", "Kd"], "myStack": "9" * 400})


class TestDegenerateFields:
    def test_clean_snapshot(self) -> None:
        assert GameSnapshot(_cards("Ah Kh"), pot=10, my_stack=100).degenerate_fields() == []

    def test_reports_each_problem(self) -> None:
        snap = GameSnapshot(_cards("Ah Kh"), pot=-1, players_active=0, my_stack=-5)
        problems = snap.degenerate_fields()
        assert len(problems) == 3
        assert any("negative pot" in p for p in problems)
        assert any("negative stack" in p for p in problems)
        assert any("players_active=0" in p for p in problems)


class TestParseAmount:
    @pytest.mark.parametrize("value, expected", [
        (120, 120.0),
        (12.5, 12.5),
        ("$1,250.50", 1250.5),
        ("Pot: 300", 300.0),
        ("", 0.0),
        ("n/a", 0.0),
        ("1.2.3", 0.0),
        (None, 0.0),
        (float("nan"), 0.0),
    ])
    def test_values(self, value, expected: float) -> None:
        assert parse_amount(value) == expected

    def test_rejects_other_types(self) -> None:
        with pytest.raises(InvalidSnapshotError):
            parse_amount([100])


class TestFromPayload:
    def test_scraper_payload(self) -> None:
        snap = GameSnapshot.from_payload({
            "holeCards": [{"rank": "K", "suit": "s"}, {"rank": "k", "suit": "H"}],
            "communityCards": [
                {"rank": "2", "suit": "s"},
                {"rank": "7", "suit": "s"},
                {"rank": "9", "suit": "s"},
            ],
            "pot": "$200",
            "playersActive": 3,
            "myStack": 800,
        })
        assert snap.hole_cards == tuple(_cards("Ks Kh"))
        assert snap.community_cards == tuple(_cards("2s 7s 9s"))
        assert snap.pot == 200.0
        assert snap.players_active == 3
        assert snap.my_stack == 800.0

    def test_string_cards_and_defaults(self) -> None:
        snap = GameSnapshot.from_payload({"holeCards": ["Ah", "Kd"]})
        assert snap.community_cards == ()
        assert snap.pot == 0.0
        assert snap.players_active == 2
        assert snap.my_stack == 0.0

    def test_numeric_text_players(self) -> None:
        snap = GameSnapshot.from_payload({"holeCards": ["Ah", "Kd"], "playersActive": "4"})
        assert snap.players_active == 4

    def test_bad_players(self) -> None:
        with pytest.raises(InvalidSnapshotError, match="playersActive"):
            GameSnapshot.from_payload({"holeCards": ["Ah", "Kd"], "playersActive": "many"})

    def test_missing_hole_cards(self) -> None:
        with pytest.raises(InsufficientInputError):
            GameSnapshot.from_payload({"communityCards": [], "pot": 10})

    def test_malformed_card(self) -> None:
        with pytest.raises(MalformedCardError):
            GameSnapshot.from_payload({"holeCards": [{"rank": "1", "suit": "h"}, "Kd"]})

    def test_cards_must_be_a_list(self) -> None:
        with pytest.raises(InvalidSnapshotError, match="holeCards"):
            GameSnapshot.from_payload({"holeCards": "AhKd"})

    def test_payload_must_be_mapping(self) -> None:
        with pytest.raises(InvalidSnapshotError):
            GameSnapshot.from_payload(None)  # type: ignore[arg-type]
