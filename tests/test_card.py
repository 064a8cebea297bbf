"""Tests for card parsing."""

import pytest

from poker_assistant.utils.card import Card, coerce_card, parse_cards
from poker_assistant.utils.constants import Rank, Suit
from poker_assistant.utils.errors import AnalysisError, MalformedCardError


class TestCardFromStr:
    def test_basic(self) -> None:
        card = Card.from_str("Ah")
        assert card.rank == Rank.ACE
        assert card.suit == Suit.HEARTS
        assert card.value == 14

    def test_ten(self) -> None:
        assert Card.from_str("Td").value == 10

    def test_case_insensitive(self) -> None:
        assert Card.from_str("aH") == Card.from_str("Ah")
        assert Card.from_str("ts") == Card(Rank.TEN, Suit.SPADES)

    def test_invalid_rank(self) -> None:
        with pytest.raises(MalformedCardError, match="Invalid rank"):
            Card.from_str("Xh")

    def test_invalid_suit(self) -> None:
        with pytest.raises(MalformedCardError, match="Invalid suit"):
            Card.from_str("Ax")

    def test_wrong_length(self) -> None:
        with pytest.raises(MalformedCardError, match="2 characters"):
            Card.from_str("10h")

    def test_malformed_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Card.from_str("")

    def test_str_and_repr(self) -> None:
        card = Card.from_str("Kc")
        assert str(card) == "Kc"
        assert repr(card) == "Card('Kc')"


class TestCardFromDict:
    def test_scraped_mapping(self) -> None:
        assert Card.from_dict({"rank": "q", "suit": "S"}) == Card(Rank.QUEEN, Suit.SPADES)

    def test_missing_key(self) -> None:
        with pytest.raises(MalformedCardError, match="'rank' and 'suit'"):
            Card.from_dict({"rank": "A"})

    def test_non_string_symbol(self) -> None:
        with pytest.raises(MalformedCardError):
            Card.from_dict({"rank": 10, "suit": "h"})

    def test_to_dict(self) -> None:
        assert Card.from_str("9c").to_dict() == {"rank": "9", "suit": "c"}


class TestCardOrdering:
    def test_compares_by_rank(self) -> None:
        assert Card.from_str("2s") < Card.from_str("As")

    def test_equality_uses_suit(self) -> None:
        assert Card.from_str("Ah") != Card.from_str("As")

    def test_hashable(self) -> None:
        assert len({Card.from_str("Ah"), Card.from_str("Ah")}) == 1


class TestParseCards:
    def test_concatenated(self) -> None:
        assert parse_cards("AhKs") == [Card.from_str("Ah"), Card.from_str("Ks")]

    def test_space_separated(self) -> None:
        assert [str(c) for c in parse_cards("2s 7s 9s")] == ["2s", "7s", "9s"]

    def test_blank(self) -> None:
        assert parse_cards("   ") == []

    def test_odd_length(self) -> None:
        with pytest.raises(MalformedCardError, match="odd length"):
            parse_cards("AhK")


class TestCoerceCard:
    def test_accepts_all_shapes(self) -> None:
        expected = Card.from_str("Jd")
        assert coerce_card(expected) is expected
        assert coerce_card("Jd") == expected
        assert coerce_card({"rank": "J", "suit": "d"}) == expected

    def test_rejects_other_types(self) -> None:
        with pytest.raises(AnalysisError):
            coerce_card(42)
