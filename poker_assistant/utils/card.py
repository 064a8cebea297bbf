"""Card value type and card parsing helpers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import total_ordering

from poker_assistant.utils.constants import RANK_VALUES, Rank, Suit
from poker_assistant.utils.errors import MalformedCardError


def _rank_from_symbol(symbol: str) -> Rank:
    try:
        return Rank(symbol.upper())
    except ValueError:
        raise MalformedCardError(f"Invalid rank character: '{symbol}'") from None


def _suit_from_symbol(symbol: str) -> Suit:
    try:
        return Suit(symbol.lower())
    except ValueError:
        raise MalformedCardError(f"Invalid suit character: '{symbol}'") from None


@total_ordering
@dataclass(frozen=True)
class Card:
    """Represents a single playing card."""

    rank: Rank
    suit: Suit

    @classmethod
    def from_str(cls, s: str) -> Card:
        """Create a Card from a 2-character string like 'Ah' or 'Td'.

        Rank and suit are case-insensitive ('ah', 'AH' and 'Ah' are the
        same card), the way card text scraped from a table is normalised.

        Args:
            s: A 2-character string where the first char is the rank
               and the second is the suit.

        Returns:
            A new Card instance.

        Raises:
            MalformedCardError: If the string is not exactly 2 characters
                or contains invalid rank/suit characters.
        """
        if not isinstance(s, str) or len(s) != 2:
            raise MalformedCardError(f"Card string must be 2 characters, got '{s}'")
        return cls(rank=_rank_from_symbol(s[0]), suit=_suit_from_symbol(s[1]))

    @classmethod
    def from_dict(cls, data: Mapping[str, str]) -> Card:
        """Create a Card from a scraped ``{"rank": "A", "suit": "h"}`` mapping.

        Raises:
            MalformedCardError: If a key is missing or a symbol is unknown.
        """
        try:
            rank, suit = data["rank"], data["suit"]
        except (KeyError, TypeError):
            raise MalformedCardError(
                f"Card mapping needs 'rank' and 'suit', got {data!r}"
            ) from None
        if not isinstance(rank, str) or not isinstance(suit, str):
            raise MalformedCardError(f"Card symbols must be strings, got {data!r}")
        return cls(rank=_rank_from_symbol(rank), suit=_suit_from_symbol(suit))

    @property
    def value(self) -> int:
        """Numeric value of the card's rank (2-14)."""
        return RANK_VALUES[self.rank]

    def to_dict(self) -> dict[str, str]:
        return {"rank": self.rank.value, "suit": self.suit.value}

    def __str__(self) -> str:
        return f"{self.rank.value}{self.suit.value}"

    def __repr__(self) -> str:
        return f"Card('{self}')"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.value < other.value


def parse_cards(s: str) -> list[Card]:
    """Parse card string: 'AhKs' or 'Ah Ks' or 'Ah Ks Td' -> list[Card].

    Supports both concatenated (2-char groups) and space-separated formats.
    An empty or blank string means no cards.
    """
    s = s.strip()
    if not s:
        return []
    if " " in s:
        return [Card.from_str(c) for c in s.split()]
    if len(s) % 2 != 0:
        raise MalformedCardError(f"Invalid card string: '{s}' (odd length)")
    return [Card.from_str(s[i:i + 2]) for i in range(0, len(s), 2)]


def coerce_card(item: Card | str | Mapping[str, str]) -> Card:
    """Accept a Card, an 'Ah' string or a ``{rank, suit}`` mapping."""
    if isinstance(item, Card):
        return item
    if isinstance(item, str):
        return Card.from_str(item)
    if isinstance(item, Mapping):
        return Card.from_dict(item)
    raise MalformedCardError(f"Cannot read a card from {item!r}")
