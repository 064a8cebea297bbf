"""Immutable table snapshot the hand advisor works from."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from poker_assistant.utils.card import Card, coerce_card
from poker_assistant.utils.constants import BOARD_SIZE_TO_STREET, Street
from poker_assistant.utils.errors import InsufficientInputError, InvalidSnapshotError

_NON_NUMERIC = re.compile(r"[^0-9.]")


def parse_amount(value: Any) -> float:
    """Read a pot or stack amount from a number or scraped text.

    Text keeps only digits and dots ("$1,250.50" -> 1250.5); anything that
    still fails to parse counts as 0. Numbers pass through unchanged.
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        raise InvalidSnapshotError(f"Amount must be a number, got {value!r}")
    if isinstance(value, (int, float)):
        amount = float(value)
        return 0.0 if math.isnan(amount) else amount
    if isinstance(value, str):
        try:
            return float(_NON_NUMERIC.sub("", value))
        except ValueError:
            return 0.0
    raise InvalidSnapshotError(f"Amount must be a number or text, got {value!r}")


def _read_cards(items: Iterable[Any] | None, what: str) -> tuple[Card, ...]:
    if items is None:
        return ()
    if isinstance(items, (str, Mapping)):
        raise InvalidSnapshotError(f"{what} must be a list of cards, got {items!r}")
    return tuple(coerce_card(item) for item in items)


@dataclass(frozen=True)
class GameSnapshot:
    """One observation of the table: the hero's cards, board, pot and stack.

    Snapshots are never mutated; each analysis gets a fresh one.

    Raises:
        InsufficientInputError: If fewer than 2 hole cards are known.
        InvalidSnapshotError: If more than 2 hole cards are given, or the pot
            or stack is not a finite number.
    """

    hole_cards: tuple[Card, ...]
    community_cards: tuple[Card, ...] = field(default_factory=tuple)
    pot: float = 0.0
    players_active: int = 2
    my_stack: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "hole_cards", tuple(self.hole_cards))
        object.__setattr__(self, "community_cards", tuple(self.community_cards))
        if len(self.hole_cards) < 2:
            raise InsufficientInputError(
                f"Need 2 hole cards to rate a hand, got {len(self.hole_cards)}"
            )
        if len(self.hole_cards) > 2:
            raise InvalidSnapshotError(
                f"Need exactly 2 hole cards, got {len(self.hole_cards)}"
            )
        for name in ("pot", "my_stack"):
            amount = getattr(self, name)
            if not math.isfinite(amount):
                raise InvalidSnapshotError(f"{name} must be a finite number, got {amount}")

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> GameSnapshot:
        """Build a snapshot from the scraper's camelCase hand payload.

        Expected keys: holeCards, communityCards, pot, playersActive,
        myStack. Cards may be {"rank", "suit"} mappings or "Ah" strings.
        """
        if not isinstance(payload, Mapping):
            raise InvalidSnapshotError(f"Hand payload must be a mapping, got {payload!r}")

        players = payload.get("playersActive", 2)
        if isinstance(players, bool) or not isinstance(players, (int, float, str)):
            raise InvalidSnapshotError(f"playersActive must be a number, got {players!r}")
        try:
            players_active = int(float(players))
        except (ValueError, OverflowError):
            raise InvalidSnapshotError(
                f"playersActive must be a number, got {players!r}"
            ) from None

        return cls(
            hole_cards=_read_cards(payload.get("holeCards"), "holeCards"),
            community_cards=_read_cards(payload.get("communityCards"), "communityCards"),
            pot=parse_amount(payload.get("pot")),
            players_active=players_active,
            my_stack=parse_amount(payload.get("myStack")),
        )

    @property
    def street(self) -> Street | None:
        """Street implied by the board size, None for odd counts (1, 2, 6+)."""
        return BOARD_SIZE_TO_STREET.get(len(self.community_cards))

    def degenerate_fields(self) -> list[str]:
        """Describe inputs that still evaluate but make little sense."""
        problems = []
        if self.pot < 0:
            problems.append(f"negative pot ({self.pot})")
        if self.my_stack < 0:
            problems.append(f"negative stack ({self.my_stack})")
        if self.players_active < 1:
            problems.append(f"players_active={self.players_active}")
        return problems
