"""Preflop hand strength: canonical hand labels and heuristic win rates.

Hand notation:
  - "AA"  -> pocket pair
  - "AKs" -> suited ace-king
  - "AK"  -> offsuit ace-king

The base table is keyed by the unsuited two-rank label ("AK", "99") and
holds hand-tuned heads-up win rates in percent. Anything missing from the
table rates as a neutral 50.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from types import MappingProxyType

from poker_assistant.utils.card import Card
from poker_assistant.utils.constants import RANK_VALUES, Rank
from poker_assistant.utils.errors import InsufficientInputError, InvalidSnapshotError

NEUTRAL_WIN_RATE = 50.0

# Heads-up reference field: the player multiplier is 1.0 here.
REFERENCE_PLAYERS = 2
PLAYER_DECAY = 0.85

BASE_WIN_RATES: MappingProxyType[str, float] = MappingProxyType({
    # Pairs
    "AA": 85.0, "KK": 82.0, "QQ": 80.0, "JJ": 77.0, "TT": 75.0,
    "99": 72.0, "88": 69.0, "77": 66.0, "66": 63.0, "55": 60.0,
    "44": 57.0, "33": 54.0, "22": 51.0,
    # Broadway combinations
    "AK": 67.0, "AQ": 66.0, "AJ": 65.0, "KQ": 63.0, "KJ": 62.0,
})


@dataclass(frozen=True)
class HandLabel:
    """A starting hand independent of card order and suit identity."""

    high: Rank
    low: Rank
    suited: bool = False

    @property
    def is_pair(self) -> bool:
        return self.high == self.low

    @property
    def key(self) -> str:
        """Unsuited two-rank label used for the base table, e.g. 'AK'."""
        return f"{self.high.value}{self.low.value}"

    def __str__(self) -> str:
        return self.key + ("s" if self.suited else "")


def normalize_hand(card1: Card, card2: Card) -> HandLabel:
    """Convert two specific cards to their canonical label.

    The higher rank always comes first, so the result does not depend on
    the order the cards were seen in. Pairs are never marked suited.
    """
    if card1.rank == card2.rank:
        return HandLabel(card1.rank, card2.rank, suited=False)

    high, low = card1, card2
    if RANK_VALUES[low.rank] > RANK_VALUES[high.rank]:
        high, low = low, high
    return HandLabel(high.rank, low.rank, suited=card1.suit == card2.suit)


def normalize_hole_cards(cards: Sequence[Card]) -> HandLabel:
    """Normalize a hole-card sequence that must hold exactly two cards.

    Raises:
        InsufficientInputError: If fewer than two cards are known.
        InvalidSnapshotError: If more than two cards are given.
    """
    if len(cards) < 2:
        raise InsufficientInputError(
            f"Need 2 hole cards to rate a hand, got {len(cards)}"
        )
    if len(cards) > 2:
        raise InvalidSnapshotError(f"Need exactly 2 hole cards, got {len(cards)}")
    return normalize_hand(cards[0], cards[1])


def base_win_rate(label: HandLabel | str) -> float:
    """Look up the heads-up win rate for a hand label.

    Accepts a HandLabel or a label string; a trailing suited marker is
    ignored because the table only knows unsuited labels.
    """
    key = label.key if isinstance(label, HandLabel) else label.removesuffix("s")
    return BASE_WIN_RATES.get(key, NEUTRAL_WIN_RATE)


def adjust_for_players(
    rate: float,
    players_active: int,
    decay: float = PLAYER_DECAY,
    reference_players: int = REFERENCE_PLAYERS,
) -> float:
    """Scale a win rate for the number of players still in the hand.

    rate * decay ** (players_active - reference_players)

    Every extra opponent beyond heads-up multiplies by ``decay``. Fewer
    players than the reference give a multiplier above 1; zero or negative
    counts still produce a finite number: a multiplier too large for a
    float is capped at the largest finite float.
    """
    try:
        multiplier = decay ** (players_active - reference_players)
    except OverflowError:
        multiplier = sys.float_info.max
    return max(-sys.float_info.max, min(sys.float_info.max, rate * multiplier))


def clamp_win_rate(rate: float) -> float:
    """Clamp a win rate to the percentage range [0, 100]."""
    return max(0.0, min(100.0, rate))
