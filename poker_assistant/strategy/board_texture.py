"""Board texture analysis and the win-rate penalty it implies.

Texture here is a coarse signal that a flush or straight is plausible on
the board, not a count of outs. Paired boards and wheel straights are not
considered.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from poker_assistant.utils.card import Card

MIN_TEXTURE_CARDS = 3
FLUSH_PENALTY = 0.9
STRAIGHT_PENALTY = 0.9
# Three ranks spanning at most this many steps fit in one 5-card straight.
STRAIGHT_WINDOW = 4


@dataclass(frozen=True)
class BoardTexture:
    """Analysis of the community card texture."""

    num_cards: int = 0
    max_suit_count: int = 0
    high_card_rank: int = 0
    flush_possible: bool = False  # 3+ cards of one suit
    straight_possible: bool = False  # 3 ranks inside a straight window

    @property
    def is_analyzed(self) -> bool:
        """Whether enough cards were out for texture to mean anything."""
        return self.num_cards >= MIN_TEXTURE_CARDS

    def multiplier(
        self,
        flush_penalty: float = FLUSH_PENALTY,
        straight_penalty: float = STRAIGHT_PENALTY,
    ) -> float:
        """Combined multiplicative penalty; both draws stack independently."""
        factor = 1.0
        if self.flush_possible:
            factor *= flush_penalty
        if self.straight_possible:
            factor *= straight_penalty
        return factor


def has_straight_possibility(values: Sequence[int], window: int = STRAIGHT_WINDOW) -> bool:
    """Check if any 3 consecutive sorted rank values lie within ``window``."""
    ordered = sorted(values)
    for i in range(len(ordered) - 2):
        if ordered[i + 2] - ordered[i] <= window:
            return True
    return False


def analyze_board(
    community_cards: Sequence[Card],
    straight_window: int = STRAIGHT_WINDOW,
) -> BoardTexture:
    """Analyze the texture of the community cards.

    Boards with fewer than three cards carry no draw flags at all.
    """
    if not community_cards:
        return BoardTexture()

    suit_counts = Counter(c.suit for c in community_cards)
    max_suit_count = max(suit_counts.values())
    values = [c.value for c in community_cards]

    analyzed = len(community_cards) >= MIN_TEXTURE_CARDS
    return BoardTexture(
        num_cards=len(community_cards),
        max_suit_count=max_suit_count,
        high_card_rank=max(values),
        flush_possible=analyzed and max_suit_count >= 3,
        straight_possible=analyzed and has_straight_possibility(values, straight_window),
    )


def adjust_for_board(
    rate: float,
    community_cards: Sequence[Card],
    flush_penalty: float = FLUSH_PENALTY,
    straight_penalty: float = STRAIGHT_PENALTY,
    straight_window: int = STRAIGHT_WINDOW,
) -> float:
    """Apply flush and straight texture penalties to a win rate.

    Identity when fewer than three community cards are out.
    """
    texture = analyze_board(community_cards, straight_window)
    return rate * texture.multiplier(flush_penalty, straight_penalty)
