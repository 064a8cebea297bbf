"""Recommendation policy, pot odds and expected value.

The policy is a fixed threshold ladder on the adjusted win rate, checked
top-down (first match wins, lower bounds exclusive):

    > 75        RAISE          bet 0.75x - 1.0x pot
    > 60        RAISE/CALL     bet 0.5x - 0.75x pot
    > 45        CALL           advisory text
    > 30        CHECK/FOLD     advisory text
    otherwise   FOLD           advisory text

Sizing is a tagged union: a numeric SizingRange for the raising bands and
a SizingDirective string for the rest.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Any

from poker_assistant.utils.constants import AdviceAction, Street

DOWNSIDE_POT_FRACTION = 0.5
DOWNSIDE_STACK_FRACTION = 0.1


def round_half_up(x: float) -> int:
    """Round to the nearest integer; halves round up (toward +infinity), like JS Math.round."""
    return math.floor(x + 0.5)


# ---------------------------------------------------------------------------
# Sizing
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SizingRange:
    """Suggested bet between ``low`` and ``high`` whole currency units."""

    low: int
    high: int

    kind = "range"

    @property
    def display(self) -> str:
        return f"{self.low} - {self.high}"

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "low": self.low, "high": self.high, "display": self.display}


@dataclass(frozen=True)
class SizingDirective:
    """Advice text used where a bet size makes no sense."""

    text: str

    kind = "directive"

    @property
    def display(self) -> str:
        return self.text

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "text": self.text, "display": self.display}


Sizing = SizingRange | SizingDirective


@dataclass(frozen=True)
class PolicyBand:
    """One rung of the threshold ladder."""

    floor: float  # exclusive lower bound on win rate
    action: AdviceAction
    pot_fractions: tuple[float, float] | None = None
    directive: str = ""

    def sizing(self, pot: float) -> Sizing:
        if self.pot_fractions is None:
            return SizingDirective(self.directive)
        low, high = self.pot_fractions
        return SizingRange(round_half_up(pot * low), round_half_up(pot * high))


POLICY_BANDS: tuple[PolicyBand, ...] = (
    PolicyBand(75.0, AdviceAction.RAISE, pot_fractions=(0.75, 1.0)),
    PolicyBand(60.0, AdviceAction.RAISE_OR_CALL, pot_fractions=(0.5, 0.75)),
    PolicyBand(45.0, AdviceAction.CALL, directive="Call if bet is reasonable"),
    PolicyBand(30.0, AdviceAction.CHECK_OR_FOLD, directive="Check if possible, fold to large bets"),
)

FOLD_BAND = PolicyBand(-math.inf, AdviceAction.FOLD, directive="Fold to any bet")


def select_band(win_rate: float) -> PolicyBand:
    for band in POLICY_BANDS:
        if win_rate > band.floor:
            return band
    return FOLD_BAND


def recommend(win_rate: float, pot: float) -> tuple[AdviceAction, Sizing]:
    """Map a win rate (percent) to an action and a bet-sizing hint."""
    band = select_band(win_rate)
    return band.action, band.sizing(pot)


# ---------------------------------------------------------------------------
# Pot odds and EV
# ---------------------------------------------------------------------------


def pot_odds(pot: float, stack: float) -> float:
    """Fraction of pot + stack that the pot represents, in [0, 1].

    Zero when the pot is empty. Degenerate (negative) amounts are kept
    inside [0, 1] instead of dividing by zero.
    """
    if pot <= 0:
        return 0.0
    total = pot + stack
    if total <= 0:
        return 1.0
    return min(1.0, pot / total)


def expected_value(
    win_rate: float,
    pot: float,
    stack: float,
    downside_pot_fraction: float = DOWNSIDE_POT_FRACTION,
    downside_stack_fraction: float = DOWNSIDE_STACK_FRACTION,
) -> float:
    """Bounded EV estimate in currency units.

    ev = p_win * pot - p_lose * min(pot * 0.5, stack * 0.1)

    The downside is capped at the lesser of half the pot or a tenth of the
    remaining stack. This is a conservative loss figure, not a call-cost model.
    Unclamped, oversized win rates can overflow; the result is kept inside
    the finite float range and an undefined (NaN) result counts as 0.
    """
    downside = min(pot * downside_pot_fraction, stack * downside_stack_fraction)
    ev = (win_rate / 100) * pot - ((100 - win_rate) / 100) * downside
    if math.isnan(ev):
        return 0.0
    return max(-sys.float_info.max, min(sys.float_info.max, ev))


def format_ev(ev: float) -> str:
    """Render an EV as a signed whole-dollar amount: '+$12' or '-$7'."""
    sign = "-" if ev < 0 else "+"
    return f"{sign}${round_half_up(abs(ev))}"


# ---------------------------------------------------------------------------
# Output record
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Recommendation:
    """The assistant's advice for one table snapshot."""

    action: AdviceAction
    sizing: Sizing
    win_rate: int  # percent, rounded half-up
    expected_value: float
    pot_odds: float = 0.0
    hand: str = ""
    street: Street | None = None

    @property
    def ev_display(self) -> str:
        return format_ev(self.expected_value)

    def to_dict(self) -> dict[str, Any]:
        """Wire shape sent back to the page overlay."""
        return {
            "action": self.action.value,
            "sizing": self.sizing.to_dict(),
            "winRate": self.win_rate,
            "expectedValue": round(self.expected_value, 2),
            "expectedValueDisplay": self.ev_display,
            "potOdds": round(self.pot_odds, 4),
            "hand": self.hand,
            "street": self.street.value if self.street else None,
        }
