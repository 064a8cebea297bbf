"""HandAdvisor: stateless pipeline from a table snapshot to a recommendation.

    GameSnapshot
      -> normalize hole cards (canonical label)
      -> base win rate lookup
      -> player-count adjustment
      -> board-texture adjustment
      -> clamp to [0, 100]
      -> pot odds, recommendation policy, EV
      -> Recommendation

Nothing is cached between calls, so one advisor can serve any number of
callers at once. Input errors (AnalysisError subclasses) propagate to the
caller; degenerate numbers are logged and still evaluated.
"""

from __future__ import annotations

import logging
import time

from poker_assistant.advisor.config import EngineConfig
from poker_assistant.core.game_snapshot import GameSnapshot
from poker_assistant.core.hand_strength import (
    HandLabel,
    adjust_for_players,
    base_win_rate,
    clamp_win_rate,
    normalize_hole_cards,
)
from poker_assistant.strategy.board_texture import analyze_board
from poker_assistant.strategy.recommendation import (
    Recommendation,
    expected_value,
    pot_odds,
    recommend,
    round_half_up,
)

logger = logging.getLogger("poker_assistant.advisor")


class HandAdvisor:
    """Turns one GameSnapshot into one Recommendation.

    Usage:
        advisor = HandAdvisor()
        rec = advisor.evaluate(snapshot)
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self._config = config or EngineConfig()

    @property
    def config(self) -> EngineConfig:
        return self._config

    def adjusted_win_rate(self, snapshot: GameSnapshot) -> float:
        """Win rate in percent after player and board adjustments."""
        return self._win_rate_for(normalize_hole_cards(snapshot.hole_cards), snapshot)

    def _win_rate_for(self, label: HandLabel, snapshot: GameSnapshot) -> float:
        cfg = self._config
        base = base_win_rate(label)
        rate = adjust_for_players(
            base, snapshot.players_active,
            decay=cfg.player_decay,
            reference_players=cfg.reference_players,
        )
        logger.debug(
            "Hand %s: base=%.1f, players=%d -> %.2f",
            label, base, snapshot.players_active, rate,
        )

        texture = analyze_board(snapshot.community_cards, cfg.straight_window)
        if texture.is_analyzed:
            rate *= texture.multiplier(cfg.flush_penalty, cfg.straight_penalty)
            logger.debug(
                "Board texture: cards=%d, max_suit=%d, high=%d, "
                "flush_possible=%s, straight_possible=%s -> %.2f",
                texture.num_cards, texture.max_suit_count, texture.high_card_rank,
                texture.flush_possible, texture.straight_possible, rate,
            )

        if cfg.clamp_win_rate:
            clamped = clamp_win_rate(rate)
            if clamped != rate:
                logger.debug("Clamped win rate %.2f -> %.2f", rate, clamped)
            rate = clamped
        return rate

    def evaluate(self, snapshot: GameSnapshot) -> Recommendation:
        """Produce a recommendation for a single snapshot.

        Raises:
            InsufficientInputError: If the snapshot lacks two hole cards.
            InvalidSnapshotError: If the hole cards are otherwise malformed.
        """
        t_start = time.perf_counter()

        for problem in snapshot.degenerate_fields():
            logger.warning("Degenerate input: %s", problem)

        cfg = self._config
        label = normalize_hole_cards(snapshot.hole_cards)
        rate = self._win_rate_for(label, snapshot)
        odds = pot_odds(snapshot.pot, snapshot.my_stack)
        action, sizing = recommend(rate, snapshot.pot)
        ev = expected_value(
            rate, snapshot.pot, snapshot.my_stack,
            downside_pot_fraction=cfg.downside_pot_fraction,
            downside_stack_fraction=cfg.downside_stack_fraction,
        )

        result = Recommendation(
            action=action,
            sizing=sizing,
            win_rate=round_half_up(rate),
            expected_value=ev,
            pot_odds=odds,
            hand=str(label),
            street=snapshot.street,
        )

        elapsed_ms = (time.perf_counter() - t_start) * 1000
        logger.info(
            "%s %s -> %s (win_rate=%d%%, ev=%s, pot_odds=%.2f, %.1fms)",
            result.street or "?",
            result.hand,
            result.action,
            result.win_rate,
            result.ev_display,
            odds,
            elapsed_ms,
        )
        return result
