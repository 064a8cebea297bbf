#!/usr/bin/env python3
"""Get a play recommendation for a hand from the command line.

Usage:
    # Pocket aces heads-up, preflop
    python -m poker_assistant.interface.assistant_cli --hole AsAh --pot 100 --stack 1000

    # Kings on a monotone flop, three players
    python -m poker_assistant.interface.assistant_cli --hole "Ks Kh" \\
        --board "2s 7s 9s" --pot 200 --players 3 --stack 800

    # Wire-format JSON instead of the text block
    python -m poker_assistant.interface.assistant_cli --hole 7c2d --pot 50 --players 6 --json

Example output:
    ══════════════════════════════════════════
      RECOMMENDATION: RAISE/CALL
    ══════════════════════════════════════════
      Hand:       Ks Kh (KK)
      Board:      2s 7s 9s (FLOP)
      Sizing:     100 - 150
      Win rate:   63%
      EV:         +$96
      Pot odds:   20%
    ══════════════════════════════════════════
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from poker_assistant.advisor.config import load_engine_config
from poker_assistant.advisor.engine import HandAdvisor
from poker_assistant.core.game_snapshot import GameSnapshot
from poker_assistant.strategy.recommendation import Recommendation
from poker_assistant.utils.card import parse_cards
from poker_assistant.utils.errors import AnalysisError

_RULE = "═" * 42


def _render(snapshot: GameSnapshot, rec: Recommendation) -> str:
    hole = " ".join(str(c) for c in snapshot.hole_cards)
    board = " ".join(str(c) for c in snapshot.community_cards) or "(none)"
    street = rec.street.value if rec.street else "?"
    lines = [
        _RULE,
        f"  RECOMMENDATION: {rec.action.value}",
        _RULE,
        f"  Hand:       {hole} ({rec.hand})",
        f"  Board:      {board} ({street})",
        f"  Sizing:     {rec.sizing.display}",
        f"  Win rate:   {rec.win_rate}%",
        f"  EV:         {rec.ev_display}",
        f"  Pot odds:   {rec.pot_odds:.0%}",
        _RULE,
    ]
    return "\n".join(lines)


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Recommend a poker action from hole cards, board, pot and stack.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--hole", required=True,
        help="Two hole cards, e.g. 'AhKs' or 'Ah Ks'",
    )
    parser.add_argument(
        "--board", default="",
        help="Community cards, e.g. '2s 7s 9s' (default: none)",
    )
    parser.add_argument("--pot", type=float, default=0.0, help="Current pot size")
    parser.add_argument(
        "--players", type=int, default=2,
        help="Players still active in the hand, including you (default: 2)",
    )
    parser.add_argument("--stack", type=float, default=0.0, help="Your remaining stack")
    parser.add_argument(
        "--config", type=Path, default=None,
        help="Engine config JSON (default: ~/.poker_assistant/engine_config.json)",
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print the recommendation as JSON",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Log INFO (-v) or DEBUG (-vv) details to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    advisor = HandAdvisor(load_engine_config(args.config))
    try:
        snapshot = GameSnapshot(
            hole_cards=parse_cards(args.hole),
            community_cards=parse_cards(args.board),
            pot=args.pot,
            players_active=args.players,
            my_stack=args.stack,
        )
        rec = advisor.evaluate(snapshot)
    except AnalysisError as e:
        print(f"No recommendation available: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(rec.to_dict(), indent=2))
    else:
        print(_render(snapshot, rec))
    return 0


if __name__ == "__main__":
    sys.exit(main())
