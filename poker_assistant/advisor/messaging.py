"""Request/reply boundary between the page scraper and the advisor.

One request carries one hand payload and gets exactly one reply:

    {"action": "analyzeHand", "hand": {...}}
      -> {"recommendation": {...}}
      -> {"error": "Failed to analyze hand", "reason": "insufficient_input"}

Requests for any other action are not ours and get no reply (None).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from poker_assistant.advisor.engine import HandAdvisor
from poker_assistant.core.game_snapshot import GameSnapshot
from poker_assistant.utils.errors import AnalysisError

logger = logging.getLogger("poker_assistant.advisor.messaging")

ANALYZE_HAND = "analyzeHand"
ERROR_MESSAGE = "Failed to analyze hand"


def _error_reply(reason: str) -> dict[str, Any]:
    return {"error": ERROR_MESSAGE, "reason": reason}


def handle_message(
    request: Mapping[str, Any],
    advisor: HandAdvisor | None = None,
) -> dict[str, Any] | None:
    """Answer a single analyzeHand request.

    Input errors become an error reply carrying the error's reason code.
    Unexpected failures are logged with a traceback and reported as
    reason "internal"; nothing is retried.
    """
    if not isinstance(request, Mapping) or request.get("action") != ANALYZE_HAND:
        return None

    advisor = advisor or HandAdvisor()
    try:
        snapshot = GameSnapshot.from_payload(request.get("hand"))
        recommendation = advisor.evaluate(snapshot)
    except AnalysisError as e:
        logger.info("No recommendation available (%s): %s", e.reason, e)
        return _error_reply(e.reason)
    except Exception:
        logger.exception("Error analyzing hand")
        return _error_reply("internal")

    return {"recommendation": recommendation.to_dict()}
