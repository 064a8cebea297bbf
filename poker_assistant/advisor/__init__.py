"""Hand advisor: snapshot in, play recommendation out.

Key public API:
    HandAdvisor     -- Stateless snapshot -> Recommendation pipeline
    EngineConfig    -- Tunable multipliers, loadable from JSON
    handle_message  -- Single request/reply boundary for the page scraper
"""

from poker_assistant.advisor.config import EngineConfig, load_engine_config
from poker_assistant.advisor.engine import HandAdvisor
from poker_assistant.advisor.messaging import handle_message

__all__ = ["EngineConfig", "HandAdvisor", "handle_message", "load_engine_config"]
