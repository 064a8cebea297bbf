"""Tunable constants for the hand advisor, optionally loaded from JSON."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path

from poker_assistant.core.hand_strength import PLAYER_DECAY, REFERENCE_PLAYERS
from poker_assistant.strategy.board_texture import (
    FLUSH_PENALTY,
    STRAIGHT_PENALTY,
    STRAIGHT_WINDOW,
)
from poker_assistant.strategy.recommendation import (
    DOWNSIDE_POT_FRACTION,
    DOWNSIDE_STACK_FRACTION,
)

logger = logging.getLogger("poker_assistant.advisor.config")

DEFAULT_CONFIG_PATH = Path.home() / ".poker_assistant" / "engine_config.json"


@dataclass(frozen=True)
class EngineConfig:
    """Multipliers and caps used by the advisor pipeline."""

    player_decay: float = PLAYER_DECAY
    reference_players: int = REFERENCE_PLAYERS
    flush_penalty: float = FLUSH_PENALTY
    straight_penalty: float = STRAIGHT_PENALTY
    straight_window: int = STRAIGHT_WINDOW
    downside_pot_fraction: float = DOWNSIDE_POT_FRACTION
    downside_stack_fraction: float = DOWNSIDE_STACK_FRACTION
    clamp_win_rate: bool = True


def _accepts(expected: type, value: object) -> bool:
    if expected is bool:
        return isinstance(value, bool)
    if expected is int:
        return isinstance(value, int) and not isinstance(value, bool)
    # Floats also take ints from JSON ("player_decay": 1).
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def load_engine_config(config_path: Path | None = None) -> EngineConfig:
    """Load advisor configuration from a JSON file.

    Default path: ~/.poker_assistant/engine_config.json

    A missing file gives the defaults. An unreadable file, unknown keys and
    values of the wrong type are logged as warnings and fall back to the
    defaults for the affected keys.

    Expected JSON format:
        {
            "player_decay": 0.85,
            "flush_penalty": 0.9,
            "clamp_win_rate": true
        }
    """
    path = config_path or DEFAULT_CONFIG_PATH
    if not path.exists():
        return EngineConfig()

    try:
        with open(path) as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to read engine config at %s: %s", path, e)
        return EngineConfig()

    if not isinstance(data, dict):
        logger.warning("Engine config at %s must be a JSON object", path)
        return EngineConfig()

    # Defaults are literals, so their runtime type is the field's type.
    defaults = EngineConfig()
    field_types = {f.name: type(getattr(defaults, f.name)) for f in fields(EngineConfig)}
    values = {}
    for key, value in data.items():
        expected = field_types.get(key)
        if expected is None:
            logger.warning("Ignoring unknown engine config key: %s", key)
            continue
        if not _accepts(expected, value):
            logger.warning(
                "Engine config key %s must be %s, got %r", key, expected.__name__, value,
            )
            continue
        values[key] = expected(value)

    if values.get("player_decay", PLAYER_DECAY) <= 0:
        logger.warning("Engine config player_decay must be positive, using default")
        values.pop("player_decay")

    return EngineConfig(**values)
