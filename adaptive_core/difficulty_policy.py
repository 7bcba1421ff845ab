# adaptive_core/difficulty_policy.py

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from .schema import DifficultyLevel, LEVEL_ORDER, level_index

logger = logging.getLogger(__name__)


# ============================
# Policy constants
# ============================

UPPER_THRESHOLD = 0.85
LOWER_THRESHOLD = 0.60
RECENT_WINDOW = 5


@dataclass(frozen=True)
class DifficultyPolicy:
    """
    Zone of Proximal Development thresholds.
    - success rate above upper_threshold: step one tier up
    - success rate below lower_threshold: step one tier down
    - otherwise hold (both boundaries hold)
    """
    upper_threshold: float = UPPER_THRESHOLD
    lower_threshold: float = LOWER_THRESHOLD
    window: int = RECENT_WINDOW

    def __post_init__(self) -> None:
        if not (0.0 <= self.lower_threshold <= self.upper_threshold <= 1.0):
            raise ValueError(
                f"Thresholds must satisfy 0 <= lower <= upper <= 1, "
                f"got lower={self.lower_threshold}, upper={self.upper_threshold}"
            )
        if self.window < 1:
            raise ValueError(f"window must be >= 1, got {self.window}")


DEFAULT_POLICY = DifficultyPolicy()


# ============================
# Tier stepping
# ============================

def step_up(level: DifficultyLevel) -> DifficultyLevel:
    """One tier harder; CHALLENGE stays CHALLENGE."""
    idx = min(level_index(level) + 1, len(LEVEL_ORDER) - 1)
    return LEVEL_ORDER[idx]


def step_down(level: DifficultyLevel) -> DifficultyLevel:
    """One tier easier; BEGINNER stays BEGINNER."""
    idx = max(level_index(level) - 1, 0)
    return LEVEL_ORDER[idx]


def _is_correct(response: Any) -> bool:
    """Accepts booleans, Response objects, mappings and (correct, difficulty) pairs."""
    if isinstance(response, bool):
        return response
    if isinstance(response, tuple):
        return bool(response[0])
    if isinstance(response, Mapping):
        return bool(response["correct"])
    return bool(response.correct)


def success_rate(recent: Sequence[Any], window: int = RECENT_WINDOW) -> Optional[float]:
    """Fraction correct over at most the last `window` responses, None if empty."""
    if window < 1:
        raise ValueError(f"window must be >= 1, got {window}")
    windowed = list(recent)[-window:]
    if not windowed:
        return None
    return sum(1 for r in windowed if _is_correct(r)) / len(windowed)


# ============================
# Main API
# ============================

def next_difficulty(
    recent: Sequence[Any],
    current_level: DifficultyLevel,
    policy: Optional[DifficultyPolicy] = None,
) -> DifficultyLevel:
    """
    Choose the tier for the next question from recent performance.

    Only the `policy.window` most recent responses count; older ones are
    discarded. Responses may be Response objects, mappings with a
    "correct" key, or plain booleans.
    """
    policy = policy or DEFAULT_POLICY
    current_level = DifficultyLevel(current_level)

    rate = success_rate(recent, policy.window)
    if rate is None:
        return current_level

    if rate > policy.upper_threshold:
        new_level = step_up(current_level)
    elif rate < policy.lower_threshold:
        new_level = step_down(current_level)
    else:
        new_level = current_level

    logger.debug(f"success_rate={rate:.2f} {current_level.value} -> {new_level.value}")
    return new_level
