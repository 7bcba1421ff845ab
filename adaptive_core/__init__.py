# adaptive_core/__init__.py

"""
Adaptive difficulty engine

Includes:
- 2PL IRT model and fixed-iteration ability estimation
- Zone of Proximal Development tier stepping from recent success rate
- Fisher-information item selection with a random pick among the top items
- An in-memory question bank, an attempt loop and attempt summaries

Commonly used exports:
    DifficultyLevel, Item, Response, AttemptState
    estimate_ability, next_difficulty, select_item, ExhaustedPoolError
    AdaptiveSession, load_settings
"""

# Schema models
from .schema import (
    DifficultyLevel,
    CognitiveDomain,
    DIFFICULTY_B_PARAMS,
    DISCRIMINATION,
    Item,
    Response,
    AttemptState,
    b_param,
)

# IRT computation & scoring
from .irt_engine import (
    prob_correct,
    fisher_info,
    estimate_ability,
    standard_error,
)

# Tier policy
from .difficulty_policy import (
    DifficultyPolicy,
    next_difficulty,
    step_up,
    step_down,
    success_rate,
)

# Adaptive selection algorithm
from .adaptive_selector import (
    ExhaustedPoolError,
    rank_by_information,
    select_item,
)

# Attempt loop
from .question_bank import InMemoryQuestionBank, load_question_bank, build_synthetic_bank
from .config import AdaptiveSettings, load_settings, configure_logging
from .reporting import AttemptSummary, summarize_attempt
from .session import AdaptiveSession


__all__ = [
    # Schema
    "DifficultyLevel",
    "CognitiveDomain",
    "DIFFICULTY_B_PARAMS",
    "DISCRIMINATION",
    "Item",
    "Response",
    "AttemptState",
    "b_param",

    # IRT
    "prob_correct",
    "fisher_info",
    "estimate_ability",
    "standard_error",

    # Policy
    "DifficultyPolicy",
    "next_difficulty",
    "step_up",
    "step_down",
    "success_rate",

    # Adaptive selector
    "ExhaustedPoolError",
    "rank_by_information",
    "select_item",

    # Attempt loop
    "InMemoryQuestionBank",
    "load_question_bank",
    "build_synthetic_bank",
    "AdaptiveSettings",
    "load_settings",
    "configure_logging",
    "AttemptSummary",
    "summarize_attempt",
    "AdaptiveSession",
]
