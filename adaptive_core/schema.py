# adaptive_core/schema.py

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional


class DifficultyLevel(str, Enum):
    """
    Difficulty tiers presented to the student, ordered from floor to ceiling.
    Values match the strings stored by the question bank.
    """
    BEGINNER = "beginner"
    FOUNDATION = "foundation"
    INTERMEDIATE = "intermediate"
    HIGHER = "higher"
    ADVANCED = "advanced"
    CHALLENGE = "challenge"


# Total order of the tiers
LEVEL_ORDER: List[DifficultyLevel] = list(DifficultyLevel)

# IRT b-parameter for each tier
DIFFICULTY_B_PARAMS: Dict[DifficultyLevel, float] = {
    DifficultyLevel.BEGINNER: -2.0,
    DifficultyLevel.FOUNDATION: -1.0,
    DifficultyLevel.INTERMEDIATE: 0.0,
    DifficultyLevel.HIGHER: 1.0,
    DifficultyLevel.ADVANCED: 2.0,
    DifficultyLevel.CHALLENGE: 3.0,
}

# Shared discrimination (a-parameter) for every item
DISCRIMINATION = 1.0


def b_param(level: DifficultyLevel) -> float:
    """Numeric IRT difficulty for a tier."""
    return DIFFICULTY_B_PARAMS[DifficultyLevel(level)]


def level_index(level: DifficultyLevel) -> int:
    return LEVEL_ORDER.index(DifficultyLevel(level))


class CognitiveDomain(str, Enum):
    """Bloom's taxonomy domain a question targets."""
    REMEMBER = "remember"
    UNDERSTAND = "understand"
    APPLY = "apply"
    ANALYSE = "analyse"
    EVALUATE = "evaluate"
    CREATE = "create"


@dataclass
class Item:
    """
    A question as seen by the adaptive core:
    - difficulty_level decides the b-parameter
    - subject/topic are only used by the question bank for scoping
    - points/cognitive_domain only feed the attempt summary
    """
    id: str
    difficulty_level: DifficultyLevel

    subject: Optional[str] = None
    topic: Optional[str] = None
    stem: Optional[str] = None
    points: float = 1.0
    cognitive_domain: Optional[CognitiveDomain] = None

    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.difficulty_level = DifficultyLevel(self.difficulty_level)
        if self.cognitive_domain is not None:
            self.cognitive_domain = CognitiveDomain(self.cognitive_domain)

    @property
    def b(self) -> float:
        return b_param(self.difficulty_level)


@dataclass(frozen=True)
class Response:
    """A recorded answer. Immutable once created."""
    item_id: str
    difficulty_level: DifficultyLevel
    correct: bool
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    points: float = 1.0
    cognitive_domain: Optional[CognitiveDomain] = None

    @property
    def difficulty(self) -> float:
        return b_param(self.difficulty_level)


@dataclass
class AttemptState:
    """
    State of one adaptive attempt. Owned by the caller, never by the core:
    theta is the continuous ability estimate, current_level the tier shown.
    """
    theta: float = 0.0
    current_level: DifficultyLevel = DifficultyLevel.INTERMEDIATE
    responses: List[Response] = field(default_factory=list)
    asked: List[str] = field(default_factory=list)

    # Number of responses the current tier was last decided from
    evaluated_count: int = 0
