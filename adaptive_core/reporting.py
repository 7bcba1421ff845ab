# adaptive_core/reporting.py

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

from .schema import AttemptState, CognitiveDomain, DifficultyLevel, LEVEL_ORDER
from .irt_engine import standard_error

# Domain percentage thresholds for the strengths / improvement lists
STRENGTH_THRESHOLD = 80.0
IMPROVEMENT_THRESHOLD = 60.0


@dataclass
class DifficultyBreakdown:
    count: int = 0
    correct: int = 0
    percentage: float = 0.0


@dataclass
class AttemptSummary:
    total: int
    correct: int
    score: float
    max_score: float
    percentage: float
    passed: bool
    theta: float
    standard_error: float
    final_level: DifficultyLevel
    by_difficulty: Dict[DifficultyLevel, DifficultyBreakdown] = field(default_factory=dict)
    by_cognitive_domain: Dict[CognitiveDomain, DifficultyBreakdown] = field(default_factory=dict)
    strengths: List[str] = field(default_factory=list)
    areas_for_improvement: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe form: enum keys become strings, an infinite SE becomes None."""
        out = asdict(self)
        out["final_level"] = self.final_level.value
        out["standard_error"] = self.standard_error if math.isfinite(self.standard_error) else None
        out["by_difficulty"] = {level.value: asdict(b) for level, b in self.by_difficulty.items()}
        out["by_cognitive_domain"] = {d.value: asdict(b) for d, b in self.by_cognitive_domain.items()}
        return out


def _fill_percentages(buckets) -> None:
    for bucket in buckets.values():
        bucket.percentage = (bucket.correct / bucket.count) * 100 if bucket.count > 0 else 0.0


def summarize_attempt(state: AttemptState, passing_score: float = 60.0) -> AttemptSummary:
    """
    Score an attempt and break it down per tier and per cognitive domain.

    The percentage is points-weighted (score / max_score). Every tier and
    every domain appears in the breakdowns, zero-filled when unused;
    responses without a domain are left out of the domain breakdown.
    """
    by_difficulty = {level: DifficultyBreakdown() for level in LEVEL_ORDER}
    by_domain = {domain: DifficultyBreakdown() for domain in CognitiveDomain}
    score = 0.0
    max_score = 0.0

    for r in state.responses:
        max_score += r.points
        if r.correct:
            score += r.points

        buckets = [by_difficulty[r.difficulty_level]]
        if r.cognitive_domain is not None:
            buckets.append(by_domain[r.cognitive_domain])
        for bucket in buckets:
            bucket.count += 1
            if r.correct:
                bucket.correct += 1

    _fill_percentages(by_difficulty)
    _fill_percentages(by_domain)

    strengths = [
        f"Strong performance in {domain.value} tasks"
        for domain, b in by_domain.items()
        if b.count > 0 and b.percentage >= STRENGTH_THRESHOLD
    ]
    areas_for_improvement = [
        f"Needs improvement in {domain.value} tasks"
        for domain, b in by_domain.items()
        if b.count > 0 and b.percentage < IMPROVEMENT_THRESHOLD
    ]

    percentage = (score / max_score) * 100 if max_score > 0 else 0.0

    return AttemptSummary(
        total=len(state.responses),
        correct=sum(1 for r in state.responses if r.correct),
        score=score,
        max_score=max_score,
        percentage=percentage,
        passed=percentage >= passing_score,
        theta=state.theta,
        standard_error=standard_error(state.theta, state.responses),
        final_level=state.current_level,
        by_difficulty=by_difficulty,
        by_cognitive_domain=by_domain,
        strengths=strengths,
        areas_for_improvement=areas_for_improvement,
    )
