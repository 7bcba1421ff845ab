"""
adaptive_core/session.py
------------------------
One adaptive attempt end to end: estimate θ, pick the tier, ask the
question bank for candidates at that tier, then choose by information.
"""

from __future__ import annotations

import logging
import random
from datetime import datetime
from typing import Optional, Sequence

from .schema import AttemptState, DifficultyLevel, Item, Response
from .irt_engine import estimate_ability
from .difficulty_policy import DifficultyPolicy, next_difficulty
from .adaptive_selector import ExhaustedPoolError, select_item
from .question_bank import InMemoryQuestionBank
from .config import AdaptiveSettings
from .reporting import AttemptSummary, summarize_attempt

logger = logging.getLogger(__name__)


class AdaptiveSession:
    def __init__(
        self,
        bank: InMemoryQuestionBank,
        *,
        policy: Optional[DifficultyPolicy] = None,
        settings: Optional[AdaptiveSettings] = None,
        rng: Optional[random.Random] = None,
        subject: Optional[str] = None,
        topics: Optional[Sequence[str]] = None,
        initial_level: DifficultyLevel = DifficultyLevel.INTERMEDIATE,
    ):
        """
        Args:
            bank: question bank to draw candidates from
            policy: tier thresholds; defaults to settings.policy()
            settings: engine settings (top_k, iterations, passing score)
            rng: random source for item selection
            subject/topics: scope passed through to the bank
            initial_level: tier of the first question
        """
        self.bank = bank
        self.settings = settings or AdaptiveSettings()
        self.policy = policy or self.settings.policy()
        self.rng = rng or random.Random(self.settings.seed)
        self.subject = subject
        self.topics = list(topics) if topics else None
        self.state = AttemptState(current_level=DifficultyLevel(initial_level))

    def _estimate(self) -> float:
        return estimate_ability(self.state.responses, iterations=self.settings.iterations)

    def next_item(self) -> Item:
        """
        Choose the next question.

        Falls back to every unanswered item in scope when the current tier
        has nothing left.

        Raises:
            ExhaustedPoolError: if no unanswered item remains in scope.
        """
        state = self.state
        state.theta = self._estimate()

        # The tier only moves on new evidence, not on a re-requested item
        if len(state.responses) > state.evaluated_count:
            new_level = next_difficulty(state.responses, state.current_level, self.policy)
            if new_level != state.current_level:
                logger.info(f"Difficulty {state.current_level.value} -> {new_level.value} (theta={state.theta:.2f})")
            state.current_level = new_level
            state.evaluated_count = len(state.responses)

        answered = {r.item_id for r in state.responses} | set(state.asked)
        pool = self.bank.search(
            difficulty_level=state.current_level,
            subject=self.subject,
            topics=self.topics,
            exclude_ids=answered,
        )
        if not pool:
            logger.warning(f"No unanswered items at {state.current_level.value}, broadening to all tiers")
            pool = self.bank.search(subject=self.subject, topics=self.topics, exclude_ids=answered)

        if not pool:
            raise ExhaustedPoolError(
                f"Question bank exhausted after {len(state.responses)} responses",
                theta=state.theta,
            )

        item = select_item(pool, state.theta, rng=self.rng, top_k=self.settings.top_k)
        state.asked.append(item.id)
        return item

    def record_response(self, item: Item, correct: bool, timestamp: Optional[datetime] = None) -> Response:
        """Store an answer and refresh θ."""
        if any(r.item_id == item.id for r in self.state.responses):
            raise ValueError(f"Item {item.id} already answered in this attempt")

        kwargs = {"timestamp": timestamp} if timestamp is not None else {}
        response = Response(
            item_id=item.id,
            difficulty_level=item.difficulty_level,
            correct=bool(correct),
            points=item.points,
            cognitive_domain=item.cognitive_domain,
            **kwargs,
        )
        self.state.responses.append(response)
        self.state.theta = self._estimate()
        return response

    def summary(self) -> AttemptSummary:
        return summarize_attempt(self.state, passing_score=self.settings.passing_score)
