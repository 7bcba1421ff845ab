# adaptive_core/simulation.py

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from tqdm import tqdm

from .schema import DifficultyLevel
from .irt_engine import prob_correct
from .difficulty_policy import DifficultyPolicy
from .adaptive_selector import ExhaustedPoolError
from .question_bank import InMemoryQuestionBank
from .config import AdaptiveSettings
from .reporting import AttemptSummary
from .session import AdaptiveSession

logger = logging.getLogger(__name__)


@dataclass
class SimulatedStudent:
    true_theta: float
    summary: AttemptSummary


def simulate_attempt(
    true_theta: float,
    bank: InMemoryQuestionBank,
    *,
    length: int = 10,
    rng: Optional[random.Random] = None,
    policy: Optional[DifficultyPolicy] = None,
    settings: Optional[AdaptiveSettings] = None,
    initial_level: DifficultyLevel = DifficultyLevel.INTERMEDIATE,
) -> AttemptSummary:
    """
    Run one attempt for a virtual student whose answers follow the 2PL
    model at `true_theta`. Stops early if the bank runs out.
    """
    rng = rng or random.Random()
    session = AdaptiveSession(bank, policy=policy, settings=settings, rng=rng, initial_level=initial_level)

    for step in range(length):
        try:
            item = session.next_item()
        except ExhaustedPoolError as e:
            logger.warning(f"Stopped after {step} items: {e}")
            break
        correct = rng.random() < prob_correct(true_theta, item.b)
        session.record_response(item, correct)

    return session.summary()


def simulate_cohort(
    thetas: Sequence[float],
    bank: InMemoryQuestionBank,
    *,
    length: int = 10,
    seed: Optional[int] = None,
    settings: Optional[AdaptiveSettings] = None,
    progress: bool = False,
) -> List[SimulatedStudent]:
    """One simulated attempt per true θ, sharing a single seeded random source."""
    rng = random.Random(seed)
    results: List[SimulatedStudent] = []

    for theta in tqdm(thetas, desc="Simulating", ncols=80, disable=not progress):
        summary = simulate_attempt(theta, bank, length=length, rng=rng, settings=settings)
        results.append(SimulatedStudent(true_theta=theta, summary=summary))

    logger.info(f"Simulated {len(results)} attempts of up to {length} items")
    return results
