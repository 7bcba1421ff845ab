# adaptive_core/irt_engine.py

import logging
import math
from collections.abc import Mapping
from typing import Any, Iterable, List, Tuple

from .schema import DISCRIMINATION

logger = logging.getLogger(__name__)

# Fixed number of Newton-style passes in estimate_ability
ABILITY_ITERATIONS = 5


def sigmoid_stable(x: float) -> float:
    """
    Numerically stable logistic: never calls exp() on a large positive value.
    """
    if x >= 0:
        z = math.exp(-x)
        return 1.0 / (1.0 + z)
    else:
        z = math.exp(x)
        return z / (1.0 + z)


def prob_correct(theta: float, b: float, a: float = DISCRIMINATION) -> float:
    """Probability of a correct answer under the 2PL model."""
    return sigmoid_stable(a * (theta - b))


def fisher_info(theta: float, b: float, a: float = DISCRIMINATION) -> float:
    """Fisher information I(θ) = a²·p·(1-p) of a 2PL item."""
    p = prob_correct(theta, b, a)
    return (a * a) * p * (1.0 - p)


def _as_pair(response: Any) -> Tuple[bool, float]:
    """
    Normalise one response to (correct, difficulty).
    Accepts Response objects, mappings and (correct, difficulty) tuples.
    """
    if isinstance(response, tuple):
        correct, difficulty = response
        return bool(correct), float(difficulty)
    if isinstance(response, Mapping):
        return bool(response["correct"]), float(response["difficulty"])
    return bool(response.correct), float(response.difficulty)


def estimate_ability(
    responses: Iterable[Any],
    a: float = DISCRIMINATION,
    iterations: int = ABILITY_ITERATIONS,
) -> float:
    """
    Estimate θ from an ordered list of responses.

    Runs a fixed number of Newton-style passes starting from θ = 0.0
    (no convergence check, no clamping). A pass whose denominator is zero
    leaves θ unchanged. An empty list returns the population mean 0.0.

    Args:
        responses: Response objects, {"correct", "difficulty"} mappings or
            (correct, difficulty) pairs.
        a: discrimination shared by all items.
        iterations: number of passes.
    """
    pairs: List[Tuple[bool, float]] = [_as_pair(r) for r in responses]
    if not pairs:
        return 0.0

    theta = 0.0
    for step in range(iterations):
        numerator = 0.0
        denominator = 0.0
        for correct, b in pairs:
            p = prob_correct(theta, b, a)
            numerator += (1.0 - p) if correct else -p
            denominator += p * (1.0 - p)

        if denominator == 0:
            logger.debug(f"Zero information at step {step}, theta={theta:.4f}; skipping update")
            continue

        theta += numerator / denominator

    logger.debug(f"Estimated theta={theta:.4f} from {len(pairs)} responses")
    return theta


def standard_error(theta: float, responses: Iterable[Any], a: float = DISCRIMINATION) -> float:
    """SE(θ) = 1 / sqrt(Σ I_i(θ)); infinite when there is no information."""
    total = sum(fisher_info(theta, b, a) for _, b in (_as_pair(r) for r in responses))
    if total <= 0:
        return float("inf")
    return 1.0 / math.sqrt(total)
