# adaptive_core/adaptive_selector.py

from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence, Tuple

from .schema import DISCRIMINATION, Item
from .irt_engine import fisher_info

logger = logging.getLogger(__name__)

# Size of the high-information slice the pick is drawn from
TOP_K = 3


class ExhaustedPoolError(LookupError):
    """Raised when there is no candidate left to choose from."""

    def __init__(self, message: str, theta: Optional[float] = None):
        super().__init__(message)
        self.theta = theta


def rank_by_information(
    candidates: Sequence[Item],
    theta: float,
    a: float = DISCRIMINATION,
) -> List[Tuple[float, Item]]:
    """(info, item) pairs, most informative first. Ties keep pool order."""
    ranked = [(fisher_info(theta, item.b, a), item) for item in candidates]
    ranked.sort(key=lambda pair: pair[0], reverse=True)
    return ranked


def select_item(
    candidates: Sequence[Item],
    theta: float,
    *,
    rng: Optional[random.Random] = None,
    top_k: int = TOP_K,
    a: float = DISCRIMINATION,
) -> Item:
    """
    Pick the next item by Fisher information at θ.

    The pool is ranked by information and one item is drawn uniformly from
    the top min(top_k, len(pool)) so the same best item is not served every
    time.

    Args:
        candidates: pool already scoped by the question bank.
        theta: current ability estimate.
        rng: random source; pass a seeded random.Random for reproducibility.
        top_k: size of the slice the pick is drawn from.
        a: discrimination shared by all items.

    Raises:
        ExhaustedPoolError: if the pool is empty.
    """
    if not candidates:
        raise ExhaustedPoolError(f"No candidate items to select from (theta={theta:.3f})", theta=theta)

    ranked = rank_by_information(candidates, theta, a)
    top = ranked[: min(max(top_k, 1), len(ranked))]

    chooser = rng or random
    info, chosen = chooser.choice(top)

    logger.debug(
        f"Selected item {chosen.id} ({chosen.difficulty_level.value}) info={info:.4f} "
        f"from top {len(top)} of {len(ranked)}"
    )
    return chosen
