# tests/test_irt_engine.py

import math
import pytest

from adaptive_core.irt_engine import (
    prob_correct,
    fisher_info,
    estimate_ability,
    sigmoid_stable,
    standard_error,
)
from adaptive_core.schema import DifficultyLevel, Response


def test_prob_correct_range():
    for theta in [-4, -2, 0, 2, 4]:
        p = prob_correct(theta, 0.0)
        assert 0.0 < p < 1.0, f"P(θ) outside (0,1): θ={theta}, p={p}"


def test_prob_correct_half_at_matching_difficulty():
    assert prob_correct(1.0, 1.0) == pytest.approx(0.5)


def test_sigmoid_stable_extremes():
    assert sigmoid_stable(1000.0) == 1.0
    assert sigmoid_stable(-1000.0) == 0.0


def test_fisher_info_peaks_at_difficulty():
    assert fisher_info(0.0, 0.0) == pytest.approx(0.25)
    assert fisher_info(0.0, 0.0) > fisher_info(0.0, 1.0) > fisher_info(0.0, 3.0)


def test_estimate_ability_empty_is_zero():
    assert estimate_ability([]) == 0.0


def test_estimate_ability_correct_beats_incorrect():
    right = estimate_ability([(True, 0.0)] * 5)
    wrong = estimate_ability([(False, 0.0)] * 5)

    assert right > 0.0 > wrong
    assert right > wrong


def test_estimate_ability_first_step_matches_formula():
    # One pass from θ=0 with p=0.5 everywhere: Σ(1-p) / Σp(1-p) = 0.5n / 0.25n
    theta = estimate_ability([(True, 0.0)] * 4, iterations=1)
    assert theta == pytest.approx(2.0)


def test_estimate_ability_balanced_stays_at_difficulty():
    responses = [(True, 1.0), (False, 1.0)] * 3
    assert estimate_ability(responses) == pytest.approx(1.0, abs=1e-6)


def test_estimate_ability_zero_denominator_skips_update():
    # p rounds to exactly 1.0 so p·(1-p) == 0 on every pass
    assert estimate_ability([(True, -1000.0)]) == 0.0
    assert estimate_ability([(False, -1000.0)]) == 0.0


def test_estimate_ability_accepts_response_objects_and_mappings():
    objs = [
        Response(item_id="a", difficulty_level=DifficultyLevel.HIGHER, correct=True),
        Response(item_id="b", difficulty_level=DifficultyLevel.FOUNDATION, correct=False),
    ]
    dicts = [{"correct": True, "difficulty": 1.0}, {"correct": False, "difficulty": -1.0}]

    assert estimate_ability(objs) == pytest.approx(estimate_ability(dicts))


def test_estimate_ability_is_pure():
    responses = [(True, 0.0), (False, 2.0), (True, -1.0)]
    snapshot = list(responses)

    first = estimate_ability(responses)
    second = estimate_ability(responses)

    assert first == second
    assert responses == snapshot


def test_standard_error_shrinks_with_more_items():
    se_few = standard_error(0.0, [(True, 0.0)] * 2)
    se_many = standard_error(0.0, [(True, 0.0)] * 8)

    assert math.isfinite(se_few)
    assert se_many < se_few
    assert standard_error(0.0, []) == float("inf")
