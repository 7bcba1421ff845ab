# tests/test_adaptive_selector.py

import random

import pytest

from adaptive_core.adaptive_selector import ExhaustedPoolError, rank_by_information, select_item
from adaptive_core.schema import DifficultyLevel, Item


def test_rank_by_information_orders_pool(mixed_pool):
    ranked = rank_by_information(mixed_pool, 0.0)

    assert ranked[0][1].id == "mid"
    assert [item.id for _, item in ranked[-2:]] == ["floor", "ceiling"]
    infos = [info for info, _ in ranked]
    assert infos == sorted(infos, reverse=True)


def test_selection_confined_to_top_three(mixed_pool):
    rng = random.Random(42)
    chosen = {select_item(mixed_pool, 0.0, rng=rng).id for _ in range(100)}

    assert chosen == {"mid", "easy", "hard"}


def test_selection_follows_theta():
    pool = [Item(id=level.value, difficulty_level=level) for level in DifficultyLevel]
    rng = random.Random(3)

    picks = {select_item(pool, 3.0, rng=rng).id for _ in range(50)}
    assert picks <= {"higher", "advanced", "challenge"}


def test_small_pool_uses_whole_pool():
    pool = [
        Item(id="a", difficulty_level=DifficultyLevel.BEGINNER),
        Item(id="b", difficulty_level=DifficultyLevel.CHALLENGE),
    ]
    rng = random.Random(0)
    assert {select_item(pool, 0.0, rng=rng).id for _ in range(50)} == {"a", "b"}


def test_top_k_one_is_deterministic(mixed_pool):
    for seed in range(10):
        assert select_item(mixed_pool, 0.0, rng=random.Random(seed), top_k=1).id == "mid"


def test_seeded_rng_is_reproducible(mixed_pool):
    first = [select_item(mixed_pool, 0.0, rng=random.Random(7)).id for _ in range(5)]
    second = [select_item(mixed_pool, 0.0, rng=random.Random(7)).id for _ in range(5)]
    assert first == second


@pytest.mark.parametrize("theta", [-3.0, 0.0, 5.0])
def test_empty_pool_raises(theta):
    with pytest.raises(ExhaustedPoolError) as exc:
        select_item([], theta)
    assert exc.value.theta == theta
    assert isinstance(exc.value, LookupError)
