import pytest

from classpoint.models import Level
from classpoint.services.levels import classify, level_rank, next_level, progress


@pytest.mark.parametrize("points", [-1, -50, -1000])
def test_negative_points_are_seed(points):
    assert classify(points) == Level.SEED


@pytest.mark.parametrize(
    "points, expected",
    [
        (0, Level.SEED),
        (49, Level.SEED),
        (50, Level.SPROUT),
        (99, Level.SPROUT),
        (100, Level.SAPLING),
        (199, Level.SAPLING),
        (200, Level.TREE),
        (10_000, Level.TREE),
    ],
)
def test_classify_boundaries(points, expected):
    assert classify(points) == expected


def test_next_level():
    assert next_level(Level.SEED) == Level.SPROUT
    assert next_level(Level.SPROUT) == Level.SAPLING
    assert next_level(Level.SAPLING) == Level.TREE
    assert next_level(Level.TREE) is None


def test_level_rank_is_ordered():
    ranks = [level_rank(level) for level in (Level.SEED, Level.SPROUT, Level.SAPLING, Level.TREE)]
    assert ranks == sorted(ranks)
    assert len(set(ranks)) == 4


@pytest.mark.parametrize("points", [200, 250, 5000])
def test_top_tier_progress_is_complete(points):
    p = progress(points, Level.TREE)
    assert p.percent == 100
    assert p.points_to_next == 0


def test_progress_within_tier():
    p = progress(75, Level.SPROUT)
    assert p.percent == 50.0
    assert p.points_to_next == 25

    p = progress(0, Level.SEED)
    assert p.percent == 0.0
    assert p.points_to_next == 50

    p = progress(150, Level.SAPLING)
    assert p.percent == 50.0
    assert p.points_to_next == 50


def test_progress_below_tier_minimum_clamps_to_zero():
    p = progress(45, Level.SPROUT)
    assert p.percent == 0.0
    assert p.points_to_next == 55


def test_progress_above_tier_clamps_to_hundred():
    assert progress(120, Level.SPROUT).percent == 100.0
