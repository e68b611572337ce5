from __future__ import annotations

from typing import NamedTuple, Optional

from classpoint.models import LEVEL_ORDER, LEVELS, Level
from classpoint.models.level import classify

__all__ = ["Progress", "classify", "level_rank", "next_level", "progress"]


class Progress(NamedTuple):
    percent: float
    points_to_next: int


def level_rank(level: Level) -> int:
    return LEVEL_ORDER.index(level)


def next_level(level: Level) -> Optional[Level]:
    rank = level_rank(level)
    if rank + 1 < len(LEVEL_ORDER):
        return LEVEL_ORDER[rank + 1]
    return None


def progress(points: int, level: Level) -> Progress:
    """
    How far `points` has come through `level`'s range, and how many more
    points the next tier needs. The top tier is always reported as complete.
    """
    config = LEVELS[level]
    if config.max_points is None:
        return Progress(percent=100.0, points_to_next=0)

    span = config.max_points - config.min_points + 1
    percent = (points - config.min_points) / span * 100
    return Progress(
        percent=min(100.0, max(0.0, percent)),
        points_to_next=config.max_points + 1 - points,
    )
