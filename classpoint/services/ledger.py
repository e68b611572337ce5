from __future__ import annotations

import logging
from typing import Iterable, NamedTuple, Optional

from classpoint.errors import InsufficientBalance, InvalidDelta
from classpoint.models import (
    PointHistoryEntry,
    RedemptionEntry,
    RewardItem,
    Student,
    utcnow,
)
from classpoint.services.levels import classify, level_rank

log = logging.getLogger(__name__)

QUICK_AWARD_REASON = "quick award"
QUICK_DEDUCTION_REASON = "quick deduction"


class PointChange(NamedTuple):
    student: Student
    entry: PointHistoryEntry
    leveled_up: bool


def apply_point_change(student: Student, delta: int, reason: Optional[str] = None) -> PointChange:
    """
    Add `delta` points (negative to deduct) and append a history entry.
    Returns (student, entry, leveled_up); the input student is left as is.
    leveled_up is only set for awards that move the student into a higher
    tier. Deductions that drop a tier are silent.
    """
    if delta == 0:
        raise InvalidDelta(delta)

    reason = (reason or "").strip()
    if not reason:
        reason = QUICK_AWARD_REASON if delta > 0 else QUICK_DEDUCTION_REASON

    new_total = student.total_points + delta
    new_level = classify(new_total)
    entry = PointHistoryEntry(delta=delta, reason=reason, balance_after=new_total)

    updated = student.model_copy(update={
        "total_points": new_total,
        "level": new_level,
        "point_history": student.point_history + (entry,),
    })

    leveled_up = delta > 0 and level_rank(new_level) > level_rank(student.level)
    if leveled_up:
        log.info("%s levelled up: %s -> %s", student.name, student.level.value, new_level.value)
    return PointChange(updated, entry, leveled_up)


def redeem_reward(student: Student, reward: RewardItem) -> Student:
    if student.total_points < reward.cost:
        raise InsufficientBalance(student, reward)

    now = utcnow()
    new_total = student.total_points - reward.cost
    entry = PointHistoryEntry(
        timestamp=now,
        delta=-reward.cost,
        reason=f"Redeemed: {reward.name}",
        balance_after=new_total,
    )
    redemption = RedemptionEntry(timestamp=now, reward_name=reward.name, points_spent=reward.cost)

    log.info("%s redeemed %s for %d points", student.name, reward.name, reward.cost)
    return student.model_copy(update={
        "total_points": new_total,
        "level": classify(new_total),
        "point_history": student.point_history + (entry,),
        "rewards_redeemed": student.rewards_redeemed + (redemption,),
    })


# Helpers: totals used by the export summary

def sum_positive(history: Iterable[PointHistoryEntry]) -> int:
    return sum(h.delta for h in history if h.delta > 0)


def sum_negative_magnitude(history: Iterable[PointHistoryEntry]) -> int:
    return sum(-h.delta for h in history if h.delta < 0)
