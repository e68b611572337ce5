# Re-export models so external code can keep using: from classpoint.models import Student, Level, ...
from .level import Level, LevelConfig, LEVELS, LEVEL_ORDER, classify
from .student import Student, PointHistoryEntry, RedemptionEntry, new_id, utcnow
from .reward import RewardItem, DEFAULT_REWARDS, find_reward
from .classroom import ClassroomSnapshot

__all__ = [
    # levels
    "Level", "LevelConfig", "LEVELS", "LEVEL_ORDER", "classify",
    # students & ledger records
    "Student", "PointHistoryEntry", "RedemptionEntry",
    # rewards
    "RewardItem", "DEFAULT_REWARDS",
    # persistence
    "ClassroomSnapshot",
    # helpers
    "find_reward", "new_id", "utcnow",
]
