from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from classpoint.models import RewardItem, Student


class LedgerError(Exception):
    """Base class for every failure raised by the classroom ledger."""


class NotFound(LedgerError, LookupError):
    def __init__(self, student_id: str):
        super().__init__(f"Student {student_id!r} not found")
        self.student_id = student_id


class InvalidName(LedgerError, ValueError):
    def __init__(self, name: str | None = None):
        super().__init__("Name must not be empty")
        self.name = name


class InvalidDelta(LedgerError, ValueError):
    def __init__(self, delta: int):
        super().__init__("Point change must be non-zero")
        self.delta = delta


class InsufficientBalance(LedgerError):
    """
    Raised when a student cannot afford a reward.
    `student` is the untouched value the redemption was attempted on.
    """

    def __init__(self, student: Student, reward: RewardItem):
        super().__init__(
            f"{student.name} has {student.total_points} points but {reward.name} costs {reward.cost}"
        )
        self.student = student
        self.reward = reward

    @property
    def shortfall(self) -> int:
        return self.reward.cost - self.student.total_points


class UnsupportedFile(LedgerError, ValueError):
    def __init__(self, filename: str | None):
        super().__init__(f"Unsupported file type: {filename!r}. Please upload .csv or .xlsx")
        self.filename = filename
