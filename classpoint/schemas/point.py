from typing import Optional
from pydantic import BaseModel

from classpoint.models import PointHistoryEntry
from .student import StudentOut


class PointAdjustment(BaseModel):
    delta: int
    reason: Optional[str] = None


class PointChangeOut(BaseModel):
    student: StudentOut
    entry: PointHistoryEntry
    leveled_up: bool


class RedeemRequest(BaseModel):
    reward_id: str
