import uuid
from datetime import datetime, timezone
from typing import Any, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from .level import Level, classify


def new_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# Stored records also load from the browser app's camelCase JSON
# (orderNumber, totalPoints, change, pointsAfter, date, ...).

class PointHistoryEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    timestamp: datetime = Field(default_factory=utcnow, validation_alias=AliasChoices("timestamp", "date"))
    delta: int = Field(validation_alias=AliasChoices("delta", "change"))  # can be negative, never zero
    reason: str
    balance_after: int = Field(validation_alias=AliasChoices("balance_after", "pointsAfter"))


class RedemptionEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    timestamp: datetime = Field(default_factory=utcnow, validation_alias=AliasChoices("timestamp", "date"))
    reward_name: str = Field(validation_alias=AliasChoices("reward_name", "rewardName"))
    points_spent: int = Field(validation_alias=AliasChoices("points_spent", "pointsSpent"))


class Student(BaseModel):
    """
    A student's identity and point state. Values are frozen; the ledger
    produces a new Student for every change.

    `level` always follows `total_points`: whatever level is passed in or
    stored is replaced by the tier the points belong to.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    name: str
    order_number: Optional[int] = Field(default=None, validation_alias=AliasChoices("order_number", "orderNumber"))
    avatar: Optional[str] = None
    total_points: int = Field(default=0, validation_alias=AliasChoices("total_points", "totalPoints"))
    level: Level = Level.SEED
    point_history: tuple[PointHistoryEntry, ...] = Field(
        default=(), validation_alias=AliasChoices("point_history", "pointHistory")
    )
    rewards_redeemed: tuple[RedemptionEntry, ...] = Field(
        default=(), validation_alias=AliasChoices("rewards_redeemed", "rewardsRedeemed")
    )

    @model_validator(mode="before")
    @classmethod
    def _derive_level(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        points = data.get("total_points", data.get("totalPoints", 0))
        try:
            points = int(points)
        except (TypeError, ValueError):
            # leave the bad value for field validation to report
            return data
        return {**data, "level": classify(points)}
