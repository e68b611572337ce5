from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class RewardItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    cost: int = Field(gt=0)
    icon: str = ""
    description: str = ""


DEFAULT_REWARDS: tuple[RewardItem, ...] = (
    RewardItem(id="r1", icon="📝", name="Skip one homework", description="Skip one homework assignment of your choice", cost=30),
    RewardItem(id="r2", icon="🪑", name="Choose your seat", description="Pick your own seat for one week", cost=50),
    RewardItem(id="r3", icon="✏️", name="+5 quiz points", description="Add points to a 15-minute quiz", cost=80),
    RewardItem(id="r4", icon="👨‍🏫", name="Junior teaching assistant", description="Sit at the teacher's desk and help the class for one lesson", cost=100),
    RewardItem(id="r5", icon="📚", name="Book voucher", description="A voucher for the school bookshop", cost=150),
    RewardItem(id="r6", icon="🏆", name="Special prize", description="A secret gift from the teacher", cost=200),
)


def find_reward(reward_id: str, catalog=DEFAULT_REWARDS) -> Optional[RewardItem]:
    return next((r for r in catalog if r.id == reward_id), None)
