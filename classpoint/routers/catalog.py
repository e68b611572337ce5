from fastapi import APIRouter

from classpoint.models import DEFAULT_REWARDS, LEVEL_ORDER, LEVELS, LevelConfig, RewardItem

router = APIRouter()


@router.get("/levels", response_model=list[LevelConfig])
def list_levels():
    return [LEVELS[level] for level in LEVEL_ORDER]


@router.get("/rewards", response_model=list[RewardItem])
def list_rewards():
    return list(DEFAULT_REWARDS)
