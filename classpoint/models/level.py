from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict


class Level(str, Enum):
    SEED = "seed"
    SPROUT = "sprout"
    SAPLING = "sapling"
    TREE = "tree"


class LevelConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Level
    name: str
    icon: str
    min_points: int
    max_points: Optional[int] = None  # None for the top tier


# Lowest to highest
LEVEL_ORDER = (Level.SEED, Level.SPROUT, Level.SAPLING, Level.TREE)

LEVELS: dict[Level, LevelConfig] = {
    Level.SEED: LevelConfig(id=Level.SEED, name="Seed", icon="🌰", min_points=0, max_points=49),
    Level.SPROUT: LevelConfig(id=Level.SPROUT, name="Sprout", icon="🌱", min_points=50, max_points=99),
    Level.SAPLING: LevelConfig(id=Level.SAPLING, name="Sapling", icon="🌿", min_points=100, max_points=199),
    Level.TREE: LevelConfig(id=Level.TREE, name="Tree", icon="🌳", min_points=200),
}


def classify(points: int) -> Level:
    """Map a point total to its tier. Anything below zero is still a seed."""
    for level in reversed(LEVEL_ORDER):
        if points >= LEVELS[level].min_points:
            return level
    return Level.SEED
