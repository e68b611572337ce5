from typing import Optional
from pydantic import BaseModel

from classpoint.models import LEVELS, Level, LevelConfig, Student
from classpoint.services.levels import next_level, progress


class StudentCreate(BaseModel):
    name: str
    order_number: Optional[int] = None


class StudentRename(BaseModel):
    name: str


class ProgressOut(BaseModel):
    percent: float
    points_to_next: int
    next_level: Optional[Level] = None


class StudentOut(Student):
    level_info: LevelConfig
    progress: ProgressOut

    @classmethod
    def from_student(cls, student: Student) -> "StudentOut":
        p = progress(student.total_points, student.level)
        return cls(
            **dict(student),
            level_info=LEVELS[student.level],
            progress=ProgressOut(
                percent=p.percent,
                points_to_next=p.points_to_next,
                next_level=next_level(student.level),
            ),
        )
