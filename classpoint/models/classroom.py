from pydantic import BaseModel, ConfigDict

from .student import Student


class ClassroomSnapshot(BaseModel):
    """Everything the persistence layer stores for one class."""
    model_config = ConfigDict(frozen=True)

    class_name: str
    students: tuple[Student, ...] = ()
