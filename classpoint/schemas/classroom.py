from pydantic import BaseModel

from .student import StudentOut


class ClassroomOut(BaseModel):
    class_name: str
    student_count: int


class ClassroomRename(BaseModel):
    class_name: str


class RejectedRow(BaseModel):
    row: int
    reason: str


class ImportSummary(BaseModel):
    total: int
    accepted: int
    rejected: list[RejectedRow]
    students: list[StudentOut]
