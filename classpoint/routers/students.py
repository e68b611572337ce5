from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status

from classpoint.dependencies import get_classroom
from classpoint.errors import InvalidName, NotFound
from classpoint.schemas.student import StudentCreate, StudentOut, StudentRename
from classpoint.services.classroom import Classroom

router = APIRouter()


@router.get("/", response_model=list[StudentOut])
def list_students(search: Optional[str] = None, classroom: Classroom = Depends(get_classroom)):
    students = classroom.roster.search(search) if search else classroom.roster.ranked()
    return [StudentOut.from_student(s) for s in students]


@router.post("/", response_model=StudentOut, status_code=status.HTTP_201_CREATED)
def create_student(payload: StudentCreate, classroom: Classroom = Depends(get_classroom)):
    try:
        student = classroom.add_student(payload.name, payload.order_number)
    except InvalidName as e:
        raise HTTPException(status_code=422, detail=str(e))
    return StudentOut.from_student(student)


@router.get("/{student_id}", response_model=StudentOut)
def student_detail(student_id: str, classroom: Classroom = Depends(get_classroom)):
    student = classroom.roster.find(student_id)
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")
    return StudentOut.from_student(student)


@router.patch("/{student_id}", response_model=StudentOut)
def rename_student(student_id: str, payload: StudentRename, classroom: Classroom = Depends(get_classroom)):
    try:
        student = classroom.rename_student(student_id, payload.name)
    except NotFound:
        raise HTTPException(status_code=404, detail="Student not found")
    except InvalidName as e:
        raise HTTPException(status_code=422, detail=str(e))
    return StudentOut.from_student(student)


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student(student_id: str, classroom: Classroom = Depends(get_classroom)):
    try:
        classroom.remove_student(student_id)
    except NotFound:
        raise HTTPException(status_code=404, detail="Student not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
