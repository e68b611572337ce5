import logging
from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, HTTPException, Response, UploadFile

from classpoint.dependencies import get_classroom
from classpoint.errors import InvalidName, UnsupportedFile
from classpoint.schemas.classroom import ClassroomOut, ClassroomRename, ImportSummary, RejectedRow
from classpoint.schemas.student import StudentOut
from classpoint.services.classroom import Classroom
from classpoint.services.exporter import export_filename, export_workbook
from classpoint.services.importer import parse_rows, read_table

log = logging.getLogger(__name__)

router = APIRouter()

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _summary(classroom: Classroom) -> ClassroomOut:
    return ClassroomOut(class_name=classroom.class_name, student_count=len(classroom.roster))


@router.get("/", response_model=ClassroomOut)
def classroom_detail(classroom: Classroom = Depends(get_classroom)):
    return _summary(classroom)


@router.put("/", response_model=ClassroomOut)
def rename_classroom(payload: ClassroomRename, classroom: Classroom = Depends(get_classroom)):
    try:
        classroom.rename_class(payload.class_name)
    except InvalidName as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _summary(classroom)


@router.delete("/", response_model=ClassroomOut)
def reset_classroom(name: Optional[str] = None, classroom: Classroom = Depends(get_classroom)):
    classroom.reset(name)
    return _summary(classroom)


@router.post("/import", response_model=ImportSummary)
async def import_students(file: UploadFile = File(...), classroom: Classroom = Depends(get_classroom)):
    """
    Adds one student per usable row of an uploaded CSV/XLSX class list.
    Rows without a name are reported back, not fatal.
    """
    contents = await file.read()
    try:
        df = read_table(file.filename, contents)
    except UnsupportedFile as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        log.exception("Could not read upload %s", file.filename)
        raise HTTPException(status_code=400, detail=f"Could not read file: {e}")

    result = parse_rows(df)
    added = classroom.import_rows(result)
    return ImportSummary(
        total=result.total,
        accepted=result.accepted,
        rejected=[RejectedRow(row=r.row, reason=r.reason) for r in result.rejected],
        students=[StudentOut.from_student(s) for s in added],
    )


@router.get("/export")
def export_students(classroom: Classroom = Depends(get_classroom)):
    content = export_workbook(classroom.roster.list())
    filename = export_filename(classroom.class_name)
    return Response(
        content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(filename)}"},
    )
