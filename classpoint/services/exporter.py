from __future__ import annotations

import io
import re
from datetime import date
from typing import Iterable, Optional

import pandas as pd

from classpoint.models import LEVELS, Student
from classpoint.services.ledger import sum_negative_magnitude, sum_positive

SHEET_NAME = "Class Roster"
EXPORT_COLUMNS = [
    "No.",
    "Student name",
    "Level",
    "Current points",
    "Points awarded",
    "Points deducted",
    "Rewards redeemed",
]


def summary_row(student: Student, position: int) -> dict:
    return {
        "No.": student.order_number or position,
        "Student name": student.name,
        "Level": LEVELS[student.level].name,
        "Current points": student.total_points,
        "Points awarded": sum_positive(student.point_history),
        "Points deducted": sum_negative_magnitude(student.point_history),
        "Rewards redeemed": len(student.rewards_redeemed),
    }


def summary_rows(students: Iterable[Student]) -> list[dict]:
    return [summary_row(s, i) for i, s in enumerate(students, start=1)]


def export_workbook(students: Iterable[Student]) -> bytes:
    df = pd.DataFrame(summary_rows(students), columns=EXPORT_COLUMNS)
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=SHEET_NAME, index=False)
    return buffer.getvalue()


def export_filename(class_name: str, day: Optional[date] = None) -> str:
    day = day or date.today()
    slug = re.sub(r"\s+", "_", class_name.strip()) or "Class"
    return f"Roster_{slug}_{day.isoformat()}.xlsx"
