"""
Reads a class list from a CSV or Excel sheet.

Columns are found by header keywords rather than exact names, so sheets
exported from different school systems (English or Vietnamese headers) work
without editing. The result lists the rows that can become students and the
rows that were rejected.
"""
from __future__ import annotations

import io
import logging
import numbers
import re
from dataclasses import dataclass, field
from typing import Any, Iterable, NamedTuple, Optional

import pandas as pd

from classpoint.errors import UnsupportedFile

log = logging.getLogger(__name__)

NAME_KEYWORDS = ("tên", "họ và tên", "họ tên", "name", "student", "học sinh")
ORDER_KEYWORDS = ("stt", "số thứ tự", "no", "order", "id")
GROUP_KEYWORDS = ("lớp", "class", "grade", "phòng")


class ImportRow(NamedTuple):
    name: str
    order_number: Optional[int] = None
    group: Optional[str] = None


class MalformedImportRow(NamedTuple):
    row: int  # 1-based data row
    reason: str


@dataclass
class ImportResult:
    total: int = 0
    rows: list[ImportRow] = field(default_factory=list)
    rejected: list[MalformedImportRow] = field(default_factory=list)

    @property
    def accepted(self) -> int:
        return len(self.rows)


def read_table(filename: Optional[str], content: bytes) -> pd.DataFrame:
    fname = (filename or "").lower()
    if fname.endswith(".csv"):
        return pd.read_csv(io.BytesIO(content))
    if fname.endswith((".xlsx", ".xls")):
        return pd.read_excel(io.BytesIO(content))
    raise UnsupportedFile(filename)


def find_column(columns: Iterable[Any], keywords: Iterable[str], exclude: Iterable[Any] = ()) -> Any:
    """First column whose header contains one of `keywords`, ignoring case."""
    keywords = tuple(keywords)
    skip = [c for c in exclude if c is not None]
    for column in columns:
        if column in skip:
            continue
        header = str(column).strip().lower()
        if any(k in header for k in keywords):
            return column
    return None


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    try:
        if pd.isna(value):
            return True
    except (TypeError, ValueError):
        pass
    return not str(value).strip()


def parse_order(value: Any) -> Optional[int]:
    if _is_blank(value):
        return None
    # pandas gives floats for numeric columns with gaps (3 -> 3.0)
    if isinstance(value, numbers.Real) and float(value).is_integer():
        return int(value) or None
    digits = re.sub(r"\D", "", str(value))
    if not digits:
        return None
    return int(digits) or None


def parse_rows(df: pd.DataFrame) -> ImportResult:
    columns = list(df.columns)
    name_col = find_column(columns, NAME_KEYWORDS)
    order_col = find_column(columns, ORDER_KEYWORDS, exclude=[name_col])
    group_col = find_column(columns, GROUP_KEYWORDS, exclude=[name_col, order_col])

    result = ImportResult(total=len(df))
    if name_col is None:
        log.warning("No name column among %s", columns)
        result.rejected = [MalformedImportRow(i, "no name column") for i in range(1, len(df) + 1)]
        return result

    for position, (_, row) in enumerate(df.iterrows(), start=1):
        raw_name = row[name_col]
        if _is_blank(raw_name):
            result.rejected.append(MalformedImportRow(position, "empty name"))
            continue
        group = row[group_col] if group_col is not None else None
        result.rows.append(ImportRow(
            name=str(raw_name).strip(),
            order_number=parse_order(row[order_col]) if order_col is not None else None,
            group=None if _is_blank(group) else str(group).strip(),
        ))

    log.info("Parsed %d of %d rows (name=%r, order=%r, group=%r)",
             result.accepted, result.total, name_col, order_col, group_col)
    return result
