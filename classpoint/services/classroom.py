from __future__ import annotations

import logging
import threading
from typing import Optional

from classpoint.config import settings
from classpoint.models import ClassroomSnapshot, RewardItem, Student
from classpoint.services.importer import ImportResult
from classpoint.services.ledger import PointChange
from classpoint.services.roster import Roster, clean_name
from classpoint.services.storage import JsonStorage

log = logging.getLogger(__name__)


class Classroom:
    """
    One class: its display name, its roster and where it is saved.
    Every change is followed by saving the full snapshot.
    """

    def __init__(self, class_name: str, roster: Optional[Roster] = None, storage: Optional[JsonStorage] = None):
        self.class_name = class_name
        self.roster = roster if roster is not None else Roster()
        self.storage = storage
        self._save_lock = threading.Lock()

    @classmethod
    def load(cls, storage: JsonStorage) -> "Classroom":
        snapshot = storage.load()
        log.info("Loaded class %r with %d students", snapshot.class_name, len(snapshot.students))
        return cls(snapshot.class_name, Roster(snapshot.students), storage)

    def snapshot(self) -> ClassroomSnapshot:
        return ClassroomSnapshot(class_name=self.class_name, students=tuple(self.roster.list()))

    def save(self) -> None:
        if self.storage is None:
            return
        with self._save_lock:
            self.storage.save(self.snapshot())

    # --- Roster ---

    def add_student(self, name: str, order_number: Optional[int] = None) -> Student:
        student = self.roster.add(name, order_number)
        self.save()
        return student

    def rename_student(self, student_id: str, new_name: str) -> Student:
        student = self.roster.rename(student_id, new_name)
        self.save()
        return student

    def remove_student(self, student_id: str) -> None:
        self.roster.remove(student_id)
        self.save()

    def import_rows(self, result: ImportResult) -> list[Student]:
        added = [self.roster.add(row.name, row.order_number) for row in result.rows]
        log.info("Imported %d of %d rows into %r", len(added), result.total, self.class_name)
        self.save()
        return added

    # --- Ledger ---

    def apply_points(self, student_id: str, delta: int, reason: Optional[str] = None) -> PointChange:
        change = self.roster.apply_points(student_id, delta, reason)
        self.save()
        return change

    def redeem(self, student_id: str, reward: RewardItem) -> Student:
        student = self.roster.redeem(student_id, reward)
        self.save()
        return student

    # --- Class ---

    def rename_class(self, name: str) -> None:
        self.class_name = clean_name(name)
        self.save()

    def reset(self, new_name: Optional[str] = None) -> None:
        """Drop every student and start over under a new class name."""
        self.roster.clear()
        self.class_name = (new_name or "").strip() or settings.NEW_CLASS_NAME
        log.info("Class reset as %r", self.class_name)
        self.save()
