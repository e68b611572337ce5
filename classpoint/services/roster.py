from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterable, Iterator, Optional

from classpoint.errors import InvalidName, NotFound
from classpoint.models import RewardItem, Student
from classpoint.services.ledger import PointChange, apply_point_change, redeem_reward

log = logging.getLogger(__name__)


def clean_name(name: Optional[str]) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise InvalidName(name)
    return cleaned


class Roster:
    """
    The students of one class, keyed by id, in insertion order.

    Changes to a single student are serialized per id so a read-then-write
    ledger update never races another update of the same student. Different
    students can be updated in parallel.
    """

    def __init__(self, students: Iterable[Student] = ()):
        self._students: dict[str, Student] = {s.id: s for s in students}
        self._lock = threading.RLock()
        self._student_locks: dict[str, threading.Lock] = {}

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator[Student]:
        return iter(self.list())

    def __contains__(self, student_id: object) -> bool:
        return student_id in self._students

    # --- Queries ---

    def find(self, student_id: str) -> Optional[Student]:
        return self._students.get(student_id)

    def get(self, student_id: str) -> Student:
        student = self.find(student_id)
        if student is None:
            raise NotFound(student_id)
        return student

    def list(self) -> list[Student]:
        with self._lock:
            return list(self._students.values())

    def ranked(self) -> list[Student]:
        return sorted(self.list(), key=lambda s: s.total_points, reverse=True)

    def search(self, term: str) -> list[Student]:
        term = (term or "").strip().lower()
        return [s for s in self.ranked() if term in s.name.lower()]

    # --- Structure ---

    def next_order_number(self) -> int:
        with self._lock:
            return max((s.order_number or 0 for s in self._students.values()), default=0) + 1

    def add(self, name: str, order_number: Optional[int] = None) -> Student:
        name = clean_name(name)
        with self._lock:
            if order_number is None:
                order_number = self.next_order_number()
            student = Student(name=name, order_number=order_number)
            self._students[student.id] = student
        log.debug("Added student %s (#%s)", student.name, student.order_number)
        return student

    def remove(self, student_id: str) -> None:
        """Remove a student. Raises NotFound when the id is unknown."""
        with self._lock:
            if student_id not in self._students:
                raise NotFound(student_id)
            del self._students[student_id]
            self._student_locks.pop(student_id, None)

    def clear(self) -> None:
        with self._lock:
            self._students.clear()
            self._student_locks.clear()

    # --- Per-student updates ---

    @contextmanager
    def _serialized(self, student_id: str):
        # Unknown ids never get a lock
        with self._lock:
            if student_id not in self._students:
                raise NotFound(student_id)
            lock = self._student_locks.setdefault(student_id, threading.Lock())
        with lock:
            yield

    def _store(self, student: Student) -> None:
        with self._lock:
            if student.id not in self._students:
                raise NotFound(student.id)
            self._students[student.id] = student

    def rename(self, student_id: str, new_name: str) -> Student:
        new_name = clean_name(new_name)
        with self._serialized(student_id):
            updated = self.get(student_id).model_copy(update={"name": new_name})
            self._store(updated)
        return updated

    def apply_points(self, student_id: str, delta: int, reason: Optional[str] = None) -> PointChange:
        with self._serialized(student_id):
            change = apply_point_change(self.get(student_id), delta, reason)
            self._store(change.student)
        return change

    def redeem(self, student_id: str, reward: RewardItem) -> Student:
        with self._serialized(student_id):
            updated = redeem_reward(self.get(student_id), reward)
            self._store(updated)
        return updated
