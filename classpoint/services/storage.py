from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from classpoint.config import settings
from classpoint.models import ClassroomSnapshot

log = logging.getLogger(__name__)


class JsonStorage:
    """
    Keeps a class snapshot in a single JSON file.

    A missing, unreadable or corrupt file loads as an empty class so the app
    can always start. A bare list of students (the browser app's camelCase
    format) is accepted too and gets the default class name.
    """

    def __init__(self, path: str | os.PathLike, default_class_name: str = settings.DEFAULT_CLASS_NAME):
        self.path = Path(path)
        self.default_class_name = default_class_name

    def empty(self) -> ClassroomSnapshot:
        return ClassroomSnapshot(class_name=self.default_class_name)

    def load(self) -> ClassroomSnapshot:
        if not self.path.exists():
            return self.empty()
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            if isinstance(raw, list):
                raw = {"students": raw}
            if isinstance(raw, dict):
                raw.setdefault("class_name", self.default_class_name)
            return ClassroomSnapshot.model_validate(raw)
        except (OSError, ValueError) as e:
            log.warning("Could not read %s, starting with an empty class: %s", self.path, e)
            return self.empty()

    def save(self, snapshot: ClassroomSnapshot) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            tmp.write_text(snapshot.model_dump_json(indent=2), encoding="utf-8")
            os.replace(tmp, self.path)
        except Exception:
            tmp.unlink(missing_ok=True)
            raise
