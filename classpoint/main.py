from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, FastAPI

from classpoint.config import settings
from classpoint.dependencies import get_classroom
from classpoint.routers import catalog, classroom, points, students
from classpoint.services.classroom import Classroom
from classpoint.services.storage import JsonStorage


def create_app(storage: Optional[JsonStorage] = None) -> FastAPI:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = FastAPI(title=settings.APP_NAME)
    if storage is None:
        storage = JsonStorage(settings.DATA_FILE, settings.DEFAULT_CLASS_NAME)
    app.state.classroom = Classroom.load(storage)

    app.include_router(students.router, prefix="/students", tags=["students"])
    app.include_router(points.router, prefix="/students", tags=["points"])
    app.include_router(classroom.router, prefix="/classroom", tags=["classroom"])
    app.include_router(catalog.router, tags=["catalog"])

    @app.get("/")
    def root(current: Classroom = Depends(get_classroom)):
        return {"app": settings.APP_NAME, "class_name": current.class_name, "students": len(current.roster)}

    return app


app = create_app()
