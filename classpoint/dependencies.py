from fastapi import Request

from classpoint.services.classroom import Classroom


def get_classroom(request: Request) -> Classroom:
    """Dependency to provide the class loaded at startup."""
    return request.app.state.classroom
