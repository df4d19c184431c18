from fastapi import FastAPI

from .campus_users import router as campus_users_router
from .notifications import router as notifications_router
from .records import assignments_router, attendance_router, fees_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(campus_users_router)
    app.include_router(assignments_router)
    app.include_router(fees_router)
    app.include_router(attendance_router)
    app.include_router(notifications_router)
