"""Utility helpers for reusable functionality."""

from .clock import as_campus_time, campus_now, campus_timezone, from_storage, to_storage

__all__ = [
    "as_campus_time",
    "campus_now",
    "campus_timezone",
    "from_storage",
    "to_storage",
]
