"""Aggregate application use cases."""

from .notifications import check_and_generate_notifications

__all__ = [
    "check_and_generate_notifications",
]
