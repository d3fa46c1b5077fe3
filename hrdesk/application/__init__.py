"""Application services."""

from .hr import HRService

__all__ = [
    "HRService",
]
