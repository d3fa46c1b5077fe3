"""Infrastructure layer exports."""

from .repository import HRRepository, InMemoryHRRepository

__all__ = [
    "HRRepository",
    "InMemoryHRRepository",
]
