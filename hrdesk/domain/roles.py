"""Job role value object."""
from __future__ import annotations

from decimal import Decimal
from typing import Iterable


class Role:
    """A job position with a salary band and a list of responsibilities."""

    __slots__ = (
        "id",
        "title",
        "description",
        "department",
        "level",
        "min_salary",
        "max_salary",
        "_responsibilities",
    )

    def __init__(
        self,
        id: int,
        title: str,
        description: str,
        department: str,
        level: int,
        min_salary: Decimal | int | float | str,
        max_salary: Decimal | int | float | str,
        responsibilities: Iterable[str] = (),
    ) -> None:
        self.id = id
        self.title = title
        self.description = description
        self.department = department
        self.level = int(level)
        self.min_salary = Decimal(str(min_salary))
        self.max_salary = Decimal(str(max_salary))
        self._responsibilities: list[str] = []
        for responsibility in responsibilities:
            self.add_responsibility(responsibility)

        if self.level < 1:
            raise ValueError("level must be a positive integer")
        if self.min_salary < 0 or self.max_salary < 0:
            raise ValueError("salary bounds cannot be negative")
        if self.min_salary > self.max_salary:
            raise ValueError("min_salary cannot exceed max_salary")

    def __repr__(self) -> str:
        return (
            f"Role(id={self.id!r}, title={self.title!r}, department={self.department!r}, "
            f"level={self.level!r}, salary_range=({self.min_salary}, {self.max_salary}))"
        )

    @property
    def responsibilities(self) -> list[str]:
        return list(self._responsibilities)

    @property
    def salary_range(self) -> tuple[Decimal, Decimal]:
        return self.min_salary, self.max_salary

    def is_salary_in_range(self, candidate: Decimal | int | float | str) -> bool:
        value = Decimal(str(candidate))
        return self.min_salary <= value <= self.max_salary

    def add_responsibility(self, responsibility: str) -> None:
        if responsibility not in self._responsibilities:
            self._responsibilities.append(responsibility)

    def remove_responsibility(self, responsibility: str) -> None:
        # list.remove drops the first match only
        if responsibility in self._responsibilities:
            self._responsibilities.remove(responsibility)
