"""Exceptions raised by the quests adventures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class QuestError(Exception):
    """Base class for all quests errors."""


@dataclass(frozen=True)
class Violation:
    """A single problem found in an input record."""

    index: Optional[int]
    field: str
    message: str

    def __str__(self) -> str:
        where = f"body #{self.index + 1}" if self.index is not None else "input"
        return f"{where}: {self.field}: {self.message}"


class ValidationError(QuestError, ValueError):
    """Input records failed validation.

    Carries every violation found, not just the first one.
    """

    def __init__(self, violations: list[Violation]) -> None:
        self.violations = list(violations)
        super().__init__("; ".join(str(v) for v in self.violations))

    @property
    def fields(self) -> set[str]:
        return {v.field for v in self.violations}


class InvalidInputError(QuestError, TypeError):
    """The classifier was handed something other than a list of bodies."""


class ClockFormatError(QuestError, ValueError):
    """A clock reading is not a valid HH:MM time."""
