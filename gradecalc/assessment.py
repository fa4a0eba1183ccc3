"""A single graded piece of work within a course."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string, got {type(value).__name__}")
    return value


def _number(data: Mapping[str, Any], key: str) -> float:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key!r} must be a number, got {type(value).__name__}")
    return float(value)


def _flag(data: Mapping[str, Any], key: str) -> bool:
    value = data[key]
    if not isinstance(value, bool):
        raise TypeError(f"{key!r} must be a boolean, got {type(value).__name__}")
    return value


@dataclass
class Assessment:
    """An assessment with a weight (percent of the course) and a grade (percent)."""

    name: str
    weight: float
    grade: float = 0.0
    is_theory: bool = True
    is_complete: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return the stored JSON representation."""
        return {
            "name": self.name,
            "weight": self.weight,
            "grade": self.grade,
            "isTheory": self.is_theory,
            "isComplete": self.is_complete,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Assessment:
        """Build an assessment from its stored JSON representation.

        Raises KeyError for a missing field and TypeError for a field of the
        wrong type.
        """
        return cls(
            name=_text(data, "name"),
            weight=_number(data, "weight"),
            grade=_number(data, "grade"),
            is_theory=_flag(data, "isTheory"),
            is_complete=_flag(data, "isComplete"),
        )