"""A course made of weighted assessments, and the grade calculations on it."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Mapping

from gradecalc.assessment import Assessment

FULL_WEIGHT = 100.0
_THRESHOLD = 0.1
_INTERVAL = 0.5
_STARTING_GRADE = 50.0
_MAX_ITERATIONS = 1000
_UPDATABLE = frozenset({"name", "weight", "grade", "is_theory", "is_complete"})


def _round2(value: float) -> float:
    """Round to two decimals, halves away from zero."""
    scaled = value * 100
    rounded = math.floor(abs(scaled) + 0.5)
    if rounded == 0:
        return 0.0
    return math.copysign(rounded, scaled) / 100


def _weighted(assessments: Iterable[Assessment]) -> tuple[float, float]:
    weighted_sum = 0.0
    total_weight = 0.0
    for assessment in assessments:
        weighted_sum += assessment.grade * assessment.weight
        total_weight += assessment.weight
    return weighted_sum, total_weight


def _projected(assessments: Iterable[Assessment]) -> float:
    weighted_sum, total_weight = _weighted(assessments)
    if total_weight == 0.0:
        return 0.0
    return _round2(weighted_sum / FULL_WEIGHT)


@dataclass
class Course:
    """A course identified by its code, holding an ordered list of assessments."""

    course_code: str
    assessments: list[Assessment] = field(default_factory=list)
    is_5050: bool = False

    def _counted(self, care_for_complete: bool) -> Iterable[Assessment]:
        return (a for a in self.assessments if not care_for_complete or a.is_complete)

    def add_assessment(self, assessment: Assessment) -> None:
        self.assessments.append(assessment)

    def remove_assessment(self, index: int) -> None:
        """Remove the assessment at index; an index out of range is ignored."""
        if 0 <= index < len(self.assessments):
            del self.assessments[index]

    def update_assessment(self, index: int, **kwargs: Any) -> None:
        """Change fields of the assessment at index; an index out of range is ignored."""
        unknown = set(kwargs) - _UPDATABLE
        if unknown:
            raise TypeError(f"unknown assessment fields: {', '.join(sorted(unknown))}")
        if 0 <= index < len(self.assessments):
            target = self.assessments[index]
            for name, value in kwargs.items():
                setattr(target, name, value)

    def total_weight(self) -> float:
        """Sum of the weights of completed assessments."""
        return sum((a.weight for a in self.assessments if a.is_complete), 0.0)

    def incomplete_count(self) -> int:
        return sum(1 for a in self.assessments if not a.is_complete)

    def is_total_weight_valid(self) -> bool:
        return self.total_weight() == FULL_WEIGHT

    def overall_grade(self, care_for_complete: bool) -> float:
        """Points earned out of the whole course, rounded to two decimals."""
        weighted_sum, total_weight = _weighted(self._counted(care_for_complete))
        if total_weight == 0.0:
            return 0.0
        return _round2(weighted_sum / FULL_WEIGHT)

    def grade_so_far(self, care_for_complete: bool) -> float:
        """Weighted average over the counted assessments, rounded to two decimals."""
        weighted_sum, total_weight = _weighted(self._counted(care_for_complete))
        if total_weight == 0.0:
            return 0.0
        return _round2(weighted_sum / total_weight)

    def section_grade_so_far(self, is_theory: bool, care_for_complete: bool) -> float:
        """Weighted average over the theory or the lab section only."""
        section = (a for a in self._counted(care_for_complete) if a.is_theory == is_theory)
        weighted_sum, total_weight = _weighted(section)
        if total_weight == 0.0:
            return 0.0
        return _round2(weighted_sum / total_weight)

    def required_grades(self, goal: float) -> list[Assessment]:
        """Project grades on incomplete assessments that reach the goal grade.

        Returns copies of the assessments with the incomplete ones given the
        projected grades, or an empty list when the goal cannot be reached.
        """
        if self.is_total_weight_valid():
            return self.what_if()

        grade_so_far = self.overall_grade(True)
        projection = self.what_if()
        if abs(goal - grade_so_far) < _THRESHOLD:
            return projection

        pending = [a for a in projection if not a.is_complete]
        for assessment in pending:
            if assessment.grade == 0.0:
                assessment.grade = _STARTING_GRADE

        projected = _projected(projection)
        for _ in range(_MAX_ITERATIONS):
            if abs(goal - projected) <= _THRESHOLD:
                return projection
            increment = _INTERVAL if goal > projected else -_INTERVAL
            for assessment in pending:
                new_grade = assessment.grade + increment
                if 0.0 <= new_grade <= FULL_WEIGHT:
                    assessment.grade = new_grade
            projected = _projected(projection)
        return []

    def what_if(self) -> list[Assessment]:
        """Independent copies of the assessments, for hypothetical changes."""
        return [replace(a) for a in self.assessments]

    def to_dict(self) -> dict[str, Any]:
        return {
            "courseCode": self.course_code,
            "isA5050Course": self.is_5050,
            "assessments": [a.to_dict() for a in self.assessments],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Course:
        """Build a course from its stored JSON representation.

        Raises KeyError for a missing field and TypeError for a field of the
        wrong type.
        """
        code = data["courseCode"]
        if not isinstance(code, str):
            raise TypeError("'courseCode' must be a string")
        is_5050 = data["isA5050Course"]
        if not isinstance(is_5050, bool):
            raise TypeError("'isA5050Course' must be a boolean")
        raw = data["assessments"]
        if raw is None:
            raw = []
        if not isinstance(raw, list):
            raise TypeError("'assessments' must be a list")
        return cls(code, [Assessment.from_dict(item) for item in raw], is_5050)