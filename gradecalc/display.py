"""Text rendering of courses and assessments for the terminal."""

from __future__ import annotations

from typing import Iterable, Sequence

from gradecalc.assessment import Assessment
from gradecalc.course import FULL_WEIGHT, Course

ID_WIDTH = 3
NAME_WIDTH = 25
WEIGHT_WIDTH = 8
GRADE_WIDTH = 8
STATUS_WIDTH = 10
TABLE_WIDTH = (
    ID_WIDTH + 1 + NAME_WIDTH + 1 + WEIGHT_WIDTH + 1 + GRADE_WIDTH + 1 + STATUS_WIDTH + 12
)
HORIZONTAL_LINE = "-" * TABLE_WIDTH

_SECTION_LABEL_WIDTH = NAME_WIDTH - 8
_WEIGHT_NOTE_ALLOWANCE = 39
_INVALID_WEIGHT_TEXT = "Invalid Total Weight: Total weighting must equal to 100%"


def format_number(value: float, fixed: bool) -> str:
    """Format a number with two decimals when fixed, otherwise in short general form."""
    if fixed:
        return f"{value:.2f}"
    return f"{value:g}"


def _padded_row(text: str, allowance: int = 4) -> str:
    spaces = max(0, TABLE_WIDTH - len(text) - allowance)
    return f"| {text}{' ' * spaces} |"


def course_list(courses: Iterable[Course]) -> str:
    """Numbered list of courses with their current standing, ending in a newline."""
    courses = list(courses)
    if not courses:
        return "No courses found.\n"
    lines = ["", "=== Courses ==="]
    for number, course in enumerate(courses, start=1):
        line = f"{number}. {course.course_code} (Assessments: {len(course.assessments)})"
        if course.total_weight() == FULL_WEIGHT:
            grade = format_number(course.overall_grade(True), False)
            line += f" - Completed -  Final Grade: {grade}%"
        else:
            grade = format_number(course.grade_so_far(True), False)
            line += f" -  Pending  - Grade so far: {grade}%"
        lines.append(line)
    return "\n".join(lines) + "\n"


def _section_header(label: str, section_grade: float | None) -> str:
    if section_grade is None:
        title = label.ljust(NAME_WIDTH)
    else:
        title = label.ljust(_SECTION_LABEL_WIDTH) + f"({format_number(section_grade, True)}%)"
    return (
        f"| {'#'.ljust(ID_WIDTH)} | {title}"
        f" | {'Weight'.rjust(WEIGHT_WIDTH)}"
        f" | {'Grade'.rjust(GRADE_WIDTH)}"
        f" | {'Status'.ljust(STATUS_WIDTH)} |"
    )


def _assessment_row(number: int, assessment: Assessment) -> str:
    name = assessment.name
    if len(name) > NAME_WIDTH:
        name = name[: NAME_WIDTH - 3] + "..."
    weight = format_number(assessment.weight, False).rjust(WEIGHT_WIDTH - 1) + "%"
    if assessment.grade != 0.0:
        grade = format_number(assessment.grade, True).rjust(GRADE_WIDTH - 1) + "%"
    else:
        grade = "N/A".rjust(GRADE_WIDTH)
    status = "Complete" if assessment.is_complete else "Pending"
    return (
        f"| {str(number).ljust(ID_WIDTH)} | {name.ljust(NAME_WIDTH)}"
        f" | {weight} | {grade} | {status.ljust(STATUS_WIDTH)} |"
    )


def assessments_table(
    course: Course, assessments: Sequence[Assessment], care_for_complete: bool
) -> str:
    """Table of assessments split into theory and lab sections, ending in a newline.

    Section grades are taken from the course and shown only for 50/50 courses.
    """
    lines = ["", "Assessments:", HORIZONTAL_LINE]
    for label, is_theory in (("Theory", True), ("Lab", False)):
        if not is_theory:
            lines.append(HORIZONTAL_LINE)
        section_grade = (
            course.section_grade_so_far(is_theory, care_for_complete) if course.is_5050 else None
        )
        lines.append(_section_header(label, section_grade))
        lines.append(HORIZONTAL_LINE)
        lines.extend(
            _assessment_row(number, assessment)
            for number, assessment in enumerate(assessments, start=1)
            if assessment.is_theory == is_theory
        )
    lines.append(HORIZONTAL_LINE)
    return "\n".join(lines) + "\n"


def final_grade_row(course: Course) -> str:
    """Closing table row with the projected final grade, ending in a newline."""
    grade = format_number(course.overall_grade(False), True)
    text = f"Final Grade would be: {grade}%"
    return f"{_padded_row(text)}\n{HORIZONTAL_LINE}\n"


def course_summary(course: Course) -> str:
    """Course heading, its assessment table and its grade summary, ending in a newline."""
    kind = "50/50 Course" if course.is_5050 else "Regular Course"
    parts = [
        f"\n === {course.course_code} === \n"
        f"Type: {kind}\n"
        f"Assessment Count: {len(course.assessments)}\n"
    ]
    if course.assessments:
        parts.append(assessments_table(course, course.assessments, True))

    rows = []
    if course.is_total_weight_valid():
        overall_text = f"Overall Grade: {format_number(course.overall_grade(True), True)}%"
    else:
        grade_text = f"My grade so far: {format_number(course.grade_so_far(True), True)}%"
        weight_text = (
            f" (based on {format_number(course.total_weight(), True)}% of course weight)"
        )
        spaces = max(0, TABLE_WIDTH - len(grade_text) - _WEIGHT_NOTE_ALLOWANCE)
        rows.append(f"| {grade_text}{weight_text}{' ' * spaces} |")
        overall_text = _INVALID_WEIGHT_TEXT
    rows.append(_padded_row(overall_text))
    rows.append(HORIZONTAL_LINE)
    parts.append("\n".join(rows) + "\n")
    return "".join(parts)