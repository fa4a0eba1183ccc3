"""The collection of courses and its JSON file storage."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterator

from gradecalc.course import Course

DEFAULT_PATH = "courses.json"


class CourseDataError(Exception):
    """The course data file could not be read, parsed or written."""


def _dump(data: Any) -> str:
    return json.dumps(data, indent=4, sort_keys=True)


def _parse(data: Any) -> list[Course]:
    if not isinstance(data, dict):
        raise TypeError("top-level value must be an object")
    raw = data.get("courses")
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise TypeError("'courses' must be a list")
    return [Course.from_dict(item) for item in raw]


class CourseManager:
    """Courses kept in memory and mirrored to a JSON file after each change."""

    def __init__(self, path: str | Path = DEFAULT_PATH) -> None:
        self.path = Path(path)
        self._courses: list[Course] = []
        self.load()

    def add_course(self, course: Course) -> None:
        self._courses.append(course)
        self.save()

    def remove_course(self, index: int) -> None:
        """Remove the course at index and save; an index out of range is ignored."""
        if 0 <= index < len(self._courses):
            del self._courses[index]
            self.save()

    def load(self) -> None:
        """Read the courses from the file, creating an empty file if none exists."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            try:
                self.path.write_text(_dump({"courses": []}), encoding="utf-8")
            except OSError as exc:
                raise CourseDataError(f"could not create a new data file at {self.path}") from exc
            return
        except OSError as exc:
            raise CourseDataError(f"could not read {self.path}: {exc}") from exc

        try:
            self._courses = _parse(json.loads(text))
        except (ValueError, KeyError, TypeError) as exc:
            raise CourseDataError(f"error loading courses: {exc}") from exc

    def save(self) -> None:
        """Write all courses to the file."""
        data = {"courses": [course.to_dict() for course in self._courses]}
        try:
            self.path.write_text(_dump(data), encoding="utf-8")
        except OSError as exc:
            raise CourseDataError(f"error saving courses: {exc}") from exc

    def __getitem__(self, index: int) -> Course:
        return self._courses[index]

    def __len__(self) -> int:
        return len(self._courses)

    def __iter__(self) -> Iterator[Course]:
        return iter(self._courses)