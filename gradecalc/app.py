"""Interactive terminal menu for managing courses and grade projections."""

from __future__ import annotations

import argparse
import os
import re
import subprocess
import sys
from typing import Callable, Optional, TextIO, TypeVar

from gradecalc.course import FULL_WEIGHT, Course
from gradecalc.assessment import Assessment
from gradecalc.course_manager import DEFAULT_PATH, CourseDataError, CourseManager
from gradecalc.display import (
    assessments_table,
    course_list,
    course_summary,
    final_grade_row,
    format_number,
)

T = TypeVar("T")

_INT_PREFIX = re.compile(r"[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _clear_terminal() -> None:
    command = "cls" if os.name == "nt" else "clear"
    try:
        subprocess.run(command, shell=os.name == "nt", check=False)
    except OSError:
        pass


def _parse_char(token: str) -> Optional[str]:
    return token[0]


def _parse_int(token: str) -> Optional[int]:
    match = _INT_PREFIX.match(token)
    return int(match.group()) if match else None


def _parse_float(token: str) -> Optional[float]:
    match = _FLOAT_PREFIX.match(token)
    return float(match.group()) if match else None


class App:
    """Menu-driven session over a course manager, reading answers line by line.

    Running out of input raises EOFError.
    """

    def __init__(
        self,
        manager: CourseManager,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        clear_screen: Optional[Callable[[], None]] = None,
    ) -> None:
        self.manager = manager
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._clear = clear_screen if clear_screen is not None else _clear_terminal

    # -- input and output -------------------------------------------------

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _read_line(self) -> str:
        line = self._in.readline()
        if line == "":
            raise EOFError("end of input")
        return line.rstrip("\r\n")

    def _ask(self, prompt: str, parse: Callable[[str], Optional[T]]) -> T:
        self._write(prompt)
        while True:
            token = self._read_line().strip()
            if not token:
                continue
            value = parse(token)
            if value is None:
                self._write("Invalid input. " + prompt)
                continue
            return value

    def _ask_int(self, prompt: str) -> int:
        return self._ask(prompt, _parse_int)

    def _ask_float(self, prompt: str) -> float:
        return self._ask(prompt, _parse_float)

    def _ask_char(self, prompt: str) -> str:
        return self._ask(prompt, _parse_char)

    def _ask_yes(self, prompt: str) -> bool:
        return self._ask_char(prompt) == "y"

    def _ask_text(self, prompt: str) -> str:
        self._write(prompt)
        return self._read_line()

    def _pause(self) -> None:
        self._write("\nPress Enter to continue...")
        self._read_line()

    def _choose_course(self) -> int:
        count = len(self.manager)
        while True:
            choice = self._ask_int(f"\nSelect course index number (1-{count}): ")
            if 1 <= choice <= count:
                return choice - 1
            self._write(f"Invalid selection. Please enter a number between 1 and {count}.\n")

    # -- main menu --------------------------------------------------------

    def run(self) -> None:
        """Show the main menu until the user chooses to exit."""
        while True:
            self._clear()
            self._write(
                "==== Grade Calculator ====\n"
                "1. Add new course\n"
                "2. View all courses\n"
                "3. View/edit course details\n"
                "4. Delete course\n"
                "5. Exit\n"
                "==========================\n"
            )
            choice = self._ask_int("Enter your choice: ")
            if choice == 1:
                self._clear()
                self.add_new_course()
                self._pause()
            elif choice == 2:
                self._clear()
                self.display_courses()
                self._pause()
            elif choice == 3:
                self._clear()
                self.view_course_details()
            elif choice == 4:
                self._clear()
                self.delete_course()
                self._pause()
            elif choice == 5:
                self._write("Goodbye!\n")
                return
            else:
                self._write("Invalid choice. Please try again.\n")
                self._pause()

    def add_new_course(self) -> None:
        """Ask for a new course and, optionally, its assessments, then store it."""
        code = self._ask_text("Enter course code: ")
        is_5050 = self._ask_yes("Is this a 50/50 course? (y/n): ")
        course = Course(code, [], is_5050)

        if self._ask_yes("Add assessments now? (y/n): "):
            count = self._ask_int("How many assessments to add? ")
            remaining = FULL_WEIGHT
            for number in range(1, count + 1):
                self._write(f"\nAssessment #{number}\n")
                self._write(f"Remaining weight: {format_number(remaining, False)}%\n")
                name = self._ask_text("Name: ")
                weight = self._ask_float("Weight (%): ")
                while weight > remaining or weight <= 0:
                    self._write(
                        "Invalid weight. It must be between 0 and "
                        f"{format_number(remaining, False)}%.\n"
                    )
                    weight = self._ask_float("Weight (%): ")
                if is_5050:
                    is_theory = self._ask_yes("Is this a theory assessment? (y/n for lab): ")
                else:
                    is_theory = True
                is_complete = self._ask_yes("Is this assessment complete? (y/n): ")
                grade = self._ask_float("Grade received (%): ") if is_complete else 0.0
                course.add_assessment(Assessment(name, weight, grade, is_theory, is_complete))
                remaining -= weight

        self.manager.add_course(course)
        self._write("Course added successfully!\n")

    def display_courses(self) -> None:
        self._write(course_list(self.manager))

    def view_course_details(self) -> None:
        """Let the user pick a course, show its details, then its options menu."""
        self._clear()
        self.display_courses()
        if len(self.manager) == 0:
            self._write("No courses to view. Please add a course first.\n")
            return
        course = self.manager[self._choose_course()]
        self._write(course_summary(course))
        self._pause()
        self.show_course_options(course)

    def delete_course(self) -> None:
        """Let the user pick a course and delete it after confirmation."""
        self._clear()
        self.display_courses()
        if len(self.manager) == 0:
            self._write("No courses to delete. Please add a course first.\n")
            return
        index = self._choose_course()
        code = self.manager[index].course_code
        if self._ask_char(
            f"Are you sure you want to delete the course '{code}'? (y/n): "
        ) == "y":
            self.manager.remove_course(index)
            self._write(f"Course '{code}' deleted successfully!\n")
        else:
            self._write("Deletion cancelled.\n")

    # -- course menus -----------------------------------------------------

    def edit_course(self, course: Course) -> None:
        """Menu for renaming a course and editing its assessments."""
        while True:
            self._clear()
            self._write(
                f"==== Edit Course: {course.course_code} ====\n"
                "1. Rename course\n"
                "2. Add assessment\n"
                "3. Edit existing assessment\n"
                "4. Delete assessment\n"
                "5. Toggle 50/50 course type\n"
                "6. Back to course menu\n"
                "=============================\n"
            )
            choice = self._ask_int("Enter your choice: ")
            if choice == 1:
                course.course_code = self._ask_text("Enter new course code: ")
                self._write("Course code updated successfully!\n")
                self.manager.save()
                self._pause()
            elif choice == 2:
                self._add_assessment(course)
            elif choice == 3:
                self._edit_assessment(course)
            elif choice == 4:
                self._delete_assessment(course)
            elif choice == 5:
                current = "a 50/50" if course.is_5050 else "NOT a 50/50"
                if self._ask_char(f"This course is currently {current} course. Change? (y/n): ") == "y":
                    course.is_5050 = not course.is_5050
                    self._write("Course type updated successfully!\n")
                    self.manager.save()
                self._pause()
            elif choice == 6:
                return
            else:
                self._write("Invalid choice. Please try again.\n")
                self._pause()

    def _add_assessment(self, course: Course) -> None:
        self._clear()
        self._write("==== Add New Assessment ====\n")
        name = self._ask_text("Name: ")
        weight = self._ask_float("Weight (%): ")
        is_theory = self._ask_yes("Is this a theory assessment? (y/n for lab): ")
        is_complete = self._ask_yes("Is this assessment complete? (y/n): ")
        grade = self._ask_float("Grade received (%): ") if is_complete else 0.0
        course.add_assessment(Assessment(name, weight, grade, is_theory, is_complete))
        self._write("Assessment added successfully!\n")
        self.manager.save()
        self._pause()

    def _pick_assessment(self, course: Course, verb: str, detailed: bool) -> Optional[int]:
        assessments = course.assessments
        if not assessments:
            self._write(f"No assessments to {verb}.\n")
            self._pause()
            return None
        self._write("Current assessments:\n")
        for number, assessment in enumerate(assessments, start=1):
            line = f"{number}. {assessment.name}"
            if detailed:
                status = "Complete" if assessment.is_complete else "Pending"
                line += f" (Weight: {format_number(assessment.weight, False)}%, {status})"
            self._write(line + "\n")
        number = self._ask_int(
            f"\nEnter assessment number to {verb} (1-{len(assessments)}): "
        )
        if not 1 <= number <= len(assessments):
            self._write("Invalid assessment number.\n")
            self._pause()
            return None
        return number - 1

    def _edit_assessment(self, course: Course) -> None:
        self._clear()
        self._write("==== Edit Assessment ====\n")
        index = self._pick_assessment(course, "edit", True)
        if index is None:
            return
        before = course.what_if()[index]

        self._clear()
        kind = "Theory" if before.is_theory else "Lab"
        status = "Complete" if before.is_complete else "Pending"
        self._write(
            f"==== Edit Assessment: {before.name} ====\n"
            f"1. Name (currently: {before.name})\n"
            f"2. Weight (currently: {format_number(before.weight, False)}%)\n"
            f"3. Assessment type (currently: {kind})\n"
            f"4. Completion status (currently: {status})\n"
            f"5. Grade (currently: {format_number(before.grade, True)}%)\n"
            "6. Back\n"
        )
        choice = self._ask_int("What would you like to edit? ")
        if choice == 1:
            course.update_assessment(index, name=self._ask_text("Enter new name: "))
        elif choice == 2:
            course.update_assessment(index, weight=self._ask_float("Enter new weight (%): "))
        elif choice == 3:
            is_theory = self._ask_yes("Is this a theory assessment? (y/n for lab): ")
            course.update_assessment(index, is_theory=is_theory)
        elif choice == 4:
            is_complete = self._ask_yes("Is this assessment complete? (y/n): ")
            course.update_assessment(index, is_complete=is_complete)
            if is_complete and not before.is_complete:
                grade = self._ask_float("Enter grade received (%): ")
                course.update_assessment(index, grade=grade)
        elif choice == 5:
            if not before.is_complete:
                self._write("Cannot set grade for incomplete assessment.\n")
            else:
                course.update_assessment(index, grade=self._ask_float("Enter new grade (%): "))
        elif choice != 6:
            self._write("Invalid choice.\n")

        self._write("Assessment updated successfully!\n")
        self.manager.save()
        self._pause()

    def _delete_assessment(self, course: Course) -> None:
        self._clear()
        self._write("==== Delete Assessment ====\n")
        index = self._pick_assessment(course, "delete", False)
        if index is None:
            return
        if self._ask_char("Are you sure you want to delete this assessment? (y/n): ") == "y":
            course.remove_assessment(index)
            self._write("Assessment deleted successfully!\n")
            self.manager.save()
        else:
            self._write("Deletion cancelled.\n")
        self._pause()

    def show_course_options(self, course: Course) -> None:
        """Menu for editing a course and projecting its final grade."""
        while True:
            self._clear()
            self._write(
                "==== Select a Choice ====\n"
                "1. Edit Course\n"
                "2. Calculate Minimum Grades Needed for Target Final Grade\n"
                "3. Simulate Final Grade Based on Hypothetical Scores\n"
                "4. Back to Main Menu\n"
                "=========================\n"
            )
            choice = self._ask_int("Enter your choice: ")
            if choice == 1:
                self.edit_course(course)
            elif choice == 2:
                self._clear()
                self._target_grade(course)
                self._pause()
            elif choice == 3:
                self._what_if(course)
                self._pause()
            elif choice == 4:
                return
            else:
                self._write("Invalid choice. Please try again.\n")
                self._pause()

    def _target_grade(self, course: Course) -> None:
        self._write(f"My grade so far: {format_number(course.grade_so_far(True), True)}%\n")
        self._write(f"Number of incomplete assessments: {course.incomplete_count()}\n")
        goal = self._ask_float("What's your goal final grade (%): ")
        projection = course.required_grades(goal)
        if not projection:
            self._write("\n==== Target Grade Analysis ====\n")
            self._write(
                f"Achieving a grade of {format_number(goal, True)}% is impossible "
                "with the current assessment structure.\n"
            )
            return
        projected = Course(course.course_code, projection, course.is_5050)
        self._write(assessments_table(projected, projection, False))
        self._write(final_grade_row(projected))

    def _what_if(self, course: Course) -> None:
        self._write("==== What If Grade Simulation ====\n\n")
        simulation = course.what_if()
        self._write(
            f"Your current grade: {format_number(course.grade_so_far(True), True)}% "
            f"(based on {format_number(course.total_weight(), True)}% of course weight)\n\n"
        )
        self._write("Enter hypothetical grades for incomplete assessments:\n")
        changed = False
        for assessment in simulation:
            if assessment.is_complete:
                continue
            self._write(
                f"\n{assessment.name} (Weight: {format_number(assessment.weight, True)}%)"
                " - Currently not completed\n"
            )
            grade = self._ask_float("Enter hypothetical grade (%): ")
            assessment.grade = min(max(grade, 0.0), FULL_WEIGHT)
            changed = True

        if not changed:
            self._write("\nNo incomplete assessments found to simulate grades for.\n")
            return
        simulated = Course(course.course_code, simulation, course.is_5050)
        self._write("\n==== Simulation Results ====\n")
        self._write(
            "With your hypothetical grades, your final grade would be: "
            f"{format_number(simulated.grade_so_far(False), True)}%\n"
        )
        self._write("\nDetailed breakdown:\n")
        self._write(assessments_table(simulated, simulation, False))
        self._write(final_grade_row(simulated))


def main(argv: Optional[list[str]] = None) -> int:
    """Start the interactive grade calculator."""
    parser = argparse.ArgumentParser(prog="gradecalc", description="Track course grades.")
    parser.add_argument(
        "--data", default=DEFAULT_PATH, help=f"course data file (default: {DEFAULT_PATH})"
    )
    args = parser.parse_args(argv)
    try:
        manager = CourseManager(args.data)
        App(manager).run()
    except CourseDataError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except (EOFError, KeyboardInterrupt):
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())