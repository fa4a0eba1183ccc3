# gradecalc

A terminal grade calculator. Keep track of your courses and their assessments,
see your grade so far, work out the marks you still need to reach a target
final grade, and try "what if" scores for assessments you have not finished yet.

## Installation

```
pip install .
```

## Usage

Start the interactive menu:

```
gradecalc
```

Courses are kept in `courses.json` in the current directory; choose another
file with `--data`:

```
gradecalc --data my-courses.json
```

If the file is missing, an empty one is created. Every change made from the
menus is written back to the file straight away. From the main menu you can:

1. Add a new course, with its assessments if you like
2. List all courses with their current or final grade
3. View a course in detail, then edit it, find the grades you need for a
   target, or try hypothetical scores
4. Delete a course
5. Exit

Answers are read one line at a time. A yes/no question counts as "yes" only
when the answer starts with `y`. The screen is cleared between menus with the
terminal's `clear` (or `cls` on Windows) command. If the data file cannot be
read or written, the program prints an error and exits with status 1.

A course can be marked as a "50/50" course. Its assessments are then shown in
theory and lab sections, each with its own grade so far.

### How grades are worked out

- *Grade so far*: the weighted average of the completed assessments.
- *Overall grade*: points earned out of the whole course (grade × weight / 100,
  summed), shown once the completed weights add up to exactly 100%.
- *Required grades*: the incomplete assessments start at 50% (if they have no
  grade) and are moved together in steps of 0.5, staying within 0–100%, until
  the projected final grade is within 0.1 of the goal. If that is not reached
  within 1000 steps, the goal is reported as impossible.
- *What if*: you enter a score for each incomplete assessment (clamped to
  0–100%) and see the resulting final grade. Nothing is saved.

## Using it as a library

```python
from gradecalc.assessment import Assessment
from gradecalc.course import Course
from gradecalc.course_manager import CourseManager

course = Course("MATH101", [
    Assessment("Midterm", 40, 80.0, is_complete=True),
    Assessment("Final", 60),
], False)

course.grade_so_far(True)        # weighted average over completed work
course.overall_grade(True)       # points earned out of the whole course
course.required_grades(75.0)     # copies with projected grades, or [] if out of reach

manager = CourseManager("courses.json")
manager.add_course(course)       # saved to the file right away
len(manager), manager[0]         # a manager is sized, indexable and iterable
```

`Course` also offers `add_assessment`, `remove_assessment`,
`update_assessment(index, name=..., weight=..., grade=..., is_theory=..., is_complete=...)`,
`total_weight`, `incomplete_count`, `is_total_weight_valid`,
`section_grade_so_far` and `what_if`. Out-of-range indexes are ignored by the
removal and update methods.

Assessments and courses become plain dictionaries with `to_dict()` and are
built back with `from_dict()`. `CourseManager` raises `CourseDataError` when
its file cannot be read, parsed or written.

`gradecalc.display` holds the text rendering used by the menus
(`course_list`, `assessments_table`, `course_summary`, `final_grade_row`,
`format_number`), each returning a string.

## Running the tests

```
pip install .[test]
pytest
```