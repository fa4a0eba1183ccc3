import pytest

from gradecalc.assessment import Assessment
from gradecalc.course import Course


def _partial_course():
    return Course(
        "CS101",
        [
            Assessment("Midterm", 50.0, 80.0, True, True),
            Assessment("Final", 50.0, 0.0, True, False),
        ],
        False,
    )


def test_add_and_remove():
    course = Course("MATH1")
    course.add_assessment(Assessment("A", 10.0))
    course.add_assessment(Assessment("B", 20.0))
    course.remove_assessment(0)
    assert [a.name for a in course.assessments] == ["B"]


@pytest.mark.parametrize("index", [-1, 1, 5])
def test_remove_out_of_range_is_ignored(index):
    course = Course("MATH1", [Assessment("A", 10.0)])
    course.remove_assessment(index)
    assert [a.name for a in course.assessments] == ["A"]


def test_update_assessment_fields():
    course = Course("X", [Assessment("Old", 10.0)])
    course.update_assessment(0, name="New", weight=25.0, grade=77.0, is_theory=False, is_complete=True)
    assert course.assessments[0] == Assessment("New", 25.0, 77.0, False, True)


def test_update_out_of_range_is_ignored():
    course = Course("X", [Assessment("Only", 10.0)])
    course.update_assessment(3, name="Changed")
    assert course.assessments[0].name == "Only"


def test_update_unknown_field_raises():
    course = Course("X", [Assessment("Only", 10.0)])
    with pytest.raises(TypeError):
        course.update_assessment(0, colour="red")


def test_total_weight_counts_only_complete():
    course = _partial_course()
    assert course.total_weight() == course.assessments[0].weight
    assert course.incomplete_count() == 1
    assert not course.is_total_weight_valid()


def test_total_weight_valid_at_full_weight():
    course = _partial_course()
    course.update_assessment(1, is_complete=True)
    assert course.is_total_weight_valid()
    assert course.total_weight() == 100.0


def test_single_full_assessment_grades_equal_its_grade():
    course = Course("Y", [Assessment("All", 100.0, 73.0, True, True)])
    assert course.overall_grade(True) == 73.0
    assert course.grade_so_far(True) == 73.0


def test_overall_grade_relation_to_grade_so_far():
    course = _partial_course()
    expected = course.grade_so_far(True) * course.total_weight() / 100.0
    assert course.overall_grade(True) == pytest.approx(expected)
    assert course.grade_so_far(True) == course.assessments[0].grade


def test_no_weight_gives_zero():
    course = Course("Empty")
    assert course.overall_grade(True) == 0.0
    assert course.grade_so_far(False) == 0.0
    assert course.section_grade_so_far(True, False) == 0.0


def test_rounding_halves_away_from_zero():
    course = Course("R", [Assessment("A", 100.0, 0.125, True, True)])
    assert course.grade_so_far(True) == 0.13


def test_section_grades_are_separate():
    course = Course(
        "S",
        [
            Assessment("Theory", 40.0, 90.0, True, True),
            Assessment("Lab", 60.0, 60.0, False, True),
        ],
        True,
    )
    assert course.section_grade_so_far(True, True) == 90.0
    assert course.section_grade_so_far(False, True) == 60.0


def test_section_ignores_incomplete_when_asked():
    course = Course(
        "S",
        [
            Assessment("Lab1", 20.0, 70.0, False, True),
            Assessment("Lab2", 20.0, 10.0, False, False),
        ],
        True,
    )
    assert course.section_grade_so_far(False, True) == 70.0
    assert course.section_grade_so_far(False, False) < 70.0


def test_what_if_returns_independent_copies():
    course = _partial_course()
    copies = course.what_if()
    assert copies == course.assessments
    copies[1].grade = 99.0
    assert course.assessments[1].grade == 0.0


def test_required_grades_full_weight_returns_same():
    course = Course("F", [Assessment("All", 100.0, 64.0, True, True)])
    assert course.required_grades(95.0) == course.assessments


def test_required_grades_reaches_goal():
    course = _partial_course()
    goal = 70.0
    result = course.required_grades(goal)
    assert result
    projection = Course(course.course_code, result, course.is_5050)
    assert abs(projection.overall_grade(False) - goal) <= 0.1
    assert result[0] == course.assessments[0]
    assert course.assessments[1].grade == 0.0


def test_required_grades_already_at_goal_returns_unchanged():
    course = _partial_course()
    assert course.required_grades(40.0) == course.assessments


def test_required_grades_impossible_goal_is_empty():
    course = _partial_course()
    assert course.required_grades(150.0) == []


def test_round_trip_dict():
    course = _partial_course()
    data = course.to_dict()
    assert set(data) == {"courseCode", "isA5050Course", "assessments"}
    assert Course.from_dict(data) == course


def test_from_dict_wrong_type():
    with pytest.raises(TypeError):
        Course.from_dict({"courseCode": "A", "isA5050Course": "no", "assessments": []})


def test_from_dict_missing_key():
    with pytest.raises(KeyError):
        Course.from_dict({"courseCode": "A", "assessments": []})