import json

import pytest

from gradecalc.assessment import Assessment
from gradecalc.course import Course
from gradecalc.course_manager import CourseDataError, CourseManager


def _course(code="CS101"):
    return Course(
        code,
        [
            Assessment("Quiz", 20.0, 85.0, True, True),
            Assessment("Lab", 30.0, 0.0, False, False),
        ],
        True,
    )


def test_missing_file_is_created_empty(tmp_path):
    path = tmp_path / "data.json"
    manager = CourseManager(path)
    assert len(manager) == 0
    assert json.loads(path.read_text()) == {"courses": []}


def test_default_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    manager = CourseManager()
    assert (tmp_path / "courses.json").exists()
    assert list(manager) == []


def test_add_course_persists(tmp_path):
    path = tmp_path / "data.json"
    manager = CourseManager(path)
    manager.add_course(_course())
    reloaded = CourseManager(path)
    assert list(reloaded) == [_course()]


def test_saved_file_layout(tmp_path):
    path = tmp_path / "data.json"
    manager = CourseManager(path)
    manager.add_course(_course())
    data = json.loads(path.read_text())
    stored = data["courses"][0]
    assert stored["courseCode"] == "CS101"
    assert stored["isA5050Course"] is True
    assert stored["assessments"][0] == {
        "name": "Quiz",
        "weight": 20.0,
        "grade": 85.0,
        "isTheory": True,
        "isComplete": True,
    }
    assert path.read_text().startswith("{\n    ")


def test_remove_course(tmp_path):
    path = tmp_path / "data.json"
    manager = CourseManager(path)
    manager.add_course(_course("A"))
    manager.add_course(_course("B"))
    manager.remove_course(0)
    assert [c.course_code for c in manager] == ["B"]
    assert [c.course_code for c in CourseManager(path)] == ["B"]


@pytest.mark.parametrize("index", [-1, 1, 10])
def test_remove_out_of_range_ignored(tmp_path, index):
    manager = CourseManager(tmp_path / "data.json")
    manager.add_course(_course("A"))
    manager.remove_course(index)
    assert len(manager) == 1


def test_getitem_edits_are_saved(tmp_path):
    path = tmp_path / "data.json"
    manager = CourseManager(path)
    manager.add_course(_course())
    manager[0].course_code = "CS102"
    manager[0].update_assessment(1, grade=70.0, is_complete=True)
    manager.save()
    reloaded = CourseManager(path)
    assert reloaded[0].course_code == "CS102"
    assert reloaded[0].assessments[1] == Assessment("Lab", 30.0, 70.0, False, True)


def test_getitem_out_of_range(tmp_path):
    manager = CourseManager(tmp_path / "data.json")
    manager.add_course(_course())
    assert manager[0].course_code == "CS101"
    with pytest.raises(IndexError):
        manager[1]


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("{not json")
    with pytest.raises(CourseDataError):
        CourseManager(path)


def test_missing_field_raises(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"courses": [{"courseCode": "A", "assessments": []}]}))
    with pytest.raises(CourseDataError):
        CourseManager(path)


def test_wrong_top_level_raises(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("[1, 2]")
    with pytest.raises(CourseDataError):
        CourseManager(path)


def test_load_rereads_file(tmp_path):
    path = tmp_path / "data.json"
    manager = CourseManager(path)
    other = CourseManager(path)
    other.add_course(_course("Z"))
    manager.load()
    assert [c.course_code for c in manager] == ["Z"]