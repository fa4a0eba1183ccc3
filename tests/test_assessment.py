import pytest

from gradecalc.assessment import Assessment


def test_defaults():
    assessment = Assessment("Quiz", 10.0)
    assert assessment.grade == 0.0
    assert assessment.is_theory is True
    assert assessment.is_complete is False


def test_to_dict_uses_stored_keys():
    data = Assessment("Lab 1", 15.0, 88.5, False, True).to_dict()
    assert data == {
        "name": "Lab 1",
        "weight": 15.0,
        "grade": 88.5,
        "isTheory": False,
        "isComplete": True,
    }


def test_round_trip():
    original = Assessment("Midterm", 30.0, 72.25, True, True)
    assert Assessment.from_dict(original.to_dict()) == original


def test_from_dict_accepts_integers_as_numbers():
    data = {"name": "Final", "weight": 40, "grade": 0, "isTheory": True, "isComplete": False}
    assessment = Assessment.from_dict(data)
    assert assessment.weight == 40.0
    assert isinstance(assessment.weight, float)


def test_from_dict_missing_field():
    with pytest.raises(KeyError):
        Assessment.from_dict({"name": "x", "weight": 1.0, "grade": 0.0, "isTheory": True})


@pytest.mark.parametrize(
    "key, value",
    [("name", 5), ("weight", "ten"), ("grade", True), ("isTheory", 1), ("isComplete", "yes")],
)
def test_from_dict_wrong_type(key, value):
    data = {"name": "x", "weight": 1.0, "grade": 0.0, "isTheory": True, "isComplete": False}
    data[key] = value
    with pytest.raises(TypeError):
        Assessment.from_dict(data)


def test_fields_are_mutable():
    assessment = Assessment("Essay", 20.0)
    assessment.grade = 91.0
    assessment.is_complete = True
    assert assessment.to_dict()["grade"] == 91.0
    assert assessment.to_dict()["isComplete"] is True