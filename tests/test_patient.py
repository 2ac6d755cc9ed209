import pytest

from smarthealth.patient import Patient, parse_age, parse_patient_name
from smarthealth.symptom import Symptom


def test_add_symptom_normalizes_and_collapses_duplicates():
    p = Patient("Ana", 30)
    for raw in ["Fever", " fever ", "COUGH", "", "   ", None]:
        p.add_symptom(raw)
    assert p.reported_symptoms == {"fever", "cough"}


def test_add_symptom_accepts_symptom_value():
    p = Patient("Ana", 30)
    p.add_symptom(Symptom("Headache", 6))
    assert p.reported_symptoms == {"headache"}


def test_add_symptoms_from_line():
    p = Patient("Ana", 30)
    p.add_symptoms_from_line("fever, Cough;; sore throat ,")
    assert p.reported_symptoms == {"fever", "cough", "sore throat"}


def test_initial_symptoms_are_normalized():
    p = Patient("Ana", 30, {" Fever", "", "fever"})
    assert p.reported_symptoms == {"fever"}


def test_non_integer_age_raises():
    with pytest.raises(ValueError):
        Patient("Ana", "thirty")


@pytest.mark.parametrize(
    "raw, expected",
    [("42", 42), (" 7 ", 7), ("abc", 0), ("", 0), (None, 0), ("-3", 0), ("4.5", 0), (30.0, 30), (float("nan"), 0)],
)
def test_parse_age(raw, expected):
    assert parse_age(raw) == expected


@pytest.mark.parametrize("raw, expected", [("  Bob ", "Bob"), ("", "Unknown"), ("   ", "Unknown"), (None, "Unknown")])
def test_parse_patient_name(raw, expected):
    assert parse_patient_name(raw) == expected
