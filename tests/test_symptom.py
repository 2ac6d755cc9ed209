import pytest

from smarthealth.symptom import Symptom, normalize_symptom, normalize_symptoms, split_symptom_line


@pytest.mark.parametrize(
    "raw, expected",
    [("  Fever ", "fever"), ("SORE Throat", "sore throat"), ("   ", ""), (None, "")],
)
def test_normalize_symptom(raw, expected):
    assert normalize_symptom(raw) == expected


@pytest.mark.parametrize("raw", ["  Runny Nose", "fever", "INCREASED THIRST "])
def test_normalize_symptom_is_idempotent(raw):
    once = normalize_symptom(raw)
    assert normalize_symptom(once) == once


def test_normalize_symptoms_drops_blanks_and_duplicates():
    assert normalize_symptoms(["Fever", "fever ", "", "  ", None, "Cough"]) == {"fever", "cough"}


def test_split_symptom_line_on_comma_and_semicolon():
    assert split_symptom_line("fever, cough;headache") == ["fever", " cough", "headache"]
    assert split_symptom_line("") == []
    assert split_symptom_line(None) == []


@pytest.mark.parametrize("severity, expected", [(-3, 0), (0, 0), (7, 7), (10, 10), (42, 10)])
def test_severity_is_clamped(severity, expected):
    assert Symptom("fever", severity).severity == expected


def test_symptom_name_normalized_and_equality_ignores_severity():
    a = Symptom("  Fever ", 3)
    b = Symptom("fever", 9)
    assert a.name == "fever"
    assert a == b
    assert len({a, b}) == 1


def test_symptom_str_shows_severity_only_when_positive():
    assert str(Symptom("Cough")) == "cough"
    assert str(Symptom("Cough", 4)) == "cough (sev:4)"


def test_non_integer_severity_raises():
    with pytest.raises(ValueError):
        Symptom("fever", "high")
