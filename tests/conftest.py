import pytest

from smarthealth.disease import Disease
from smarthealth.engine import DiagnosisEngine

DISEASE_LINES = [
    "Flu,fever;cough;headache;sore throat",
    "Common Cold,cough|sneezing|runny nose",
    "Chronic:Diabetes,fatigue;increased thirst,frequent urination",
    "Migraine,headache;nausea;sensitivity to light",
]


@pytest.fixture
def flu() -> Disease:
    return Disease("Flu", ["fever", "cough", "headache", "sore throat"])


@pytest.fixture
def common_cold() -> Disease:
    return Disease("Common Cold", ["cough", "sneezing", "runny nose"])


@pytest.fixture
def disease_file(tmp_path) -> str:
    """
    A small disease list on disk, including a blank and a malformed line.
    """
    path = tmp_path / "disease_symptoms.csv"
    path.write_text("\n".join(DISEASE_LINES[:2] + ["", "no separator here"] + DISEASE_LINES[2:]) + "\n",
                    encoding="utf-8")
    return str(path)


@pytest.fixture
def engine() -> DiagnosisEngine:
    e = DiagnosisEngine()
    e.load_lines(DISEASE_LINES)
    return e
