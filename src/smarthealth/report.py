"""
Rendering of diagnosis results, as console text or as a DataFrame for batch runs.
"""

import typing

import pandas as pd

from .diagnosis import Diagnosis
from .patient import Patient

BANNER = "=== SMART HEALTH DIAGNOSIS ASSISTANT ==="
NO_MATCH_MESSAGE = "No likely matches found. Please consult a doctor."
DISCLAIMER = "Disclaimer: This tool is for educational purposes only. Not a medical diagnostic system."

RESULT_COLUMNS = ["patient", "age", "rank", "disease", "score", "chronic"]


def format_patient_info(patient: Patient) -> list[str]:
    symptoms = ", ".join(sorted(patient.reported_symptoms))
    return [
        "--- Patient Info ---",
        f"Name: {patient.name}",
        f"Age: {patient.age}",
        f"Symptoms: [{symptoms}]",
    ]


def format_diagnoses(diagnoses: typing.Sequence[Diagnosis]) -> list[str]:
    lines = ["--- Possible Diagnoses ---"]
    if not diagnoses:
        lines.append(NO_MATCH_MESSAGE)
    else:
        lines.extend(f"→ {diagnosis}" for diagnosis in diagnoses)
    return lines


def diagnoses_to_frame(
    results: typing.Iterable[tuple[Patient, typing.Sequence[Diagnosis]]]
) -> pd.DataFrame:
    """
    Flatten per-patient results into one row per diagnosis.
    A patient without matches still gets a single row with an empty disease and score 0.0.
    """
    rows: list[dict[str, typing.Any]] = []
    for patient, diagnoses in results:
        if not diagnoses:
            rows.append({"patient": patient.name, "age": patient.age, "rank": 0,
                         "disease": "", "score": 0.0, "chronic": False})
            continue
        for rank, diagnosis in enumerate(diagnoses, start=1):
            rows.append({
                "patient": patient.name,
                "age": patient.age,
                "rank": rank,
                "disease": diagnosis.disease.name,
                "score": round(diagnosis.score, 2),
                "chronic": diagnosis.disease.is_chronic,
            })
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)
