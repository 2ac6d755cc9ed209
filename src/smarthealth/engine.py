"""
Diagnosis engine.

Owns the loaded disease records and ranks them against a patient's reported
symptoms.
"""

import logging
import pathlib
import typing

from stairval.notepad import Notepad

from .diagnosis import Diagnosis
from .disease import Disease
from .loader import read_disease_file, read_disease_lines
from .patient import Patient

LOGGER = logging.getLogger(__name__)

DEFAULT_TOP_N = 5

# Built-in dataset used when the disease file cannot be loaded
SAMPLE_DISEASES: tuple[Disease, ...] = (
    Disease("Flu", ["fever", "cough", "headache", "sore throat"]),
    Disease("Common Cold", ["cough", "sneezing", "runny nose"]),
    Disease.chronic_variant("Diabetes", ["fatigue", "increased thirst", "frequent urination"], 24),
)


class DiagnosisEngine:
    """
    Scores every stored disease against a patient and returns the best matches.

    Disease order is insertion order; it decides the order of equal scores.
    """

    def __init__(self, diseases: typing.Optional[typing.Iterable[Disease]] = None):
        self._diseases: list[Disease] = list(diseases) if diseases is not None else []

    @property
    def diseases(self) -> tuple[Disease, ...]:
        return tuple(self._diseases)

    def __len__(self) -> int:
        return len(self._diseases)

    def add_disease(self, disease: Disease) -> None:
        if not isinstance(disease, Disease):
            raise TypeError(f"Expected a Disease, got {type(disease).__name__}")
        self._diseases.append(disease)

    def extend(self, diseases: typing.Iterable[Disease]) -> None:
        for disease in diseases:
            self.add_disease(disease)

    def load_lines(self, lines: typing.Iterable[str], notepad: typing.Optional[Notepad] = None) -> int:
        """Parse disease records from text lines; returns how many were added."""
        diseases = read_disease_lines(lines, notepad)
        self.extend(diseases)
        return len(diseases)

    def load_file(
        self, path: typing.Union[str, pathlib.Path], notepad: typing.Optional[Notepad] = None
    ) -> int:
        """
        Load disease records from a file; returns how many were added.
        Read errors propagate and leave the engine untouched.
        """
        diseases = read_disease_file(path, notepad)
        self.extend(diseases)
        return len(diseases)

    def load_sample_data(self) -> int:
        self.extend(SAMPLE_DISEASES)
        LOGGER.info("Loaded %d built-in sample diseases", len(SAMPLE_DISEASES))
        return len(SAMPLE_DISEASES)

    def diagnose(self, patient: Patient, top_n: int = DEFAULT_TOP_N) -> list[Diagnosis]:
        """
        Rank diseases by match score against the patient's reported symptoms.

        Only diseases scoring above zero are returned, highest score first,
        at most `top_n` of them. An empty list means nothing matched.
        """
        if top_n < 0:
            raise ValueError(f"top_n must not be negative, got {top_n}")

        results: list[Diagnosis] = []
        for disease in self._diseases:
            score = disease.match_score(patient.reported_symptoms)
            if score > 0:
                results.append(Diagnosis(disease, score))

        results = sorted(results, key=Diagnosis.sort_key)
        LOGGER.debug("%d of %d diseases matched for %r", len(results), len(self._diseases), patient.name)
        return results[:top_n]
