"""
Patient domain model.

Defines the Patient record that accumulates reported symptoms for one
diagnosis session, plus the parsing rules for raw name/age input.
"""

import typing
from dataclasses import dataclass, field

from .symptom import Symptom, normalize_symptom, split_symptom_line

UNKNOWN_PATIENT_NAME = "Unknown"


def parse_patient_name(raw: typing.Optional[str]) -> str:
    """Trimmed name, or 'Unknown' when nothing usable was entered."""
    name = (raw or "").strip()
    return name if name else UNKNOWN_PATIENT_NAME


def parse_age(raw: typing.Any) -> int:
    """
    Parse an age entry.
    Anything that is not a non-negative integer yields 0.
    """
    if raw is None or isinstance(raw, bool):
        return 0
    if isinstance(raw, float):
        # pandas hands back floats (and NaN) for numeric columns
        if raw != raw or not raw.is_integer():
            return 0
        raw = int(raw)
    try:
        age = int(str(raw).strip())
    except ValueError:
        return 0
    return age if age >= 0 else 0


@dataclass
class Patient:
    """
    Represents one patient and the symptoms they report.

    Attributes:
        name: Patient name as entered.
        age: Age in years.
        reported_symptoms: Normalized symptom labels (set semantics).
    """

    name: str
    age: int = 0
    reported_symptoms: set[str] = field(default_factory=set)

    def __post_init__(self):
        if isinstance(self.age, bool) or not isinstance(self.age, int):
            raise ValueError(f"age must be an integer, got {self.age!r}")
        # normalize anything passed in at construction time
        initial = list(self.reported_symptoms)
        self.reported_symptoms = set()
        for symptom in initial:
            self.add_symptom(symptom)

    def add_symptom(self, symptom: typing.Union[str, Symptom, None]) -> None:
        """Add one symptom; blank or missing input is ignored."""
        if isinstance(symptom, Symptom):
            label = symptom.name
        else:
            label = normalize_symptom(symptom)
        if label:
            self.reported_symptoms.add(label)

    def add_symptoms_from_line(self, line: typing.Optional[str]) -> None:
        """Add every symptom of a ',' or ';' separated line."""
        for token in split_symptom_line(line):
            self.add_symptom(token)
