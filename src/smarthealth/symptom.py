"""
Symptom domain model.

Defines the Symptom value plus the normalization helpers every other model
uses for symptom labels.
"""

import re
import typing
from dataclasses import dataclass, field

# Separators
_PATIENT_LINE_SEPARATORS = re.compile(r"[,;]")

SEVERITY_MIN = 0
SEVERITY_MAX = 10


def normalize_symptom(raw: typing.Optional[str]) -> str:
    """
    Trim and lower-case a raw symptom label.
    `None` and whitespace-only input normalize to the empty string.
    """
    if raw is None:
        return ""
    return str(raw).strip().lower()


def normalize_symptoms(raw_symptoms: typing.Iterable[typing.Optional[str]]) -> set[str]:
    """Normalize a collection of labels into a set, dropping blanks."""
    normalized = (normalize_symptom(s) for s in raw_symptoms)
    return {s for s in normalized if s}


def split_symptom_line(line: typing.Optional[str]) -> list[str]:
    """
    Split a patient-entered symptom line on ',' or ';'.
    Tokens are returned raw; callers normalize them.
    """
    if not line:
        return []
    return _PATIENT_LINE_SEPARATORS.split(line)


@dataclass(frozen=True)
class Symptom:
    """
    A patient-reported symptom.

    Attributes:
        name: Normalized label (trimmed, lower-cased).
        severity: Informational severity, clamped to 0..10. Not used in scoring.
    """

    name: str
    severity: int = field(default=0, compare=False)

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise TypeError(f"Symptom name must be a string, got {type(self.name).__name__}")
        # bool is an int subclass; reject it explicitly
        if isinstance(self.severity, bool) or not isinstance(self.severity, int):
            raise ValueError(f"severity must be an integer, got {self.severity!r}")

        object.__setattr__(self, "name", normalize_symptom(self.name))
        object.__setattr__(self, "severity", max(SEVERITY_MIN, min(SEVERITY_MAX, self.severity)))

    def __str__(self) -> str:
        return self.name + (f" (sev:{self.severity})" if self.severity > 0 else "")
