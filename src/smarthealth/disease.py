"""
Disease domain model.

Defines the Disease record used by the diagnosis engine. Chronic diseases are
the same record carrying a ChronicInfo annotation; scoring ignores it.
"""

import typing
from dataclasses import dataclass, field

from .symptom import normalize_symptom, normalize_symptoms


@dataclass(frozen=True)
class ChronicInfo:
    """
    Extra metadata for the chronic variant of a disease.

    Attributes:
        typical_duration_months: Typical duration, never negative.
    """

    typical_duration_months: int = 0

    def __post_init__(self):
        if isinstance(self.typical_duration_months, bool) or not isinstance(self.typical_duration_months, int):
            raise ValueError(
                f"typical_duration_months must be an integer, got {self.typical_duration_months!r}"
            )
        object.__setattr__(self, "typical_duration_months", max(0, self.typical_duration_months))


@dataclass(frozen=True)
class Disease:
    """
    Represents a disease and the symptoms it is expected to present with.

    Attributes:
        name: Disease name, trimmed with case preserved (e.g. 'Common Cold').
        expected_symptoms: Normalized symptom labels; any iterable of raw
            strings is accepted and normalized on construction.
        chronic: Present only for the chronic variant.
    """

    name: str
    expected_symptoms: typing.FrozenSet[str] = field(default_factory=frozenset)
    chronic: typing.Optional[ChronicInfo] = None

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise TypeError(f"Disease name must be a string, got {type(self.name).__name__}")
        if isinstance(self.expected_symptoms, str):
            raise TypeError("expected_symptoms must be a collection of labels, not a single string")

        object.__setattr__(self, "name", self.name.strip())
        object.__setattr__(self, "expected_symptoms", frozenset(normalize_symptoms(self.expected_symptoms)))

    @classmethod
    def chronic_variant(
        cls, name: str, symptoms: typing.Iterable[str], typical_duration_months: int
    ) -> "Disease":
        return cls(name, symptoms, ChronicInfo(typical_duration_months))

    @property
    def is_chronic(self) -> bool:
        return self.chronic is not None

    @property
    def typical_duration_months(self) -> typing.Optional[int]:
        return self.chronic.typical_duration_months if self.chronic else None

    def match_score(self, reported_symptoms: typing.Iterable[typing.Optional[str]]) -> float:
        """
        Fraction of this disease's expected symptoms that were reported.

        The denominator is the number of expected symptoms, so reported
        symptoms outside that set neither raise nor lower the score.
        A disease without expected symptoms scores 0.0.
        """
        if not self.expected_symptoms:
            return 0.0
        reported = {normalize_symptom(s) for s in reported_symptoms if s is not None}
        matched = len(reported & self.expected_symptoms)
        return matched / len(self.expected_symptoms)

    def __str__(self) -> str:
        symptoms = ", ".join(sorted(self.expected_symptoms))
        text = f"{self.name} -> [{symptoms}]"
        if self.chronic:
            text += f" [chronic=True, durationMonths={self.chronic.typical_duration_months}]"
        return text
