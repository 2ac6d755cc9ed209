"""
Diagnosis value.

Pairs a Disease with the score it reached against one patient.
"""

from dataclasses import dataclass

from .disease import Disease


@dataclass(frozen=True)
class Diagnosis:
    """
    Represents one ranked match.

    Attributes:
        disease: The matched disease record.
        score: Fraction of expected symptoms reported, in [0, 1].
    """

    disease: Disease
    score: float

    @staticmethod
    def sort_key(diagnosis: "Diagnosis") -> float:
        # negate so an ascending stable sort ranks higher scores first
        return -diagnosis.score

    def __str__(self) -> str:
        return f"{self.disease.name} (score: {self.score:.2f})"
