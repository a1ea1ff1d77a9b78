import math
from dataclasses import dataclass

from insight_notes.errors import DimensionMismatchError


@dataclass(frozen=True)
class SimilarityResult:
    note_id: str
    score: float

    def to_dict(self) -> dict:
        return {"note_id": self.note_id, "score": self.score}


def dot_product(left: list[float], right: list[float]) -> float:
    if len(left) != len(right):
        raise DimensionMismatchError(len(left), len(right))
    return sum(a * b for a, b in zip(left, right))


def cosine_similarity(left: list[float], right: list[float]) -> float:
    dot = dot_product(left, right)
    norm = math.sqrt(dot_product(left, left)) * math.sqrt(dot_product(right, right))
    if norm == 0:
        return 0.0
    return dot / norm


SCORERS = {
    "dot": dot_product,
    "cosine": cosine_similarity,
}


def get_scorer(metric: str):
    try:
        return SCORERS[metric]
    except KeyError:
        allowed = ", ".join(sorted(SCORERS))
        raise ValueError(f"similarity metric must be one of: {allowed}") from None
