import os
from dataclasses import dataclass

ALLOWED_METRICS = {"dot", "cosine"}


@dataclass(frozen=True)
class RagConfig:
    embedding_location: str = "Embeddings/"
    source_notes_location: str = "Cards/"
    similar_threshold: float = 0.76
    similarity_metric: str = "dot"


def get_rag_config() -> RagConfig:
    metric = os.getenv("INSIGHT_NOTES_SIMILARITY_METRIC", "dot")
    if metric not in ALLOWED_METRICS:
        allowed = ", ".join(sorted(ALLOWED_METRICS))
        raise ValueError(f"similarity metric must be one of: {allowed}")

    return RagConfig(
        embedding_location=os.getenv("INSIGHT_NOTES_EMBEDDING_LOCATION", "Embeddings/"),
        source_notes_location=os.getenv("INSIGHT_NOTES_SOURCE_LOCATION", "Cards/"),
        similar_threshold=float(os.getenv("INSIGHT_NOTES_SIMILAR_THRESHOLD", "0.76")),
        similarity_metric=metric,
    )
