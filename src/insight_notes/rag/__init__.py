from insight_notes.rag.config import RagConfig, get_rag_config
from insight_notes.rag.indexing import EmbeddingIndexer
from insight_notes.rag.retrieval import RelatedNotesSearch, render_map_of_content, update_map_of_content
from insight_notes.rag.similarity import SimilarityResult, cosine_similarity, dot_product
from insight_notes.rag.store import EmbeddingStore

__all__ = [
    "RagConfig",
    "get_rag_config",
    "EmbeddingIndexer",
    "RelatedNotesSearch",
    "render_map_of_content",
    "update_map_of_content",
    "SimilarityResult",
    "cosine_similarity",
    "dot_product",
    "EmbeddingStore",
]
