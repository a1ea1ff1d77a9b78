import logging

from insight_notes.errors import ApiKeyMissingError
from insight_notes.llm.gateway import LlmGateway
from insight_notes.rag.indexing import EmbeddingIndexer
from insight_notes.rag.similarity import SimilarityResult, get_scorer
from insight_notes.rag.store import EmbeddingStore
from insight_notes.vault.document import VaultDocument

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.76


class RelatedNotesSearch:
    def __init__(
        self,
        store: EmbeddingStore,
        gateway: LlmGateway,
        threshold: float = DEFAULT_THRESHOLD,
        metric: str = "dot",
    ):
        self.store = store
        self.gateway = gateway
        self.threshold = threshold
        self.scorer = get_scorer(metric)

    def rank(self, query_vector: list[float], note_ids: list[str] | None = None) -> list[SimilarityResult]:
        """Score every stored embedding, keeping those above the threshold.

        Results keep the store's listing order.
        """
        if note_ids is None:
            note_ids = self.store.list_ids()
        results = []
        for note_id in note_ids:
            score = self.scorer(query_vector, self.store.read(note_id))
            logger.debug("[[%s]] scored %.4f", note_id, score)
            if score > self.threshold:
                results.append(SimilarityResult(note_id=note_id, score=score))
        return results

    def search_related_notes(self, topic: str) -> list[SimilarityResult]:
        note_ids = self.store.list_ids()
        if not note_ids:
            return []
        query_vector = self.gateway.embed(topic)
        return self.rank(query_vector, note_ids)


def render_map_of_content(results: list[SimilarityResult]) -> str:
    return "\n\n".join(f"[[{result.note_id}]]" for result in results)


def update_map_of_content(
    document: VaultDocument,
    indexer: EmbeddingIndexer,
    search: RelatedNotesSearch,
) -> list[SimilarityResult]:
    if not search.gateway.has_api_key():
        raise ApiKeyMissingError()

    title = document.get_title()
    if not title:
        raise ValueError("Unable to retrieve title")

    indexer.save_embeddings()
    results = search.search_related_notes(title)
    if results:
        document.insert_at_top(render_map_of_content(results))
    logger.info("Map of content for %s: %d related notes", title, len(results))
    return results
