import logging
from datetime import datetime, timezone
from pathlib import Path

from insight_notes.llm.config import LlmConfig, get_llm_config, save_llm_config
from insight_notes.llm.gateway import LlmGateway
from insight_notes.notes.config import NotesConfig, get_notes_config
from insight_notes.notes.extract import InputMode, NoteExtractor
from insight_notes.rag.config import RagConfig, get_rag_config
from insight_notes.rag.indexing import EmbeddingIndexer
from insight_notes.rag.retrieval import RelatedNotesSearch, render_map_of_content, update_map_of_content
from insight_notes.rag.store import EmbeddingStore
from insight_notes.vault.document import VaultDocument
from insight_notes.vault.local import LocalVault

logger = logging.getLogger(__name__)

ALLOWED_MODES = {mode.value for mode in InputMode}


class InsightService:
    def __init__(
        self,
        vault_root: str | Path,
        llm_config: LlmConfig | None = None,
        notes_config: NotesConfig | None = None,
        rag_config: RagConfig | None = None,
        gateway: LlmGateway | None = None,
        persist_config: bool = False,
    ) -> None:
        self.vault = LocalVault(vault_root)
        self.llm_config = llm_config if llm_config is not None else get_llm_config()
        self.notes_config = notes_config if notes_config is not None else get_notes_config()
        self.rag_config = rag_config if rag_config is not None else get_rag_config()
        self.gateway = gateway if gateway is not None else LlmGateway(self.llm_config)
        self._persist_config = persist_config

        self.extractor = NoteExtractor(self.gateway, self.vault, self.llm_config, self.notes_config)
        self.store = EmbeddingStore(self.vault, self.rag_config.embedding_location)
        self.indexer = EmbeddingIndexer(
            self.vault,
            self.store,
            self.gateway,
            self.rag_config.source_notes_location,
        )
        self.search = RelatedNotesSearch(
            self.store,
            self.gateway,
            threshold=self.rag_config.similar_threshold,
            metric=self.rag_config.similarity_metric,
        )

    def health(self) -> dict:
        return {"status": "ok"}

    def _document_from_payload(self, payload: dict) -> VaultDocument:
        document_path = payload.get("document_path")
        if not isinstance(document_path, str) or not document_path.strip():
            raise ValueError("document_path is required")
        selection = payload.get("selection")
        if selection is not None and not isinstance(selection, str):
            raise ValueError("selection must be a string")
        return VaultDocument(self.vault, document_path, selection=selection)

    def extract_notes(self, payload: dict) -> dict:
        mode = payload.get("mode", InputMode.FULL_CONTENT.value)
        if mode not in ALLOWED_MODES:
            allowed = ", ".join(sorted(ALLOWED_MODES))
            raise ValueError(f"mode is invalid: got {mode!r}; allowed values: {allowed}")
        document = self._document_from_payload(payload)

        report = self.extractor.extract_notes(document, InputMode(mode))
        return report.to_dict()

    def update_map_of_content(self, payload: dict) -> dict:
        document = self._document_from_payload(payload)
        results = update_map_of_content(document, self.indexer, self.search)
        return {
            "document_path": document.path,
            "related": [result.to_dict() for result in results],
            "inserted": render_map_of_content(results),
        }

    def test_api_key(self) -> dict:
        self.gateway.check_api_key()
        tested_at = datetime.now(timezone.utc).isoformat()
        self.llm_config.api_key_tested_at = tested_at
        if self._persist_config:
            save_llm_config(self.llm_config)
        return {"status": "ok", "model": self.llm_config.llm_model, "tested_at": tested_at}
