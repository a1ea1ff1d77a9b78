import logging
from typing import Any

from insight_notes.errors import InsightNotesError
from insight_notes.llm.gateway import LlmGateway
from insight_notes.rag.store import EmbeddingStore
from insight_notes.vault import VaultFile, VaultStorage, join_path

logger = logging.getLogger(__name__)


def build_embedding_input(title: str, content: str) -> str:
    return f"{title}{content}"


class EmbeddingIndexer:
    def __init__(
        self,
        vault: VaultStorage,
        store: EmbeddingStore,
        gateway: LlmGateway,
        source_location: str,
    ):
        self.vault = vault
        self.store = store
        self.gateway = gateway
        self.source_location = source_location

    def _collect_markdown_files(self) -> list[VaultFile]:
        prefix = join_path(self.source_location, "")
        return [f for f in self.vault.list_files(prefix) if f.extension == "md"]

    def save_embeddings(self) -> dict[str, Any]:
        files = self._collect_markdown_files()
        logger.info("Total files count: %d", len(files))
        embedded = 0
        skipped = 0
        failed = 0

        for file in files:
            note_id = file.basename
            if self.store.exists(note_id):
                logger.debug("Embedding already exists for %s, skipping", file.name)
                skipped += 1
                continue

            logger.info("Embed new file: %s", note_id)
            try:
                content = self.vault.read_text(file.path)
                vector = self.gateway.embed(build_embedding_input(note_id, content))
                self.store.write(note_id, vector)
            except (InsightNotesError, OSError, UnicodeDecodeError) as error:
                logger.error("Failed to embed %s: %s", file.path, error)
                failed += 1
                continue
            embedded += 1

        return {
            "files_seen": len(files),
            "embedded": embedded,
            "skipped": skipped,
            "failed": failed,
        }
