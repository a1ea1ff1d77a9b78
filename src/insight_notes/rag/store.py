import json

from insight_notes.errors import CorruptEmbeddingError
from insight_notes.vault import VaultStorage, join_path

EMBEDDING_EXTENSION = "json"


class EmbeddingStore:
    """One JSON file per note, holding a bare array of floats."""

    def __init__(self, vault: VaultStorage, location: str):
        self.vault = vault
        self.location = location

    def path_for(self, note_id: str) -> str:
        return join_path(self.location, f"{note_id}.{EMBEDDING_EXTENSION}")

    def exists(self, note_id: str) -> bool:
        return self.vault.exists(self.path_for(note_id))

    def read(self, note_id: str) -> list[float]:
        path = self.path_for(note_id)
        try:
            vector = json.loads(self.vault.read_text(path))
        except json.JSONDecodeError as error:
            raise CorruptEmbeddingError(path, "is not valid JSON") from error

        if not isinstance(vector, list) or any(
            isinstance(v, bool) or not isinstance(v, (int, float)) for v in vector
        ):
            raise CorruptEmbeddingError(path, "must contain a JSON array of numbers")
        return [float(v) for v in vector]

    def write(self, note_id: str, vector: list[float]) -> None:
        self.vault.write_text(self.path_for(note_id), json.dumps(vector))

    def list_ids(self) -> list[str]:
        """Ids of embedding files directly under the location; subfolders are ignored."""
        prefix = join_path(self.location, "")
        return [
            f.basename
            for f in self.vault.list_files(prefix)
            if f.extension == EMBEDDING_EXTENSION and f.path == self.path_for(f.basename)
        ]
