from pathlib import Path

from insight_notes.errors import FileWriteError
from insight_notes.vault import VaultFile, VaultStorage


class LocalVault(VaultStorage):
    def __init__(self, root: str | Path):
        self.root = Path(root)

    def _resolve(self, path: str) -> Path:
        safe_path = path.lstrip("/")
        resolved = (self.root / safe_path).resolve()
        if not resolved.is_relative_to(self.root.resolve()):
            raise ValueError(f"path escapes vault: {path}")
        return resolved

    def list_files(self, prefix: str = "") -> list[VaultFile]:
        if not self.root.exists():
            return []
        prefix = prefix.lstrip("/")
        files = []
        for file_path in sorted(self.root.rglob("*")):
            if not file_path.is_file():
                continue
            relative = file_path.relative_to(self.root).as_posix()
            if relative.startswith(prefix):
                files.append(VaultFile(path=relative))
        return files

    def exists(self, path: str) -> bool:
        return self._resolve(path).exists()

    def read_text(self, path: str) -> str:
        return self._resolve(path).read_text(encoding="utf-8")

    def write_text(self, path: str, text: str) -> None:
        file_path = self._resolve(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(text, encoding="utf-8")

    def create_file(self, path: str, text: str) -> None:
        file_path = self._resolve(path)
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(file_path, "x", encoding="utf-8") as f:
                f.write(text)
        except FileExistsError as error:
            raise FileWriteError(path, "file already exists") from error
        except OSError as error:
            raise FileWriteError(path, str(error)) from error
