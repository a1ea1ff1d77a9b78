from abc import ABC, abstractmethod
from dataclasses import dataclass
from posixpath import basename, splitext


@dataclass(frozen=True)
class VaultFile:
    path: str

    @property
    def name(self) -> str:
        return basename(self.path)

    @property
    def basename(self) -> str:
        return splitext(self.name)[0]

    @property
    def extension(self) -> str:
        return splitext(self.name)[1].lstrip(".")


def join_path(folder: str, name: str) -> str:
    folder = folder.strip("/")
    if not folder:
        return name
    return f"{folder}/{name}"


class VaultStorage(ABC):
    @abstractmethod
    def list_files(self, prefix: str = "") -> list[VaultFile]:
        """List files whose vault-relative path starts with prefix."""
        pass

    @abstractmethod
    def exists(self, path: str) -> bool:
        pass

    @abstractmethod
    def read_text(self, path: str) -> str:
        pass

    @abstractmethod
    def write_text(self, path: str, text: str) -> None:
        """Write text, replacing any existing file."""
        pass

    @abstractmethod
    def create_file(self, path: str, text: str) -> None:
        """Create a new file. Raises FileWriteError if it already exists."""
        pass


__all__ = ["VaultFile", "VaultStorage", "join_path"]
