from insight_notes.vault import VaultFile, VaultStorage

FRONT_MATTER_DELIMITER = "---"


def split_front_matter(text: str) -> tuple[str, str]:
    """Split ``text`` into (front matter block, remainder).

    The block includes both ``---`` delimiter lines and the trailing newline.
    Text without a closed block returns ("", text).
    """
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip("\r\n") != FRONT_MATTER_DELIMITER:
        return "", text
    for index in range(1, len(lines)):
        if lines[index].rstrip("\r\n") == FRONT_MATTER_DELIMITER:
            block = "".join(lines[: index + 1])
            if not block.endswith("\n"):
                block += "\n"
            return block, "".join(lines[index + 1 :])
    return "", text


class VaultDocument:
    """The note currently being worked on, backed by a vault file.

    ``selection`` stands in for the editor selection the host would supply.
    """

    def __init__(self, vault: VaultStorage, path: str, selection: str | None = None):
        self.vault = vault
        self.path = path
        self.selection = selection

    def get_selection(self) -> str | None:
        return self.selection

    def get_content(self) -> str | None:
        if not self.vault.exists(self.path):
            return None
        _, body = split_front_matter(self.vault.read_text(self.path))
        return body

    def get_title(self) -> str | None:
        title = VaultFile(path=self.path).basename
        return title or None

    def insert_at_top(self, text: str) -> None:
        current = self.vault.read_text(self.path) if self.vault.exists(self.path) else ""
        front_matter, body = split_front_matter(current)
        self.vault.write_text(self.path, f"{front_matter}{text}\n{body}")
