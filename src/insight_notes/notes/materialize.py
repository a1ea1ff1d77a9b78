import json
import logging
from dataclasses import dataclass, field
from typing import Any

from insight_notes.errors import FileWriteError
from insight_notes.notes.records import NoteRecord
from insight_notes.vault import VaultStorage, join_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MaterializedNote:
    path: str
    content: str


@dataclass
class CreationReport:
    created: list[str] = field(default_factory=list)
    failed: list[dict[str, str]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"created": list(self.created), "failed": [dict(f) for f in self.failed]}


def format_tag(tag: str) -> str:
    return tag.replace(" ", "_").lstrip("#")


def format_tags(tags: list[str]) -> str:
    return ", ".join(format_tag(tag) for tag in tags)


def _single_line(text: str) -> str:
    # A raw line break could close the front matter block early.
    if "\n" in text or "\r" in text:
        return json.dumps(text, ensure_ascii=False)
    return text


def format_property_value(value: Any) -> str:
    if isinstance(value, (list, dict)):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, bool):
        return "true" if value else "false"
    return _single_line(str(value))


def build_note_content(record: NoteRecord, source_title: str) -> str:
    lines = [
        "---",
        f'source: "[[{source_title}]]"',
        f"tags: {format_tags(record.tags)}",
    ]
    for key, value in record.properties.items():
        if value is None:
            continue
        lines.append(f"{_single_line(str(key))}: {format_property_value(value)}")
    lines.append("---")
    return "\n".join(lines) + "\n" + record.body


def materialize(record: NoteRecord, source_title: str, location: str) -> MaterializedNote:
    return MaterializedNote(
        path=join_path(location, f"{record.title}.md"),
        content=build_note_content(record, source_title),
    )


def create_notes(
    records: list[NoteRecord],
    source_title: str,
    vault: VaultStorage,
    location: str,
) -> CreationReport:
    report = CreationReport()
    for record in records:
        note = materialize(record, source_title, location)
        try:
            vault.create_file(note.path, note.content)
        except FileWriteError as error:
            logger.error("Failed to create note %s: %s", note.path, error.reason)
            report.failed.append({"title": record.title, "path": note.path, "error": error.reason})
            continue
        logger.info("Created note %s", note.path)
        report.created.append(note.path)
    return report
