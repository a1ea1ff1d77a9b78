import re
from dataclasses import dataclass, field
from typing import Any

from insight_notes.errors import InvalidNoteRecordError

UNSAFE_TITLE_CHARS = re.compile(r'[\\/:*?"<>|\r\n\t]')


@dataclass(frozen=True)
class NoteRecord:
    title: str
    body: str = ""
    tags: list[str] = field(default_factory=list)
    properties: dict[str, Any] = field(default_factory=dict)


def sanitize_title(title: str) -> str:
    return UNSAFE_TITLE_CHARS.sub("-", title).strip()


def parse_note_records(payload: list[Any]) -> list[NoteRecord]:
    """Validate every element before any of them is used."""
    records: list[NoteRecord] = []
    for index, candidate in enumerate(payload):
        try:
            records.append(_validate_record(candidate))
        except ValueError as error:
            raise InvalidNoteRecordError(f"note[{index}]: {error}") from error
    return records


def _validate_record(candidate: object) -> NoteRecord:
    if not isinstance(candidate, dict):
        raise ValueError("each note must be an object")

    title = candidate.get("title")
    if not isinstance(title, str) or not title.strip():
        raise ValueError("title must be a non-empty string")
    safe_title = sanitize_title(title)

    body = candidate.get("body")
    if body is None:
        body = ""
    if not isinstance(body, str):
        raise ValueError("body must be a string")

    tags = candidate.get("tags")
    if tags is None:
        tags = []
    if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
        raise ValueError("tags must be a list of strings")

    properties = candidate.get("properties")
    if properties is None:
        properties = {}
    if not isinstance(properties, dict):
        raise ValueError("properties must be an object")

    return NoteRecord(title=safe_title, body=body, tags=list(tags), properties=dict(properties))
