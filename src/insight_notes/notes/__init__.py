from insight_notes.notes.extract import ExtractionReport, InputMode, NoteExtractor
from insight_notes.notes.materialize import build_note_content, create_notes, format_tags, materialize
from insight_notes.notes.records import NoteRecord, parse_note_records
from insight_notes.notes.repair import parse_note_response

__all__ = [
    "ExtractionReport",
    "InputMode",
    "NoteExtractor",
    "build_note_content",
    "create_notes",
    "format_tags",
    "materialize",
    "NoteRecord",
    "parse_note_records",
    "parse_note_response",
]
