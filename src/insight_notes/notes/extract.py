import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from insight_notes.errors import ApiKeyMissingError, NoInputError
from insight_notes.llm.config import LlmConfig
from insight_notes.llm.gateway import LlmGateway
from insight_notes.llm.prompts import build_system_prompt, build_user_prompt
from insight_notes.notes.config import NotesConfig
from insight_notes.notes.materialize import CreationReport, create_notes
from insight_notes.notes.records import NoteRecord, parse_note_records
from insight_notes.notes.repair import parse_note_response
from insight_notes.vault import VaultStorage
from insight_notes.vault.document import VaultDocument

logger = logging.getLogger(__name__)

UNTITLED = "Untitled"


class InputMode(str, Enum):
    SELECTION = "selection"
    FULL_CONTENT = "content"


@dataclass
class ExtractionReport:
    source_title: str
    records: list[NoteRecord] = field(default_factory=list)
    creation: CreationReport = field(default_factory=CreationReport)

    def to_dict(self) -> dict[str, Any]:
        return {
            "source_title": self.source_title,
            "notes_returned": len(self.records),
            **self.creation.to_dict(),
        }


class NoteExtractor:
    def __init__(
        self,
        gateway: LlmGateway,
        vault: VaultStorage,
        llm_config: LlmConfig,
        notes_config: NotesConfig,
    ):
        self.gateway = gateway
        self.vault = vault
        self.llm_config = llm_config
        self.notes_config = notes_config

    def _get_input(self, document: VaultDocument, mode: InputMode) -> str | None:
        if mode == InputMode.SELECTION:
            return document.get_selection()
        return document.get_content()

    def system_prompt(self) -> str:
        config = self.notes_config
        return build_system_prompt(
            config.system_role,
            config.notes_quantity,
            config.tags_quantity,
            config.language,
            config.properties,
        )

    def fetch_notes(self, text: str) -> list[NoteRecord]:
        user_prompt = build_user_prompt(self.notes_config.prompt_template, text)
        raw = self.gateway.chat_complete(self.system_prompt(), user_prompt, model=self.llm_config.llm_model)
        logger.debug("Raw note response: %s", raw)
        return parse_note_records(parse_note_response(raw))

    def extract_notes(self, document: VaultDocument, mode: InputMode) -> ExtractionReport:
        if not self.llm_config.has_api_key():
            raise ApiKeyMissingError()

        text = self._get_input(document, mode)
        if not text or not text.strip():
            raise NoInputError("No input data")

        source_title = document.get_title() or UNTITLED
        records = self.fetch_notes(text)
        creation = create_notes(
            records,
            source_title,
            self.vault,
            self.notes_config.generated_notes_location,
        )
        logger.info(
            "Extracted %d notes from %s (%d failed)",
            len(records),
            source_title,
            len(creation.failed),
        )
        return ExtractionReport(source_title=source_title, records=records, creation=creation)
