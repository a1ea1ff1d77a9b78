import os
from dataclasses import dataclass

from insight_notes.llm.prompts import DEFAULT_PROMPT_TEMPLATE, DEFAULT_SYSTEM_ROLE


@dataclass(frozen=True)
class NotesConfig:
    generated_notes_location: str = "Notes/"
    notes_quantity: str = "1"
    tags_quantity: str = "2-3"
    language_option: str = "same"
    specific_language: str = ""
    properties: str = ""
    system_role: str = DEFAULT_SYSTEM_ROLE
    prompt_template: str = DEFAULT_PROMPT_TEMPLATE

    @property
    def language(self) -> str:
        if self.language_option == "specific":
            return self.specific_language
        return self.language_option


def get_notes_config() -> NotesConfig:
    return NotesConfig(
        generated_notes_location=os.getenv("INSIGHT_NOTES_GENERATED_LOCATION", "Notes/"),
        notes_quantity=os.getenv("INSIGHT_NOTES_NOTES_QUANTITY", "1"),
        tags_quantity=os.getenv("INSIGHT_NOTES_TAGS_QUANTITY", "2-3"),
        language_option=os.getenv("INSIGHT_NOTES_LANGUAGE_OPTION", "same"),
        specific_language=os.getenv("INSIGHT_NOTES_SPECIFIC_LANGUAGE", ""),
        properties=os.getenv("INSIGHT_NOTES_PROPERTIES", ""),
    )
