DEFAULT_SYSTEM_ROLE = """Instructions: Summarize the provided text into {{number_of_notes}} standalone atomic notes, emphasizing quantitative data and key themes. Each note should start with a summary sentence, followed by detailed data.

Answer format is a JSON array of objects: [{"title": "note title", "body": "note body", "tags": ["tag"], "properties": {"name": "value"}}]

Guidelines:
- Each note carries {{number_of_tags}} relevant tags for categorization.
- The 'title' succinctly captures the key theme of the note and must be usable as a file name.
- The 'body' elaborates on the summary with quantitative and thematic details. Keep it within 70 words.
- Fill 'properties' with these keys when they apply: {{properties}}. Use null for a property you cannot fill.
- Write the notes in this language: {{language}}. "same" means the language of the provided text.

Only return the final JSON array."""

DEFAULT_PROMPT_TEMPLATE = "{{input}}"


def build_system_prompt(
    system_role: str,
    notes_quantity: str,
    tags_quantity: str,
    language: str,
    properties: str,
) -> str:
    return (
        system_role.replace("{{number_of_notes}}", str(notes_quantity))
        .replace("{{number_of_tags}}", str(tags_quantity))
        .replace("{{language}}", language)
        .replace("{{properties}}", properties)
    )


def build_user_prompt(template: str, text: str) -> str:
    return template.replace("{{input}}", text)
