import json
import logging
import re
from typing import Any

from insight_notes.errors import InvalidJsonFormatError

logger = logging.getLogger(__name__)

FENCE_PATTERN = re.compile(r"```[A-Za-z0-9_+-]*")


def strip_code_fences(raw: str) -> str:
    return FENCE_PATTERN.sub("", raw).strip()


def split_concatenated_objects(text: str) -> list[Any]:
    """Parse ``{...}{...}`` payloads that lack a wrapping array.

    Splits on ``}``, so a ``}`` inside a string value or a nested object
    breaks the fragment and the whole payload is rejected.
    """
    fragments = [part for part in text.split("}") if part.strip()]
    parsed: list[Any] = []
    for index, fragment in enumerate(fragments):
        try:
            parsed.append(json.loads(fragment + "}"))
        except json.JSONDecodeError as error:
            raise InvalidJsonFormatError(
                f"Invalid JSON format: fragment {index} could not be parsed"
            ) from error
    return parsed


def parse_note_response(raw: str) -> list[Any]:
    text = strip_code_fences(raw)
    try:
        payload = json.loads(text)
    except json.JSONDecodeError:
        logger.debug("Response is not a single JSON value, splitting into objects")
        payload = split_concatenated_objects(text)
        if not payload:
            raise InvalidJsonFormatError("Invalid JSON format: response is empty")

    if not isinstance(payload, list):
        logger.info("Returned JSON is not an array, wrapping it")
        return [payload]
    return payload
