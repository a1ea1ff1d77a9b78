class InsightNotesError(Exception):
    """Base class for every failure raised by insight_notes."""


class ApiKeyMissingError(InsightNotesError):
    def __init__(self) -> None:
        super().__init__("No API key configured")


class ApiError(InsightNotesError):
    def __init__(self, status_code: int | None, message: str = "") -> None:
        self.status_code = status_code
        if status_code is None:
            text = f"API call error: {message}" if message else "API call error"
        else:
            text = f"API call error: {status_code}"
            if message:
                text = f"{text}: {message}"
        super().__init__(text)


class MalformedResponseError(InsightNotesError):
    pass


class UnexpectedSchemaError(InsightNotesError):
    pass


class InvalidJsonFormatError(InsightNotesError, ValueError):
    pass


class InvalidNoteRecordError(InsightNotesError, ValueError):
    pass


class NoInputError(InsightNotesError, ValueError):
    pass


class DimensionMismatchError(InsightNotesError, ValueError):
    def __init__(self, left: int, right: int) -> None:
        self.left = left
        self.right = right
        super().__init__(f"vector dimensions differ: {left} != {right}")


class FileWriteError(InsightNotesError, OSError):
    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to create note at {path}: {reason}")


class CorruptEmbeddingError(InsightNotesError):
    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"embedding file {path} {reason}")
