from __future__ import annotations

from pathlib import Path


class VaderError(Exception):
    """Base class for lexicon and parsing failures."""


class ResourceMissingError(VaderError, FileNotFoundError):
    def __init__(self, resource: str | Path, hint: str = "") -> None:
        self.resource = str(resource)
        message = f"{self.resource} not found"
        if hint:
            message = f"{message} ({hint})"
        super().__init__(message)


class MalformedEntryError(VaderError, ValueError):
    def __init__(self, resource: str | Path, line_number: int, line: str) -> None:
        self.resource = str(resource)
        self.line_number = line_number
        self.line = line
        super().__init__(f"{self.resource}:{line_number}: unparsable value in {line!r}")


class TokenizationError(VaderError, ValueError):
    """Raised when the tagger returns a different number of tags than tokens."""
