from __future__ import annotations


INVALID_REFERENCE_MESSAGE = "Invalid LinkedIn URL or username for a personal profile"


class InvalidProfileReference(ValueError):
    """User input does not reference a personal LinkedIn profile."""

    def __init__(self, text: str | None = None, message: str = INVALID_REFERENCE_MESSAGE):
        super().__init__(message)
        self.text = text


class MissingProfileHandle(ValueError):
    """Upstream answered, but the document carries no profile handle."""
