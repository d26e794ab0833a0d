from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator


class LookupRequest(BaseModel):
    """Inbound lookup: a profile URL, a bare username, or both."""

    url: str | None = None
    username: str | None = None

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    @model_validator(mode="after")
    def _require_reference(self) -> "LookupRequest":
        if not (self.url or self.username):
            raise ValueError("Either url or username must be provided")
        return self

    @classmethod
    def from_text(cls, text: str) -> "LookupRequest":
        """Free-form input goes through URL resolution, which also accepts bare handles."""
        return cls(url=text)
