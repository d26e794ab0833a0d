from __future__ import annotations

from typing import Any, Dict

from pipelines.errors import MissingProfileHandle
from pipelines.runner import RunContext
from services.profile_normalizer import normalize


def unwrap_payload(payload: Any) -> Any:
    """Accept both a bare profile object and a ``{"data": {...}}`` envelope."""
    if isinstance(payload, dict) and "username" not in payload and isinstance(payload.get("data"), dict):
        return payload["data"]
    return payload


class NormalizeProfile:
    name = "normalize_profile"

    def __init__(self, require_handle: bool = True) -> None:
        self.require_handle = require_handle

    def run(self, ctx: RunContext) -> RunContext:
        doc: Dict[str, Any] = unwrap_payload(ctx.raw)
        ctx.raw = doc
        display = normalize(doc)
        if self.require_handle and not display.handle:
            raise MissingProfileHandle(
                f"Upstream profile for {ctx.handle or 'input'} has no username"
            )
        ctx.display = display
        return ctx
