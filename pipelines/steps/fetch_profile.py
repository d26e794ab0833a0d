from __future__ import annotations

from typing import Optional

from pipelines.runner import RunContext
from services.profile_client import ProfileClient


class FetchProfile:
    name = "fetch_profile"

    def __init__(self, client: Optional[ProfileClient] = None) -> None:
        # Lazy-init so resolution failures never require API credentials
        self._client = client

    def run(self, ctx: RunContext) -> RunContext:
        if self._client is None:
            self._client = ProfileClient()
        ctx.raw = self._client.fetch_profile(ctx.handle)
        ctx.meta["api_usage"] = self._client.get_api_usage()
        return ctx
