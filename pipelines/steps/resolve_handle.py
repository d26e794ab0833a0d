from __future__ import annotations

from pipelines.errors import InvalidProfileReference
from pipelines.runner import RunContext
from services.handle_resolver import extract_linkedin_username, is_likely_username


class ResolveHandle:
    name = "resolve_handle"

    def run(self, ctx: RunContext) -> RunContext:
        handle = None
        # An explicit username wins when it already looks like a handle
        if ctx.username and is_likely_username(ctx.username):
            handle = ctx.username.strip()
        elif ctx.query:
            handle = extract_linkedin_username(ctx.query)
        if not handle:
            raise InvalidProfileReference(ctx.query or ctx.username)
        ctx.handle = handle
        return ctx
