from __future__ import annotations

from typing import Any, Dict, Optional

from models.lookup_request import LookupRequest
from pipelines.runner import Pipeline, RunContext
from pipelines.steps import FetchProfile, NormalizeProfile, ResolveHandle
from services.profile_client import ProfileClient


def lookup_profile(request: LookupRequest, client: Optional[ProfileClient] = None) -> RunContext:
    """Resolve the request to a handle, fetch the profile once and normalize it.

    Raises InvalidProfileReference before any network call when the input is
    not a personal profile reference.
    """
    ctx = RunContext(query=request.url, username=request.username)
    pipeline = Pipeline([
        ResolveHandle(),
        FetchProfile(client),
        NormalizeProfile(),
    ])
    return pipeline.run(ctx)


def normalize_saved_payload(payload: Dict[str, Any]) -> RunContext:
    """Normalize a previously fetched payload without touching the network."""
    ctx = RunContext(raw=payload)
    pipeline = Pipeline([NormalizeProfile(require_handle=False)])
    return pipeline.run(ctx)
