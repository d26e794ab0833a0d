from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol

from models.display_model import DisplayModel
from utils.logging_setup import init_logging


@dataclass
class RunContext:
    query: Optional[str] = None
    username: Optional[str] = None
    handle: Optional[str] = None
    raw: Optional[Dict[str, Any]] = None
    display: Optional[DisplayModel] = None
    run_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    meta: dict = field(default_factory=dict)


class Step(Protocol):
    name: str

    def run(self, ctx: RunContext) -> RunContext:
        ...


class Pipeline:
    def __init__(self, steps: List[Step]):
        self.steps = steps

    def run(self, ctx: RunContext) -> RunContext:
        # Make logging idempotent for any direct runner use
        init_logging()
        for step in self.steps:
            name = getattr(step, "name", type(step).__name__)
            started = time.monotonic()
            try:
                ctx = step.run(ctx)
            except Exception as e:
                logging.error(
                    f"Step {name} failed",
                    extra={
                        "step": name,
                        "status": "error",
                        "error": type(e).__name__,
                        "handle": ctx.handle or "-",
                        "run_id": ctx.run_id,
                    },
                )
                raise
            logging.debug(
                f"Step {name} done",
                extra={
                    "step": name,
                    "status": "ok",
                    "duration_ms": int((time.monotonic() - started) * 1000),
                    "handle": ctx.handle or "-",
                    "run_id": ctx.run_id,
                },
            )
        return ctx
