from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


@dataclass(frozen=True)
class Settings:
    rapid_api_key: str | None
    rapid_api_host: str

    http_timeout_seconds: int

    log_level: str

    # Core/runtime
    run_env: str


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    return Settings(
        rapid_api_key=os.getenv("RAPID_API_KEY") or None,
        rapid_api_host=os.getenv("RAPID_API_HOST", "real-time-people-company-data.p.rapidapi.com"),
        http_timeout_seconds=int(os.getenv("HTTP_TIMEOUT_SECONDS", "20")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
    )
