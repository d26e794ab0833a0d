"""
RapidAPI people-data integration for fetching a LinkedIn profile by handle.
"""
import logging
import time
from typing import Any, Dict, Optional

import requests

from config.settings import Settings, get_settings


class ProfileFetchError(Exception):
    """Upstream request failed; status_code is None for transport errors."""

    def __init__(self, message: str, status_code: Optional[int] = None, details: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class ProfileClient:
    """Fetches raw profile documents from the upstream people-data API.

    One request per lookup: no retries, no caching. The timeout comes from
    settings.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.api_key = self.settings.rapid_api_key
        self.api_host = self.settings.rapid_api_host
        self.api_calls_made = 0

        if not self.api_key:
            raise RuntimeError("Server is not configured for LinkedIn fetch (missing RAPID_API_KEY).")

    @property
    def endpoint(self) -> str:
        return f"https://{self.api_host}/"

    def _headers(self) -> Dict[str, str]:
        return {
            'content-type': 'application/json',
            'X-RapidAPI-Key': self.api_key,
            'X-RapidAPI-Host': self.api_host,
        }

    def fetch_profile(self, handle: str) -> Dict[str, Any]:
        """Return the raw profile document for ``handle``."""
        started = time.monotonic()
        log_extra = {'step': 'fetch_profile', 'handle': handle, 'api_host': self.api_host}
        logging.info("Fetching profile", extra=log_extra)
        try:
            response = requests.get(
                self.endpoint,
                params={'username': handle},
                headers=self._headers(),
                timeout=self.settings.http_timeout_seconds,
            )
        except requests.exceptions.RequestException as e:
            logging.error("Profile request failed", extra={**log_extra, 'status': 'error', 'error': type(e).__name__})
            raise ProfileFetchError("Failed to fetch LinkedIn profile data", details=str(e)) from e
        finally:
            self.api_calls_made += 1

        duration_ms = int((time.monotonic() - started) * 1000)
        if not response.ok:
            details = response.text or f"Status {response.status_code}"
            logging.error(
                f"Profile request returned status {response.status_code}",
                extra={**log_extra, 'status': response.status_code, 'duration_ms': duration_ms},
            )
            raise ProfileFetchError(
                "Failed to fetch LinkedIn profile data",
                status_code=response.status_code,
                details=details,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ProfileFetchError(
                "Upstream returned a non-JSON body",
                status_code=response.status_code,
                details=response.text[:500],
            ) from e

        logging.info(
            "Profile fetched",
            extra={
                **log_extra,
                'status': response.status_code,
                'duration_ms': duration_ms,
                'api_calls': self.api_calls_made,
            },
        )
        return data

    def get_api_usage(self) -> Dict:
        """Return API usage statistics."""
        return {'api_calls_made': self.api_calls_made}
