from __future__ import annotations

import re
from typing import Iterable, Optional
from urllib.parse import unquote, urlsplit

_HANDLE_RE = re.compile(r"^[A-Za-z0-9-]{3,100}$")
# Organization/school/feed pages share the URL space with personal profiles
_ORG_KEYWORDS_RE = re.compile(r"(company|school|learning|posts|feed|jobs|groups|events)", re.IGNORECASE)
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")

LINKEDIN_HOSTS = frozenset(
    {
        "linkedin.com",
        "www.linkedin.com",
        "m.linkedin.com",
        "linkedin.cn",
        "www.linkedin.cn",
    }
)
PROFILE_BASE_URL = "https://www.linkedin.com/in/"
PERSONAL_PATH_PREFIXES = ("/in/", "/pub/")


def is_likely_username(value: Optional[str]) -> bool:
    """Return True when ``value`` looks like a personal LinkedIn handle."""
    if not value or not isinstance(value, str):
        return False
    trimmed = value.strip()
    if not _HANDLE_RE.match(trimmed):
        return False
    if _ORG_KEYWORDS_RE.search(trimmed):
        return False
    return True


def _slug_after_prefix(path: str, prefix: str) -> Optional[str]:
    idx = path.lower().find(prefix)
    if idx == -1:
        return None
    after = path[idx + len(prefix):]
    slug = after.split('/')[0].split('?')[0].split('#')[0]
    return slug.strip()


def extract_linkedin_username(raw: Optional[str], hosts: Optional[Iterable[str]] = None) -> Optional[str]:
    """Resolve a profile URL or bare handle to the canonical handle.

    Returns None for anything that is not a personal profile reference:
    foreign hosts, company/school pages, malformed URLs or handles.
    """
    if not raw or not isinstance(raw, str):
        return None
    text = raw.strip()

    if is_likely_username(text):
        return text

    allowed = frozenset(hosts) if hosts is not None else LINKEDIN_HOSTS
    candidate = text if _SCHEME_RE.match(text) else f"https://{text}"
    try:
        parsed = urlsplit(candidate)
        host = parsed.hostname
    except ValueError:
        return None
    if not host or host not in allowed:
        return None

    path = unquote(parsed.path or '')
    for prefix in PERSONAL_PATH_PREFIXES:
        slug = _slug_after_prefix(path, prefix)
        if slug is not None and is_likely_username(slug):
            return slug

    # Localized/lite paths such as /mwlite/in/<handle>
    parts = [p for p in path.split('/') if p]
    for i, part in enumerate(parts):
        if part.lower() == 'in':
            if i + 1 < len(parts) and is_likely_username(parts[i + 1]):
                return parts[i + 1].strip()
            break
    return None


# Short alias used by callers that only care about the resolution contract
resolve = extract_linkedin_username


def looks_like_profile_reference(text: Optional[str]) -> bool:
    """Pre-validation for user input; mirrors resolution exactly."""
    return extract_linkedin_username(text) is not None


def profile_url_for(handle: Optional[str]) -> Optional[str]:
    if not handle:
        return None
    return f"{PROFILE_BASE_URL}{handle}"
