from __future__ import annotations

import logging

from utils.logging_setup import SafeExtraFormatter


def _record(**extra):
    record = logging.LogRecord("profiles", logging.INFO, __file__, 1, "Profile fetched", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_missing_extras_default_to_dash():
    fmt = SafeExtraFormatter(fmt="%(message)s step=%(step)s handle=%(handle)s duration_ms=%(duration_ms)s")
    assert fmt.format(_record()) == "Profile fetched step=- handle=- duration_ms=-"


def test_provided_extras_are_kept():
    fmt = SafeExtraFormatter(fmt="%(message)s step=%(step)s handle=%(handle)s status=%(status)s")
    out = fmt.format(_record(step="fetch_profile", handle="jane-doe", status=200))
    assert out == "Profile fetched step=fetch_profile handle=jane-doe status=200"


def test_client_extras_default_to_dash():
    fmt = SafeExtraFormatter(fmt="%(message)s api_host=%(api_host)s api_calls=%(api_calls)s")
    assert fmt.format(_record()) == "Profile fetched api_host=- api_calls=-"
    out = fmt.format(_record(api_host="people.example.com", api_calls=1))
    assert out == "Profile fetched api_host=people.example.com api_calls=1"
