from __future__ import annotations

from utils.fallback import first_present, is_empty


def test_first_present_stops_at_first_non_empty():
    calls = []

    def accessor(name, value):
        def _get():
            calls.append(name)
            return value
        return _get

    result = first_present(accessor("a", None), accessor("b", "  "), accessor("c", " found "), accessor("d", "late"))
    assert result == "found"
    assert calls == ["a", "b", "c"]


def test_first_present_default():
    assert first_present(lambda: None, lambda: [], default="fallback") == "fallback"
    assert first_present() is None


def test_first_present_keeps_falsy_scalars():
    assert first_present(lambda: 0, lambda: 5) == 0
    assert first_present(lambda: False, lambda: True) is False


def test_is_empty():
    assert is_empty(None)
    assert is_empty("")
    assert is_empty(" \t")
    assert is_empty({})
    assert not is_empty("x")
    assert not is_empty([0])
