from __future__ import annotations

import json

import pytest


class _StubClient:
    payloads = {}
    created = 0

    def __init__(self, *args, **kwargs):
        type(self).created += 1
        self.calls = 0

    def fetch_profile(self, handle):
        self.calls += 1
        return self.payloads[handle]

    def get_api_usage(self):
        return {"api_calls_made": self.calls}


@pytest.fixture
def stub_client(monkeypatch, sample_profile):
    import pipelines.steps.fetch_profile as fetch_step

    _StubClient.payloads = {"jane-doe": sample_profile}
    _StubClient.created = 0
    monkeypatch.setattr(fetch_step, "ProfileClient", _StubClient)
    return _StubClient


def _run(args):
    import cli

    return cli.main(args)


def test_resolve_prints_handle(capsys):
    assert _run(["resolve", "https://www.linkedin.com/in/jane-doe?trk=x"]) == 0
    assert capsys.readouterr().out.strip() == "jane-doe"


def test_resolve_rejects_company_pages(capsys):
    assert _run(["resolve", "https://linkedin.com/company/acme"]) == 2
    assert "Invalid LinkedIn URL or username" in capsys.readouterr().err


def test_lookup_renders_card(stub_client, capsys):
    assert _run(["lookup", "linkedin.com/in/jane-doe"]) == 0
    out = capsys.readouterr().out
    assert "Jane Doe" in out
    assert "Current role" in out
    assert "Staff Engineer @ Acme Corp" in out
    assert "Staff: 1001 - 5000" in out
    assert "Streaming ETL" in out


def test_lookup_json_output(stub_client, capsys):
    assert _run(["lookup", "jane-doe", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["handle"] == "jane-doe"
    assert data["current"]["title"] == "Staff Engineer"
    assert data["skills"] == ["Python", "Kafka"]


def test_lookup_raw_output(stub_client, capsys, sample_profile):
    assert _run(["lookup", "--username", "jane-doe", "--raw"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data == sample_profile


def test_lookup_invalid_input_never_builds_client(stub_client, capsys):
    assert _run(["lookup", "https://example.com/in/jane-doe"]) == 2
    assert stub_client.created == 0
    assert "personal profile" in capsys.readouterr().err


def test_lookup_without_reference(capsys):
    assert _run(["lookup"]) == 2
    assert "Either url or username" in capsys.readouterr().err


def test_lookup_without_api_key(monkeypatch, capsys):
    monkeypatch.setenv("RAPID_API_KEY", "")
    assert _run(["lookup", "jane-doe"]) == 1
    assert "RAPID_API_KEY" in capsys.readouterr().err


def test_lookup_reports_upstream_failure(monkeypatch, capsys):
    import pipelines.steps.fetch_profile as fetch_step
    from services.profile_client import ProfileFetchError

    class _FailingClient(_StubClient):
        def fetch_profile(self, handle):
            raise ProfileFetchError("Failed to fetch LinkedIn profile data", status_code=429, details="quota")

    monkeypatch.setattr(fetch_step, "ProfileClient", _FailingClient)
    assert _run(["lookup", "jane-doe"]) == 1
    err = capsys.readouterr().err
    assert "status 429" in err
    assert "quota" in err


def test_normalize_saved_payload(tmp_path, capsys, sample_profile):
    path = tmp_path / "profile.json"
    path.write_text(json.dumps({"data": sample_profile}), encoding="utf-8")
    assert _run(["normalize", "--input", str(path), "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["title"] == "Jane Doe"
    assert [e["title"] for e in data["experience"]] == ["Staff Engineer", "Senior Engineer", "Engineer"]


def test_normalize_missing_file(tmp_path, capsys):
    assert _run(["normalize", "--input", str(tmp_path / "nope.json")]) == 1
    assert "Could not read JSON payload" in capsys.readouterr().err
