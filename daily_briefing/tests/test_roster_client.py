"""Tests for fetching and loading the roster."""

import httpx
import pytest

from daily_briefing import roster_client
from daily_briefing.config import RuntimeConfig, DEFAULT_RULES_FILE
from daily_briefing.roster_client import RosterClient, load_roster

URL = "https://docs.example.com/pub?output=csv"
ROSTER = "Date;Name;Area;Entry;Exit\n2026-03-14;Carla;Bar;08:00;16:00\n"


def _response(status, body=b"", url=URL):
    return httpx.Response(status, content=body, request=httpx.Request("GET", url))


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    monkeypatch.setattr(roster_client, "sleep", lambda _s: None)


def _cfg(**overrides):
    values = dict(
        roster_url=None,
        roster_file=None,
        rules_file=DEFAULT_RULES_FILE,
        rules_profile="default",
        http_timeout_s=5.0,
    )
    values.update(overrides)
    return RuntimeConfig(**values)


class TestRosterClient:
    def test_fetch_records(self, monkeypatch):
        calls = []

        def fake_request(method, url, **kwargs):
            calls.append((method, url, kwargs))
            return _response(200, ROSTER.encode("utf-8"))

        monkeypatch.setattr(httpx, "request", fake_request)
        records = RosterClient(timeout_s=7).fetch_records(URL)
        assert [r.name for r in records] == ["Carla"]
        method, url, kwargs = calls[0]
        assert method == "GET"
        assert url == URL
        assert kwargs["timeout"] == 7
        assert kwargs["headers"]["Cache-Control"] == "no-cache"

    def test_strips_bom(self, monkeypatch):
        monkeypatch.setattr(httpx, "request", lambda *a, **k: _response(200, b"\xef\xbb\xbf" + ROSTER.encode()))
        assert RosterClient().fetch_text(URL).startswith("Date;")

    def test_retries_server_errors(self, monkeypatch):
        responses = [_response(503), _response(502), _response(200, ROSTER.encode())]
        monkeypatch.setattr(httpx, "request", lambda *a, **k: responses.pop(0))
        assert len(RosterClient(retries=3).fetch_records(URL)) == 1
        assert responses == []

    def test_gives_up_after_retries(self, monkeypatch):
        monkeypatch.setattr(httpx, "request", lambda *a, **k: _response(500))
        with pytest.raises(httpx.HTTPStatusError):
            RosterClient(retries=2).fetch_text(URL)

    def test_client_error_not_retried(self, monkeypatch):
        calls = []

        def fake_request(*a, **k):
            calls.append(1)
            return _response(404)

        monkeypatch.setattr(httpx, "request", fake_request)
        with pytest.raises(httpx.HTTPStatusError):
            RosterClient(retries=3).fetch_text(URL)
        assert len(calls) == 1

    def test_connect_error_retried_then_raised(self, monkeypatch):
        calls = []

        def fake_request(*a, **k):
            calls.append(1)
            raise httpx.ConnectError("down")

        monkeypatch.setattr(httpx, "request", fake_request)
        with pytest.raises(httpx.ConnectError):
            RosterClient(retries=3).fetch_text(URL)
        assert len(calls) == 3

    def test_rejects_non_http_url(self):
        with pytest.raises(ValueError):
            RosterClient().fetch_text("file:///etc/passwd")


class TestLoadRoster:
    def test_file_wins_over_url(self, tmp_path, monkeypatch):
        path = tmp_path / "roster.csv"
        path.write_text(ROSTER, encoding="utf-8")

        def fail(*a, **k):
            raise AssertionError("network used")

        monkeypatch.setattr(httpx, "request", fail)
        records = load_roster(_cfg(roster_file=path, roster_url=URL))
        assert [r.name for r in records] == ["Carla"]

    def test_url(self, monkeypatch):
        monkeypatch.setattr(httpx, "request", lambda *a, **k: _response(200, ROSTER.encode()))
        assert len(load_roster(_cfg(roster_url=URL))) == 1

    def test_nothing_configured(self):
        with pytest.raises(ValueError, match="No roster configured"):
            load_roster(_cfg())
