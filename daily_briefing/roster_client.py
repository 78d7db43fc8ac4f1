from __future__ import annotations

import logging
from time import sleep

import httpx

from briefing_core.io import load_roster_file, load_roster_text
from briefing_core.staff import AttendanceRecord

from .config import RuntimeConfig

logger = logging.getLogger(__name__)


class RosterClient:
    """Fetches the published roster CSV.

    Every request bypasses caches so a just-edited sheet is read fresh.
    Server errors and connection failures are retried with exponential backoff.
    """

    def __init__(self, *, timeout_s: float = 30.0, retries: int = 3):
        self.timeout_s = timeout_s
        self.retries = max(1, retries)

    def _headers(self) -> dict[str, str]:
        return {
            "Accept": "text/csv, text/plain;q=0.9, */*;q=0.1",
            "Cache-Control": "no-cache",
            "Pragma": "no-cache",
        }

    def _request(self, url: str) -> httpx.Response:
        if not url.startswith(("http://", "https://")):
            raise ValueError(f"Roster URL must be http(s), got {url!r}")

        last_exc: Exception | None = None
        for attempt in range(self.retries):
            try:
                resp = httpx.request(
                    "GET",
                    url,
                    headers=self._headers(),
                    timeout=self.timeout_s,
                    follow_redirects=True,
                )
                if resp.status_code >= 500 and attempt < self.retries - 1:
                    logger.warning("Roster fetch got HTTP %s, retrying", resp.status_code)
                    sleep(2**attempt)
                    continue
                resp.raise_for_status()
                return resp
            except (httpx.TimeoutException, httpx.ConnectError) as exc:
                last_exc = exc
                if attempt < self.retries - 1:
                    logger.warning("Roster fetch failed (%s), retrying", exc.__class__.__name__)
                    sleep(2**attempt)
                    continue
                raise
            except httpx.HTTPStatusError:
                raise
        if last_exc:
            raise last_exc
        raise RuntimeError("request failed without an explicit exception")

    def fetch_text(self, url: str) -> str:
        resp = self._request(url)
        return resp.content.decode("utf-8-sig", errors="replace")

    def fetch_records(self, url: str) -> list[AttendanceRecord]:
        return load_roster_text(self.fetch_text(url))


def load_roster(cfg: RuntimeConfig, client: RosterClient | None = None) -> list[AttendanceRecord]:
    """Read the configured roster: a local file wins over the URL."""
    if cfg.roster_file is not None:
        return load_roster_file(cfg.roster_file)
    if cfg.roster_url:
        client = client or RosterClient(timeout_s=cfg.http_timeout_s)
        return client.fetch_records(cfg.roster_url)
    raise ValueError(
        "No roster configured. Set BRIEFING_ROSTER_FILE to a local export "
        "or BRIEFING_ROSTER_URL to the published CSV link."
    )
