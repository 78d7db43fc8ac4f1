"""Daily briefing MCP server.

Exposes tools to list roster dates, resolve the per-area task maps for a
date, and render the full daily briefing text.
"""
from __future__ import annotations

import argparse
import os
from typing import Any

from mcp.server.fastmcp import FastMCP

from briefing_core.daily import available_dates, daily_briefing_document
from briefing_core.daily import daily_tasks as _daily_tasks
from briefing_core.renderer import render_briefing
from briefing_core.staff import AttendanceRecord

from .config import get_rule_config, load_env, load_rule_profiles, runtime_config
from .roster_client import RosterClient, load_roster

mcp = FastMCP(
    "daily-briefing",
    host=os.getenv("HOST", "127.0.0.1"),
    port=int(os.getenv("PORT", "8000")),
    instructions=(
        "Daily task briefing for restaurant staff. "
        "Reads the attendance roster, lists its dates, and assigns door, bar, "
        "seller, HACCP and cash-closing duties for a chosen date."
    ),
)

_ENV_FILE: str | None = None
_CLIENT: RosterClient | None = None


def _load_env() -> None:
    load_env(_ENV_FILE or os.getenv("BRIEFING_ENV_FILE"))


def _client() -> RosterClient:
    global _CLIENT
    if _CLIENT is None:
        _load_env()
        _CLIENT = RosterClient(timeout_s=runtime_config().http_timeout_s)
    return _CLIENT


def _roster() -> list[AttendanceRecord]:
    _load_env()
    return load_roster(runtime_config(), client=_client())


def _rules(profile_name: str | None):
    _load_env()
    cfg = runtime_config()
    return get_rule_config(profile_name or cfg.rules_profile, cfg.rules_file)


# -- Roster --

@mcp.tool()
def list_dates() -> list[str]:
    """List the dates present in the roster, oldest first."""
    return available_dates(_roster())


# -- Briefing --

@mcp.tool()
def daily_tasks(date: str, profile_name: str | None = None) -> dict[str, Any]:
    """Resolve the sala and bar task maps for one roster date.

    Also reports staff whose area matched both or neither group.
    """
    records = _roster()
    return _daily_tasks(records, date, _rules(profile_name))


@mcp.tool()
def daily_briefing(date: str, profile_name: str | None = None, structured: bool = False) -> dict[str, Any]:
    """Build the daily briefing for one roster date.

    Returns the rendered text, plus the section structure when *structured* is set.
    """
    records = _roster()
    rules = _rules(profile_name)
    doc = daily_briefing_document(records, date, rules)
    result: dict[str, Any] = {"date": date, "text": render_briefing(doc, placeholder=rules.placeholder)}
    if structured:
        result["document"] = doc.to_dict()
    return result


# -- Profiles --

@mcp.tool()
def list_profiles() -> dict[str, Any]:
    """List the rule profiles with their descriptions."""
    _load_env()
    profiles = load_rule_profiles(runtime_config().rules_file)
    return {name: profile.get("description", "") for name, profile in profiles.items()}


def main() -> None:
    global _ENV_FILE

    parser = argparse.ArgumentParser(description="Run the daily briefing MCP server")
    parser.add_argument("--env-file", default=None, help="Path to .env file")
    parser.add_argument(
        "--transport",
        default=None,
        choices=["stdio", "sse", "streamable-http"],
        help="MCP transport (default: streamable-http when PORT is set, else stdio)",
    )
    args = parser.parse_args()
    _ENV_FILE = args.env_file

    transport = args.transport
    if transport is None:
        transport = "streamable-http" if os.getenv("PORT") else "stdio"
    mcp.run(transport=transport)


if __name__ == "__main__":
    main()
