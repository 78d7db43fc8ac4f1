"""Command line access to the briefing engine.

    daily-briefing dates
    daily-briefing tasks 2026-03-14
    daily-briefing briefing 2026-03-14 --profile baixa
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from briefing_core.daily import available_dates, daily_briefing, daily_tasks

from .config import get_rule_config, load_env, runtime_config
from .roster_client import load_roster


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="daily-briefing", description="Daily staff task briefing")
    parser.add_argument("--env-file", default=None, help="Path to .env file")
    parser.add_argument("--roster", default=None, help="Roster file (.csv/.txt/.xlsx); overrides BRIEFING_ROSTER_FILE")
    parser.add_argument("--url", default=None, help="Published roster CSV URL; overrides BRIEFING_ROSTER_URL")
    parser.add_argument("--profile", default=None, help="Rule profile name (default: BRIEFING_RULES_PROFILE or 'default')")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("dates", help="List roster dates")
    tasks = sub.add_parser("tasks", help="Print the sala/bar task maps as JSON")
    tasks.add_argument("date")
    briefing = sub.add_parser("briefing", help="Print the rendered briefing")
    briefing.add_argument("date")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    load_env(args.env_file)

    try:
        cfg = runtime_config()
        if args.roster:
            cfg = replace(cfg, roster_file=Path(args.roster).expanduser().resolve(), roster_url=None)
        elif args.url:
            cfg = replace(cfg, roster_file=None, roster_url=args.url)
        records = load_roster(cfg)
        rules = get_rule_config(args.profile or cfg.rules_profile, cfg.rules_file)
    except (ValueError, FileNotFoundError) as exc:
        parser.error(str(exc))

    if args.command == "dates":
        for d in available_dates(records):
            print(d)
    elif args.command == "tasks":
        json.dump(daily_tasks(records, args.date, rules), sys.stdout, indent=2, ensure_ascii=False)
        print()
    else:
        sys.stdout.write(daily_briefing(records, args.date, rules))
    return 0


if __name__ == "__main__":
    sys.exit(main())
