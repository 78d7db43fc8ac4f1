from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from briefing_core.policy import RuleConfig, rule_config_from_dict

logger = logging.getLogger(__name__)

DEFAULT_PROFILE = "default"
DEFAULT_RULES_FILE = Path(__file__).resolve().parent / "data" / "briefing_rules.json"


@dataclass(frozen=True)
class RuntimeConfig:
    roster_url: str | None
    roster_file: Path | None
    rules_file: Path
    rules_profile: str
    http_timeout_s: float


def load_env(dotenv_path: str | Path | None = None) -> None:
    path = Path(dotenv_path) if dotenv_path else None
    if path and path.exists():
        load_dotenv(path)
        return
    load_dotenv()


def runtime_config() -> RuntimeConfig:
    roster_url = os.getenv("BRIEFING_ROSTER_URL", "").strip() or None
    roster_file_raw = os.getenv("BRIEFING_ROSTER_FILE", "").strip()
    roster_file = Path(roster_file_raw).expanduser().resolve() if roster_file_raw else None
    rules_file_raw = os.getenv("BRIEFING_RULES_FILE", "").strip()
    rules_file = Path(rules_file_raw).expanduser().resolve() if rules_file_raw else DEFAULT_RULES_FILE
    if rules_file_raw and not rules_file.exists():
        raise FileNotFoundError(f"BRIEFING_RULES_FILE points to a missing file: {rules_file}")
    rules_profile = os.getenv("BRIEFING_RULES_PROFILE", "").strip() or DEFAULT_PROFILE
    timeout_raw = os.getenv("BRIEFING_HTTP_TIMEOUT", "30").strip()
    try:
        http_timeout_s = float(timeout_raw)
    except ValueError:
        raise ValueError(f"BRIEFING_HTTP_TIMEOUT must be a number of seconds, got {timeout_raw!r}") from None
    return RuntimeConfig(
        roster_url=roster_url,
        roster_file=roster_file,
        rules_file=rules_file,
        rules_profile=rules_profile,
        http_timeout_s=http_timeout_s,
    )


def load_rule_profiles(profile_file: Path | None = None) -> dict[str, Any]:
    if profile_file is None:
        profile_file = DEFAULT_RULES_FILE
    if not profile_file.exists():
        logger.warning("Rule profile file %s not found; using built-in rule defaults", profile_file)
        return {}
    with profile_file.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def get_rule_config(profile_name: str | None = None, profile_file: Path | None = None) -> RuleConfig:
    """Load a named rule profile; unknown names fall back to 'default'.

    BRIEFING_MANAGERS (comma-separated) overrides the profile's managers.
    """
    profiles = load_rule_profiles(profile_file)
    name = profile_name or DEFAULT_PROFILE
    if name in profiles:
        raw = dict(profiles[name])
    else:
        if profiles:
            logger.warning(
                "Rule profile '%s' not found in %s; falling back to '%s'",
                name, profile_file or DEFAULT_RULES_FILE, DEFAULT_PROFILE,
            )
        raw = dict(profiles.get(DEFAULT_PROFILE, {}))

    managers_env = os.getenv("BRIEFING_MANAGERS")
    if managers_env is not None:
        raw["managers"] = managers_env
    return rule_config_from_dict(raw)
