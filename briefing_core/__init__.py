"""Daily task assignment and briefing engine for restaurant staff."""

from .briefing import BriefingDocument, build_briefing
from .daily import available_dates, daily_briefing, daily_briefing_document, daily_tasks, working_for_date
from .policy import RuleConfig, rule_config_from_dict
from .renderer import render_briefing
from .roles import Rank, RoleSet, identify_roles
from .rules import bar_restocking, bathroom_cleaning, cash_closing, door_duty, sellers_and_runner
from .staff import AttendanceRecord, is_working, partition_by_area
from .time_utils import parse_hhmm_to_minutes

from .io import load_roster_file, load_roster_text, parse_delimited

__all__ = [
    "AttendanceRecord",
    "BriefingDocument",
    "Rank",
    "RoleSet",
    "RuleConfig",
    "available_dates",
    "bar_restocking",
    "bathroom_cleaning",
    "build_briefing",
    "cash_closing",
    "daily_briefing",
    "daily_briefing_document",
    "daily_tasks",
    "door_duty",
    "identify_roles",
    "is_working",
    "load_roster_file",
    "load_roster_text",
    "parse_delimited",
    "parse_hhmm_to_minutes",
    "partition_by_area",
    "render_briefing",
    "rule_config_from_dict",
    "sellers_and_runner",
    "working_for_date",
]
