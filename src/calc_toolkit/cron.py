"""
Spring Boot (6-field, Quartz-style) cron expressions explained in English.

Fields, in order: second minute hour day-of-month month day-of-week.

The summary is a best-effort sentence, not a scheduling engine: it is picked
by the first matching SummaryRule in SUMMARY_RULES, falling back to a generic
"At <time>, <days>" sentence. Conflicting fields (both day-of-month and
weekday restricted, say) are described side by side, not reconciled.
"""

import re
from dataclasses import dataclass
from typing import Callable

from calc_toolkit.data.defaults import CRON_FIELD_COUNT, CRON_FIELD_NAMES, MONTH_NAMES
from calc_toolkit.models import CronExplanation

INVALID_FIELD_COUNT = (
    f"Invalid: Spring Boot cron expressions must have exactly {CRON_FIELD_COUNT} fields"
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_field(value: str, field_type: str) -> str:
    """
    Describe one cron field. Checked in order: "*", "?", step ("a/b"),
    range ("a-b"), list ("a,b,c"), literal.
    """
    name = field_type.lower()
    if value == "*":
        return f"every {name}"
    if value == "?":
        return f"any {name}"
    if "/" in value:
        start, step = value.split("/")[:2]
        description = f"every {step} {name}"
        if start != "*":
            description += f" starting from {start}"
        return description
    if "-" in value:
        start, end = value.split("-")[:2]
        return f"{name} {start} through {end}"
    if "," in value:
        return f"{name} {', '.join(value.split(','))}"
    return f"{name} {value}"


def get_ordinal_suffix(number: str) -> str:
    """'st', 'nd', 'rd' or 'th' for the integer at the start of `number`."""
    match = _LEADING_INT.match(number)
    if match is None:
        return "th"
    n = int(match.group(1))
    if n < 0 or 11 <= n % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


# ── Field helpers ─────────────────────────────────────────────────────────────

def _is_step(value: str) -> bool:
    return "/" in value


def _is_fixed(value: str) -> bool:
    return value != "*" and not _is_step(value)


def _interval(value: str) -> str:
    return value.split("/")[1]


def _ordinal_interval(value: str) -> str:
    interval = _interval(value)
    return f"{interval}{get_ordinal_suffix(interval)}"


def _month_name(value: str) -> str:
    return MONTH_NAMES.get(value, value)


# ── Summary rules ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CronFields:
    second: str
    minute: str
    hour: str
    day: str
    month: str
    weekday: str


@dataclass(frozen=True)
class SummaryRule:
    name: str
    matches: Callable[[CronFields], bool]
    render: Callable[[CronFields], str]


SUMMARY_RULES: tuple[SummaryRule, ...] = (
    SummaryRule(
        name="hour_start",
        matches=lambda f: (
            f.second == "0" and f.minute == "0" and f.hour == "*"
            and f.day == "*" and f.month == "*" and f.weekday == "*"
        ),
        render=lambda f: "At the start of every hour",
    ),
    SummaryRule(
        name="daily_at_hour",
        matches=lambda f: (
            f.second == "0" and f.minute == "0" and _is_fixed(f.hour)
            and f.day == "*" and f.month == "*" and f.weekday == "*"
        ),
        render=lambda f: f"Every day at {f.hour}:00",
    ),
    SummaryRule(
        name="minute_step",
        matches=lambda f: (
            f.second == "0" and _is_step(f.minute) and f.hour == "*"
            and f.day == "*" and f.month == "*" and f.weekday == "*"
        ),
        render=lambda f: f"At every {_ordinal_interval(f.minute)} minute",
    ),
    SummaryRule(
        name="minute_step_in_month",
        matches=lambda f: (
            f.second == "0" and _is_step(f.minute) and f.hour == "*"
            and f.day == "*" and f.month != "*" and f.weekday == "*"
        ),
        render=lambda f: (
            f"At every {_ordinal_interval(f.minute)} minute in {_month_name(f.month)}"
        ),
    ),
    SummaryRule(
        name="hour_step_in_month",
        matches=lambda f: (
            f.second == "0" and f.minute == "0" and _is_step(f.hour)
            and f.day == "*" and f.month != "*" and f.weekday == "*"
        ),
        render=lambda f: (
            f"At minute 0 past every {_ordinal_interval(f.hour)} hour in {_month_name(f.month)}"
        ),
    ),
    SummaryRule(
        name="hour_step",
        matches=lambda f: (
            f.second == "0" and f.minute == "0" and _is_step(f.hour)
            and f.day == "*" and f.month == "*" and f.weekday == "*"
        ),
        render=lambda f: f"At minute 0 past every {_ordinal_interval(f.hour)} hour",
    ),
    SummaryRule(
        name="weekday_at_hour",
        matches=lambda f: (
            f.second == "0" and f.minute == "0" and _is_fixed(f.hour)
            and f.day == "*" and f.month == "*" and f.weekday != "*"
        ),
        render=lambda f: f"At {f.hour}:00 on {f.weekday}",
    ),
    SummaryRule(
        name="first_of_month_midnight",
        matches=lambda f: (
            f.second == "0" and f.minute == "0" and f.hour == "0"
            and f.day == "1" and f.month == "*" and f.weekday == "*"
        ),
        render=lambda f: "At midnight on the first day of every month",
    ),
)


def _generic_summary(f: CronFields) -> str:
    time_parts = []
    if f.second != "0":
        time_parts.append(f"second {f.second}")

    if f.minute == "*":
        time_parts.append("every minute")
    elif _is_step(f.minute):
        time_parts.append(f"every {_ordinal_interval(f.minute)} minute")
    else:
        time_parts.append(f"minute {f.minute}")

    if f.hour != "*":
        time_parts.append(f"hour {f.hour}")

    day_parts = []
    if f.day != "*":
        day_parts.append(f"day {f.day} of month")
    if f.month != "*":
        day_parts.append(f"in {_month_name(f.month)}")
    if f.weekday != "*":
        day_parts.append(f"on {f.weekday}")
    if not day_parts:
        day_parts.append("every day")

    return f"At {', '.join(time_parts)}, {', '.join(day_parts)}"


def summarize(fields: CronFields) -> str:
    for rule in SUMMARY_RULES:
        if rule.matches(fields):
            return rule.render(fields)
    return _generic_summary(fields)


def explain_cron(expression: str) -> CronExplanation:
    parts = expression.split()
    if len(parts) != CRON_FIELD_COUNT:
        return CronExplanation(summary=INVALID_FIELD_COUNT, breakdown=(), is_valid=False)

    breakdown = tuple(
        f"{label}: {parse_field(part, label)}"
        for label, part in zip(CRON_FIELD_NAMES, parts)
    )
    return CronExplanation(
        summary=summarize(CronFields(*parts)),
        breakdown=breakdown,
        is_valid=True,
    )
