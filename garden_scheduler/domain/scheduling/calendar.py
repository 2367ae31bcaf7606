"""
Calendar facts for candidate visit dates.

Weekdays are numbered 0 = Sunday ... 6 = Saturday, matching the numbering
stored on waste schedule rules. Friday and Saturday close the working week.
"""

from datetime import date, datetime
from typing import Iterable, Union
from zoneinfo import ZoneInfo

SUNDAY = 0
FRIDAY = 5
SATURDAY = 6

REST_DAY = SATURDAY
PRE_REST_DAY = FRIDAY

DateLike = Union[date, datetime, str]


def parse_date(value: DateLike) -> date:
    """Accept a date, a datetime, a YYYY-MM-DD string or a full ISO timestamp"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if "T" in value:
        return datetime.fromisoformat(value).date()
    return date.fromisoformat(value)


def format_date(day: date) -> str:
    return day.strftime("%Y-%m-%d")


def week_day(day: DateLike) -> int:
    """Day of week with Sunday as 0"""
    return parse_date(day).isoweekday() % 7


def is_rest_day(day: DateLike) -> bool:
    return week_day(day) == REST_DAY


def is_pre_rest_day(day: DateLike) -> bool:
    return week_day(day) == PRE_REST_DAY


def is_waste_pickup_day(day: DateLike, area: str, rules: Iterable) -> bool:
    """True if any rule for ``area`` falls on the weekday of ``day``"""
    weekday = week_day(day)
    return any(rule.area == area and rule.day_of_week == weekday for rule in rules)


def today_in(timezone: str) -> date:
    """Current calendar date in the given IANA time zone"""
    return datetime.now(ZoneInfo(timezone)).date()
