"""Shared validation utilities"""

import re
from datetime import date
from typing import Optional

# Israeli mobile (05X-XXXXXXX) or landline (0X-XXXXXXX) numbers, dash optional
IL_PHONE_PATTERN = re.compile(r"^05\d-?\d{7}$|^0[23489]-?\d{7}$")

TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def is_valid_phone(phone: Optional[str]) -> bool:
    """Check an Israeli phone number, ignoring whitespace"""
    if not phone:
        return False
    return bool(IL_PHONE_PATTERN.match(re.sub(r"\s", "", phone)))


def validate_il_phone(phone: Optional[str]) -> Optional[str]:
    """
    Validate an Israeli phone number.

    Args:
        phone: Phone number string, e.g. "054-1234567" or "03 1234567"

    Returns:
        The phone number with whitespace removed

    Raises:
        ValueError: If the phone number is not a valid Israeli number
    """
    if not phone:
        return phone

    if not is_valid_phone(phone):
        raise ValueError("Invalid phone number")

    return re.sub(r"\s", "", phone)


def validate_iso_date(value: Optional[str]) -> Optional[str]:
    """
    Validate a calendar date in YYYY-MM-DD format.

    Raises:
        ValueError: If the string is not a real date in that exact format
    """
    if value is None:
        return value

    if not re.match(r"^\d{4}-\d{2}-\d{2}$", value):
        raise ValueError("Date must use the YYYY-MM-DD format")
    try:
        date.fromisoformat(value)
    except ValueError:
        raise ValueError("Invalid calendar date") from None
    return value


def validate_time_of_day(value: Optional[str]) -> Optional[str]:
    """Validate a zero-padded 24-hour HH:mm time"""
    if value is None:
        return value

    if not TIME_PATTERN.match(value):
        raise ValueError("Time must use the zero-padded 24-hour HH:mm format")
    return value


def is_time_range_valid(start: Optional[str], end: Optional[str]) -> bool:
    """Both times present and the range ends after it starts"""
    if not start or not end:
        return False
    return start < end
