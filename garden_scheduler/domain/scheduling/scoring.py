"""Scores a single candidate visit date against a client's recurring plan."""

from datetime import date
from typing import Iterable, Optional, Sequence

from .calendar import format_date, is_pre_rest_day, is_rest_day, is_waste_pickup_day
from .schemas import RecurringPlanData, SchedulingSuggestion, WastePreference

# A day with this many booked visits is full, regardless of their times
DAILY_CAPACITY = 4

BASE_SCORE = 100
DISTANCE_PENALTY_PER_DAY = 5
CLOSE_DISTANCE_DAYS = 2

WASTE_AVOIDED_BONUS = 10
WASTE_CONFLICT_PENALTY = 50
WASTE_PREFERRED_BONUS = 30
WASTE_MISSED_PENALTY = 20

REST_DAY_PENALTY = 80
PRE_REST_DAY_PENALTY = 20

NOTE_PERFECT_MATCH = "Perfect interval match."
NOTE_CLOSE_TO_TARGET = "Close to target date."
NOTE_WASTE_WARNING = "Warning: Waste pickup day."
NOTE_AVOIDS_WASTE = "Avoids waste pickup."
NOTE_WASTE_PREFERRED = "Is waste pickup day (preferred)."


def daily_load(day: date, appointments: Iterable) -> int:
    """Number of visits already booked on ``day``"""
    day_str = format_date(day)
    return sum(1 for appt in appointments if appt.date == day_str)


def score_candidate_date(
    candidate: date,
    target: date,
    plan: RecurringPlanData,
    area: str,
    waste_rules: Sequence,
    existing_appointments: Sequence,
) -> Optional[SchedulingSuggestion]:
    """
    Score one candidate date, or return None when the day is already full.

    Scores start at 100 and move with distance from the target, the waste
    pickup preference and the weekday. Scores may go negative; only a full
    day rejects a candidate.
    """
    if daily_load(candidate, existing_appointments) >= DAILY_CAPACITY:
        return None

    score = BASE_SCORE
    reasons: list[str] = []

    distance = abs((candidate - target).days)
    score -= distance * DISTANCE_PENALTY_PER_DAY
    if distance == 0:
        reasons.append(NOTE_PERFECT_MATCH)
    elif distance <= CLOSE_DISTANCE_DAYS:
        reasons.append(NOTE_CLOSE_TO_TARGET)

    is_waste_day = is_waste_pickup_day(candidate, area, waste_rules)

    if plan.waste_preference == WastePreference.AVOID:
        if is_waste_day:
            score -= WASTE_CONFLICT_PENALTY
            reasons.append(NOTE_WASTE_WARNING)
        else:
            score += WASTE_AVOIDED_BONUS
            reasons.append(NOTE_AVOIDS_WASTE)
    elif plan.waste_preference == WastePreference.PREFER:
        if is_waste_day:
            score += WASTE_PREFERRED_BONUS
            reasons.append(NOTE_WASTE_PREFERRED)
        else:
            score -= WASTE_MISSED_PENALTY

    if is_rest_day(candidate):
        score -= REST_DAY_PENALTY
    elif is_pre_rest_day(candidate):
        score -= PRE_REST_DAY_PENALTY

    return SchedulingSuggestion(
        date=format_date(candidate),
        score=score,
        reason=" ".join(reasons),
        waste_conflict=is_waste_day and plan.waste_preference == WastePreference.AVOID,
    )
