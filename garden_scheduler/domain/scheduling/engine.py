"""
Smart scheduling engine.

Projects the next visit date from a recurring plan, scores every date in a
two-week window around it and returns the best few for a human to confirm.
"""

import logging
from datetime import date, timedelta
from typing import Optional, Sequence

from ...config import BUSINESS_TIMEZONE
from .calendar import today_in
from .schemas import RecurringPlanData, SchedulingSuggestion
from .scoring import score_candidate_date
from .target_date import calculate_target_date

logger = logging.getLogger(__name__)

SEARCH_WINDOW_DAYS = 7
MAX_SUGGESTIONS = 3


def generate_suggestions(
    plan: RecurringPlanData,
    client_area: str,
    waste_rules: Sequence,
    appointments: Sequence,
    today: Optional[date] = None,
) -> list[SchedulingSuggestion]:
    """
    Return up to three suggested visit dates, best score first.

    Candidates before ``today`` are never offered. Days at capacity are
    dropped. Equal scores are ordered by distance to the target date, then
    chronologically. An empty list means no slot near the target is free.
    """
    if today is None:
        today = today_in(BUSINESS_TIMEZONE)

    target = calculate_target_date(plan)
    scored: list[tuple[int, date, SchedulingSuggestion]] = []

    for offset in range(-SEARCH_WINDOW_DAYS, SEARCH_WINDOW_DAYS + 1):
        candidate = target + timedelta(days=offset)
        if candidate < today:
            continue

        suggestion = score_candidate_date(
            candidate, target, plan, client_area, waste_rules, appointments
        )
        if suggestion is not None:
            scored.append((abs(offset), candidate, suggestion))

    scored.sort(key=lambda item: (-item[2].score, item[0], item[1]))
    suggestions = [suggestion for _, _, suggestion in scored[:MAX_SUGGESTIONS]]

    logger.debug(
        f"Target {target} for client {plan.client_id}: "
        f"{len(scored)} candidates scored, returning {len(suggestions)}"
    )
    return suggestions
