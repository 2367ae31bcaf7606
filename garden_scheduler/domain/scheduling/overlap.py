"""
Time conflict check for manually entered visits.

Times are zero-padded HH:mm strings, so string comparison is chronological.
"""

from typing import Iterable


def ranges_overlap(start_a: str, end_a: str, start_b: str, end_b: str) -> bool:
    """Half-open ranges [start, end) on the same day intersect"""
    return start_a < end_b and end_a > start_b


def check_overlap(draft, existing_appointments: Iterable) -> bool:
    """
    Check whether a draft visit collides with any existing visit.

    A draft missing its date or either time is treated as not overlapping.
    An existing visit with the draft's own id is skipped so that editing a
    visit never conflicts with itself.
    """
    draft_date = getattr(draft, "date", None)
    start = getattr(draft, "start_time", None)
    end = getattr(draft, "end_time", None)
    if not draft_date or not start or not end:
        return False

    draft_id = getattr(draft, "id", None)

    for existing in existing_appointments:
        if draft_id is not None and str(existing.id) == str(draft_id):
            continue
        if existing.date != draft_date:
            continue
        if ranges_overlap(start, end, existing.start_time, existing.end_time):
            return True
    return False
