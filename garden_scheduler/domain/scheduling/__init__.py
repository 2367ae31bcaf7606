"""
Scheduling Domain

Visit date recommendation engine for recurring garden maintenance plans,
plus the HTTP flow that lets a scheduler pick a suggestion and book it.
"""

from .calendar import is_waste_pickup_day
from .engine import generate_suggestions
from .overlap import check_overlap
from .target_date import calculate_target_date

__all__ = [
    "calculate_target_date",
    "check_overlap",
    "generate_suggestions",
    "is_waste_pickup_day",
]
