from datetime import date, timedelta

from .schemas import RecurringPlanData


def seasonal_adjustment(plan: RecurringPlanData) -> int:
    """Adjustment for the month of the last visit, 0 when none is configured"""
    month = plan.last_visit_date.month - 1
    return plan.seasonal_adjustments.get(month, 0)


def calculate_target_date(plan: RecurringPlanData) -> date:
    """
    Ideal next visit: last visit plus the base interval, shifted by the
    seasonal adjustment for the last visit's month.

    The result may fall in the past when the adjusted interval is short or
    negative; candidate filtering deals with that.
    """
    actual_interval = plan.base_interval_days + seasonal_adjustment(plan)
    return plan.last_visit_date + timedelta(days=actual_interval)
