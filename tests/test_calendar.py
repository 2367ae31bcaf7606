from datetime import date, datetime, timedelta

from garden_scheduler.domain.scheduling import is_waste_pickup_day
from garden_scheduler.domain.scheduling.calendar import (
    format_date,
    is_pre_rest_day,
    is_rest_day,
    parse_date,
    week_day,
)
from garden_scheduler.domain.scheduling.schemas import WasteRuleData

# 2023-10-01 is a Sunday
WEEK = [date(2023, 10, 1) + timedelta(days=i) for i in range(7)]
RULES = [WasteRuleData(area="מרכז", day_of_week=2), WasteRuleData(area="צפון", day_of_week=4)]


def test_week_day_starts_on_sunday():
    assert [week_day(d) for d in WEEK] == [0, 1, 2, 3, 4, 5, 6]


def test_waste_day_matches_only_tuesdays_in_area():
    results = {week_day(d): is_waste_pickup_day(d, "מרכז", RULES) for d in WEEK}
    assert results == {0: False, 1: False, 2: True, 3: False, 4: False, 5: False, 6: False}


def test_waste_day_false_for_other_area_on_any_weekday():
    assert not any(is_waste_pickup_day(d, "דרום", RULES) for d in WEEK)


def test_waste_day_uses_rules_of_own_area_only():
    tuesday, thursday = WEEK[2], WEEK[4]
    assert is_waste_pickup_day(thursday, "צפון", RULES)
    assert not is_waste_pickup_day(tuesday, "צפון", RULES)


def test_duplicate_rules_are_harmless():
    rules = RULES + [WasteRuleData(area="מרכז", day_of_week=2)]
    assert is_waste_pickup_day(WEEK[2], "מרכז", rules)
    assert not is_waste_pickup_day(WEEK[3], "מרכז", rules)


def test_waste_day_without_rules():
    assert not is_waste_pickup_day(WEEK[2], "מרכז", [])


def test_waste_day_accepts_iso_strings():
    assert is_waste_pickup_day("2023-10-03", "מרכז", RULES)


def test_rest_days_are_friday_and_saturday():
    friday, saturday = WEEK[5], WEEK[6]
    assert is_rest_day(saturday)
    assert not is_rest_day(friday)
    assert is_pre_rest_day(friday)
    assert not any(is_rest_day(d) or is_pre_rest_day(d) for d in WEEK[:5])


def test_parse_date_variants():
    assert parse_date("2023-10-01") == date(2023, 10, 1)
    assert parse_date("2023-10-01T15:30:00") == date(2023, 10, 1)
    assert parse_date(datetime(2023, 10, 1, 23, 59)) == date(2023, 10, 1)
    assert parse_date(date(2023, 10, 1)) == date(2023, 10, 1)


def test_format_date_is_zero_padded():
    assert format_date(date(2024, 3, 5)) == "2024-03-05"
