"""Scheduling domain schemas - engine inputs/outputs and API payloads"""

from datetime import date
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ...shared.validators import validate_iso_date, validate_time_of_day


class WastePreference(str, Enum):
    """Client's stance on visiting on the area's waste pickup day"""

    AVOID = "AVOID"
    PREFER = "PREFER"
    IGNORE = "IGNORE"


class EngineModel(BaseModel):
    """camelCase on the wire, snake_case in Python, readable from ORM rows"""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class RecurringPlanData(EngineModel):
    client_id: Optional[int] = None
    base_interval_days: int = Field(..., gt=0)
    waste_preference: WastePreference = WastePreference.IGNORE
    last_visit_date: date
    # Month of last_visit_date (0-11) -> days added to the base interval
    seasonal_adjustments: dict[int, int] = Field(default_factory=dict)

    @field_validator("seasonal_adjustments", mode="before")
    @classmethod
    def default_adjustments(cls, v):
        return v or {}

    @field_validator("seasonal_adjustments")
    @classmethod
    def validate_months(cls, v):
        for month in v:
            if not 0 <= month <= 11:
                raise ValueError("Seasonal adjustment months must be between 0 and 11")
        return v


class WasteRuleData(EngineModel):
    area: str
    day_of_week: int = Field(..., ge=0, le=6)  # 0 = Sunday


class AppointmentData(EngineModel):
    """Subset of a booked visit the engine and overlap check look at"""

    id: Optional[Union[int, str]] = None
    client_id: Optional[int] = None
    date: str
    start_time: str
    end_time: str


class AppointmentDraft(EngineModel):
    """Partially filled visit being entered or edited by hand"""

    id: Optional[Union[int, str]] = None
    date: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None


class SchedulingSuggestion(EngineModel):
    date: str
    score: int
    reason: str
    waste_conflict: bool


class SuggestionListResponse(EngineModel):
    client_id: int
    target_date: str
    suggestions: list[SchedulingSuggestion]


class BookSuggestionRequest(EngineModel):
    date: str
    start_time: Optional[str] = None

    @field_validator("date")
    @classmethod
    def validate_date(cls, v):
        return validate_iso_date(v)

    @field_validator("start_time")
    @classmethod
    def validate_start_time(cls, v):
        return validate_time_of_day(v)


class WasteDayResponse(EngineModel):
    date: str
    area: str
    is_waste_pickup_day: bool
