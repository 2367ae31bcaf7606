"""Booking assistant schemas"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ...shared.validators import validate_iso_date, validate_time_of_day
from ..appointments.schemas import AppointmentResponse


class IntentKind(str, Enum):
    SCHEDULE = "schedule"
    QUERY = "query"
    UNKNOWN = "unknown"


class BookingIntent(BaseModel):
    """Structured request extracted from free text"""

    intent: IntentKind = IntentKind.UNKNOWN
    clientId: Optional[int] = None
    date: Optional[str] = None
    startTime: Optional[str] = None
    durationMinutes: int = Field(60, gt=0)
    instructions: Optional[str] = None
    explanation: Optional[str] = None

    @field_validator("intent", mode="before")
    @classmethod
    def coerce_intent(cls, v):
        # Missing or unlisted intents are treated as not understood
        if isinstance(v, str) and v in {kind.value for kind in IntentKind}:
            return v
        return IntentKind.UNKNOWN

    @field_validator("date", "startTime", "instructions", "explanation", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("date")
    @classmethod
    def validate_date(cls, v):
        return validate_iso_date(v)

    @field_validator("startTime")
    @classmethod
    def validate_start_time(cls, v):
        return validate_time_of_day(v)


class AssistantRequest(BaseModel):
    text: str = Field(..., min_length=1)


class AssistantReply(BaseModel):
    intent: IntentKind
    reply: str
    appointment: Optional[AppointmentResponse] = None
