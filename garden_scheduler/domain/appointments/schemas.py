"""Appointment domain schemas - Pydantic models for validation"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, field_validator

from ...shared.validators import validate_iso_date, validate_time_of_day


class AppointmentType(str, Enum):
    ONE_OFF = "One-off"
    RECURRING = "Recurring"


class AppointmentStatus(str, Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class AppointmentCreate(BaseModel):
    """Schema for booking a visit"""

    clientId: int
    date: str
    startTime: str
    endTime: str
    type: AppointmentType = AppointmentType.ONE_OFF
    instructions: Optional[str] = None
    price: float = 0
    gardenPhotoUrl: Optional[str] = None
    status: AppointmentStatus = AppointmentStatus.SCHEDULED

    @field_validator("date")
    @classmethod
    def validate_date(cls, v):
        return validate_iso_date(v)

    @field_validator("startTime", "endTime")
    @classmethod
    def validate_time(cls, v):
        return validate_time_of_day(v)


class AppointmentUpdate(BaseModel):
    """Schema for editing a visit; omitted fields keep their value"""

    clientId: Optional[int] = None
    date: Optional[str] = None
    startTime: Optional[str] = None
    endTime: Optional[str] = None
    type: Optional[AppointmentType] = None
    instructions: Optional[str] = None
    price: Optional[float] = None
    gardenPhotoUrl: Optional[str] = None
    status: Optional[AppointmentStatus] = None

    @field_validator("date")
    @classmethod
    def validate_date(cls, v):
        return validate_iso_date(v)

    @field_validator("startTime", "endTime")
    @classmethod
    def validate_time(cls, v):
        return validate_time_of_day(v)


class AppointmentResponse(BaseModel):
    id: int
    clientId: int
    date: str
    startTime: str
    endTime: str
    type: AppointmentType
    instructions: Optional[str]
    price: float
    isWastePickupDay: bool
    gardenPhotoUrl: Optional[str]
    status: AppointmentStatus
    created_at: Optional[datetime] = None
