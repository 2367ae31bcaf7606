"""Client domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ...shared.validators import validate_il_phone, validate_iso_date
from ..scheduling.schemas import WastePreference


class ClientCreate(BaseModel):
    """Schema for creating a new client"""

    name: str = Field(..., min_length=1)
    phone: Optional[str] = None
    address: Optional[str] = None
    area: str = Field(..., min_length=1)
    avatar: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v):
        if v:
            return validate_il_phone(v)
        return v


class ClientUpdate(BaseModel):
    """Schema for updating an existing client"""

    name: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    area: Optional[str] = None
    avatar: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v):
        if v:
            return validate_il_phone(v)
        return v


class ClientResponse(BaseModel):
    """Schema for client response"""

    id: int
    name: str
    phone: Optional[str]
    address: Optional[str]
    area: str
    avatar: Optional[str] = None
    notes: Optional[str]
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PlanUpsert(BaseModel):
    """Schema for creating or replacing a client's recurring plan"""

    baseIntervalDays: int = Field(..., gt=0)
    wastePreference: WastePreference = WastePreference.IGNORE
    lastVisitDate: str
    seasonalAdjustments: dict[int, int] = Field(default_factory=dict)

    @field_validator("lastVisitDate")
    @classmethod
    def validate_last_visit(cls, v):
        return validate_iso_date(v)

    @field_validator("seasonalAdjustments")
    @classmethod
    def validate_months(cls, v):
        for month in v:
            if not 0 <= month <= 11:
                raise ValueError("Seasonal adjustment months must be between 0 and 11")
        return v


class PlanResponse(BaseModel):
    """Schema for recurring plan response"""

    clientId: int
    baseIntervalDays: int
    wastePreference: WastePreference
    lastVisitDate: str
    seasonalAdjustments: dict[int, int]
    targetDate: str
