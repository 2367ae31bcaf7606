"""Waste schedule rule schemas"""

from pydantic import BaseModel, Field


class WasteRuleCreate(BaseModel):
    area: str = Field(..., min_length=1)
    dayOfWeek: int = Field(..., ge=0, le=6, description="0 = Sunday ... 6 = Saturday")


class WasteRuleResponse(BaseModel):
    id: int
    area: str
    dayOfWeek: int
