"""Waste rule router - weekly municipal pickup days per service area"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ...database import get_db
from ...models import WasteScheduleRule
from .repository import WasteRuleRepository
from .schemas import WasteRuleCreate, WasteRuleResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/waste-rules", tags=["Waste Rules"])


def _to_response(rule: WasteScheduleRule) -> WasteRuleResponse:
    return WasteRuleResponse(id=rule.id, area=rule.area, dayOfWeek=rule.day_of_week)


@router.get("", response_model=list[WasteRuleResponse])
async def get_waste_rules(area: Optional[str] = Query(None), db: Session = Depends(get_db)):
    """List pickup rules, optionally for one area"""
    return [_to_response(r) for r in WasteRuleRepository.get_rules(db, area)]


@router.post("", response_model=WasteRuleResponse, status_code=201)
async def create_waste_rule(data: WasteRuleCreate, db: Session = Depends(get_db)):
    """Add a weekly pickup day for an area"""
    rule = WasteRuleRepository.create_rule(db, data.area, data.dayOfWeek)
    logger.info(f"🗑️ Waste pickup rule added: area={rule.area}, day={rule.day_of_week}")
    return _to_response(rule)


@router.delete("/{rule_id}")
async def delete_waste_rule(rule_id: int, db: Session = Depends(get_db)):
    """Remove a pickup rule"""
    rule = WasteRuleRepository.get_rule_by_id(db, rule_id)
    if not rule:
        raise HTTPException(status_code=404, detail="Waste rule not found")
    WasteRuleRepository.delete_rule(db, rule)
    return {"message": "Waste rule deleted"}
