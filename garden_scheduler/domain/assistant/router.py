"""Booking assistant router"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ...database import get_db
from .parser import AssistantError, GeminiIntentParser
from .schemas import AssistantReply, AssistantRequest
from .service import AssistantService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/assistant", tags=["Assistant"])


def get_intent_parser() -> GeminiIntentParser:
    return GeminiIntentParser()


def get_assistant_service(
    db: Session = Depends(get_db), parser: GeminiIntentParser = Depends(get_intent_parser)
) -> AssistantService:
    """Dependency injection for AssistantService"""
    return AssistantService(db, parser)


@router.post("/requests", response_model=AssistantReply)
async def handle_request(
    data: AssistantRequest, service: AssistantService = Depends(get_assistant_service)
):
    """Book a visit from a free-text request such as 'schedule Sarah next Tuesday at 10'"""
    try:
        return await service.handle_request(data.text)
    except AssistantError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
