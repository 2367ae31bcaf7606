"""Scheduling router - smart visit suggestions and one-click booking"""

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...database import get_db
from ..appointments.schemas import AppointmentResponse
from ..appointments.service import AppointmentService
from .schemas import BookSuggestionRequest, SuggestionListResponse, WasteDayResponse
from .service import SchedulingService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scheduling", tags=["Scheduling"])


def get_scheduling_service(db: Session = Depends(get_db)) -> SchedulingService:
    """Dependency injection for SchedulingService"""
    return SchedulingService(db)


@router.get("/clients/{client_id}/suggestions", response_model=SuggestionListResponse)
async def get_suggestions(
    client_id: int, service: SchedulingService = Depends(get_scheduling_service)
):
    """Top three dates for the client's next visit, best first"""
    return service.get_suggestions(client_id)


@router.post(
    "/clients/{client_id}/book", response_model=AppointmentResponse, status_code=201
)
async def book_suggestion(
    client_id: int,
    data: BookSuggestionRequest,
    service: SchedulingService = Depends(get_scheduling_service),
):
    """Book the suggestion the scheduler picked"""
    return AppointmentService.to_response(service.book_suggestion(client_id, data))


@router.get("/waste-day", response_model=WasteDayResponse)
async def get_waste_day(
    date: str = Query(..., description="YYYY-MM-DD"),
    area: str = Query(...),
    service: SchedulingService = Depends(get_scheduling_service),
):
    """Whether a date is a waste pickup day in an area"""
    return service.waste_day(date, area)
