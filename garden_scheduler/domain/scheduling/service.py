"""Scheduling service - Runs the suggestion engine against stored data"""

import logging
from datetime import date, datetime, timedelta
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...config import DEFAULT_VISIT_DURATION_MINUTES, DEFAULT_VISIT_START_TIME
from ...models import Appointment
from ..appointments.repository import AppointmentRepository
from ..appointments.schemas import AppointmentCreate, AppointmentType
from ..appointments.service import AppointmentService
from ..clients.repository import ClientRepository
from ..waste_rules.repository import WasteRuleRepository
from .calendar import format_date, is_waste_pickup_day, parse_date
from .engine import generate_suggestions
from .schemas import (
    AppointmentData,
    BookSuggestionRequest,
    RecurringPlanData,
    SuggestionListResponse,
    WasteDayResponse,
    WasteRuleData,
)
from .target_date import calculate_target_date

logger = logging.getLogger(__name__)

SMART_BOOKING_INSTRUCTIONS = "Created by smart scheduler"


def add_minutes(time_of_day: str, minutes: int) -> str:
    """Shift an HH:mm time; raises ValueError when the result passes midnight"""
    start = datetime.strptime(time_of_day, "%H:%M")
    end = start + timedelta(minutes=minutes)
    if end.date() != start.date():
        raise ValueError("Visit must end on the same day it starts")
    return end.strftime("%H:%M")


class SchedulingService:
    """Service layer for smart scheduling"""

    def __init__(self, db: Session):
        self.db = db
        self.client_repo = ClientRepository()
        self.appointment_repo = AppointmentRepository()
        self.waste_repo = WasteRuleRepository()

    def _load_plan(self, client_id: int):
        client = self.client_repo.get_client_by_id(self.db, client_id)
        if not client:
            raise HTTPException(status_code=404, detail="Client not found")
        plan = self.client_repo.get_plan(self.db, client_id)
        if not plan:
            raise HTTPException(status_code=404, detail="Client has no recurring plan")
        return client, RecurringPlanData.model_validate(plan)

    def get_suggestions(self, client_id: int, today: Optional[date] = None) -> SuggestionListResponse:
        """Rank visit dates around the client's next target date"""
        client, plan = self._load_plan(client_id)

        rules = [WasteRuleData.model_validate(r) for r in self.waste_repo.get_rules(self.db)]
        appointments = [
            AppointmentData.model_validate(a)
            for a in self.appointment_repo.get_appointments(self.db)
        ]

        suggestions = generate_suggestions(plan, client.area, rules, appointments, today=today)
        target = calculate_target_date(plan)

        logger.info(
            f"🌿 {len(suggestions)} suggestion(s) for client {client_id} around {format_date(target)}"
        )
        return SuggestionListResponse(
            client_id=client_id,
            target_date=format_date(target),
            suggestions=suggestions,
        )

    def book_suggestion(self, client_id: int, data: BookSuggestionRequest) -> Appointment:
        """Turn the chosen suggestion date and start time into a recurring visit"""
        self._load_plan(client_id)

        start_time = data.start_time or DEFAULT_VISIT_START_TIME
        try:
            end_time = add_minutes(start_time, DEFAULT_VISIT_DURATION_MINUTES)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e)) from None

        booking = AppointmentCreate(
            clientId=client_id,
            date=data.date,
            startTime=start_time,
            endTime=end_time,
            type=AppointmentType.RECURRING,
            instructions=SMART_BOOKING_INSTRUCTIONS,
            price=0,
        )
        return AppointmentService(self.db).create_appointment(booking)

    def waste_day(self, day: str, area: str) -> WasteDayResponse:
        try:
            parsed = parse_date(day)
        except ValueError:
            raise HTTPException(status_code=400, detail="Invalid date format") from None

        rules = self.waste_repo.get_rules(self.db, area=area)
        return WasteDayResponse(
            date=format_date(parsed),
            area=area,
            is_waste_pickup_day=is_waste_pickup_day(parsed, area, rules),
        )
