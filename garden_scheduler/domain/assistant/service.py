"""Booking assistant service - books visits from parsed free-text requests"""

import logging
from datetime import date
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...config import BUSINESS_TIMEZONE
from ..appointments.schemas import AppointmentCreate, AppointmentType
from ..appointments.service import AppointmentService
from ..clients.repository import ClientRepository
from ..scheduling.calendar import format_date, today_in
from ..scheduling.service import add_minutes
from .parser import GeminiIntentParser
from .schemas import AssistantReply, IntentKind

logger = logging.getLogger(__name__)

DEFAULT_START_TIME = "09:00"
ASSISTANT_INSTRUCTIONS = "Created by booking assistant"
CLIENT_NOT_FOUND_REPLY = "No client found with that name."
FALLBACK_REPLY = "I understood, but could not create the visit."


class AssistantService:
    """Service layer for the booking assistant"""

    def __init__(self, db: Session, parser: GeminiIntentParser):
        self.db = db
        self.parser = parser
        self.client_repo = ClientRepository()

    async def handle_request(self, text: str, today: Optional[date] = None) -> AssistantReply:
        """Parse the request and book a one-off visit when it asks for one"""
        if today is None:
            today = today_in(BUSINESS_TIMEZONE)

        clients = self.client_repo.get_clients(self.db)
        intent = await self.parser.parse(text, clients, today)
        logger.info(f"🤖 Assistant intent: {intent.intent.value} (client={intent.clientId})")

        if intent.intent != IntentKind.SCHEDULE or intent.clientId is None:
            return AssistantReply(intent=intent.intent, reply=intent.explanation or FALLBACK_REPLY)

        client = self.client_repo.get_client_by_id(self.db, intent.clientId)
        if not client:
            return AssistantReply(intent=intent.intent, reply=CLIENT_NOT_FOUND_REPLY)

        start_time = intent.startTime or DEFAULT_START_TIME
        try:
            end_time = add_minutes(start_time, intent.durationMinutes)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e)) from None

        appointments = AppointmentService(self.db)
        appointment = appointments.create_appointment(
            AppointmentCreate(
                clientId=client.id,
                date=intent.date or format_date(today),
                startTime=start_time,
                endTime=end_time,
                type=AppointmentType.ONE_OFF,
                instructions=intent.instructions or ASSISTANT_INSTRUCTIONS,
                price=0,
            )
        )

        return AssistantReply(
            intent=intent.intent,
            reply=f"Done! Booked {client.name} on {appointment.date}.",
            appointment=appointments.to_response(appointment),
        )
