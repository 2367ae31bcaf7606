"""Appointment service - Manual visit entry with validation"""

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...models import Appointment, Client
from ...shared.validators import is_time_range_valid
from ..clients.repository import ClientRepository
from ..scheduling.calendar import is_waste_pickup_day
from ..scheduling.overlap import check_overlap
from ..scheduling.schemas import AppointmentDraft
from ..waste_rules.repository import WasteRuleRepository
from .repository import AppointmentRepository
from .schemas import AppointmentCreate, AppointmentResponse, AppointmentUpdate

logger = logging.getLogger(__name__)

INVALID_TIME_RANGE = "End time must be later than start time."
NEGATIVE_PRICE = "Price cannot be negative."
OVERLAPPING_VISIT = "The visit overlaps an existing visit in the calendar."


class AppointmentService:
    """Service layer for booking, editing and removing visits"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = AppointmentRepository()
        self.client_repo = ClientRepository()
        self.waste_repo = WasteRuleRepository()

    def get_appointments(
        self, date: Optional[str] = None, client_id: Optional[int] = None
    ) -> list[Appointment]:
        return self.repo.get_appointments(self.db, date=date, client_id=client_id)

    def get_appointment(self, appointment_id: int) -> Appointment:
        appointment = self.repo.get_appointment_by_id(self.db, appointment_id)
        if not appointment:
            raise HTTPException(status_code=404, detail="Appointment not found")
        return appointment

    def _get_client(self, client_id: int) -> Client:
        client = self.client_repo.get_client_by_id(self.db, client_id)
        if not client:
            raise HTTPException(status_code=404, detail="Client not found")
        return client

    def is_waste_day(self, client: Client, date: str) -> bool:
        """Whether ``date`` is a waste pickup day in the client's area"""
        rules = self.waste_repo.get_rules(self.db, area=client.area)
        return is_waste_pickup_day(date, client.area, rules)

    def validate_visit(self, draft: AppointmentDraft, price: Optional[float]) -> None:
        """
        Collect every problem with a visit before saving it.

        Raises 409 when the only problem is a time overlap, 400 otherwise.
        """
        errors = []
        if not is_time_range_valid(draft.start_time, draft.end_time):
            errors.append(INVALID_TIME_RANGE)
        if price is not None and price < 0:
            errors.append(NEGATIVE_PRICE)

        same_day = self.repo.get_appointments(self.db, date=draft.date)
        if check_overlap(draft, same_day):
            errors.append(OVERLAPPING_VISIT)

        if errors == [OVERLAPPING_VISIT]:
            logger.warning(
                f"⚠️ Visit on {draft.date} {draft.start_time}-{draft.end_time} overlaps an existing visit"
            )
            raise HTTPException(status_code=409, detail=OVERLAPPING_VISIT)
        if errors:
            raise HTTPException(status_code=400, detail=errors)

    def create_appointment(self, data: AppointmentCreate) -> Appointment:
        """Validate and book a new visit"""
        client = self._get_client(data.clientId)

        draft = AppointmentDraft(date=data.date, start_time=data.startTime, end_time=data.endTime)
        self.validate_visit(draft, data.price)

        appointment = self.repo.create_appointment(
            self.db,
            client_id=client.id,
            date=data.date,
            start_time=data.startTime,
            end_time=data.endTime,
            type=data.type.value,
            instructions=data.instructions,
            price=data.price,
            is_waste_pickup_day=self.is_waste_day(client, data.date),
            garden_photo_url=data.gardenPhotoUrl,
            status=data.status.value,
        )
        logger.info(
            f"✅ Booked visit {appointment.id} for client {client.id} on "
            f"{appointment.date} {appointment.start_time}-{appointment.end_time}"
        )
        return appointment

    def update_appointment(self, appointment_id: int, data: AppointmentUpdate) -> Appointment:
        """Validate and apply changes to an existing visit"""
        appointment = self.get_appointment(appointment_id)
        client = self._get_client(
            data.clientId if data.clientId is not None else appointment.client_id
        )

        draft = AppointmentDraft(
            id=appointment.id,
            date=data.date or appointment.date,
            start_time=data.startTime or appointment.start_time,
            end_time=data.endTime or appointment.end_time,
        )
        self.validate_visit(draft, data.price)

        updates = {
            "client_id": client.id,
            "date": draft.date,
            "start_time": draft.start_time,
            "end_time": draft.end_time,
            "type": data.type.value if data.type else None,
            "instructions": data.instructions,
            "price": data.price,
            "garden_photo_url": data.gardenPhotoUrl,
            "status": data.status.value if data.status else None,
        }
        appointment = self.repo.update_appointment(self.db, appointment, **updates)

        # Bool field is set directly, the repository skips None but not False
        appointment.is_waste_pickup_day = self.is_waste_day(client, appointment.date)
        self.db.commit()
        self.db.refresh(appointment)
        return appointment

    def delete_appointment(self, appointment_id: int) -> dict:
        appointment = self.get_appointment(appointment_id)
        self.repo.delete_appointment(self.db, appointment)
        logger.info(f"🗑️ Deleted visit {appointment_id}")
        return {"message": "Appointment deleted"}

    @staticmethod
    def to_response(appointment: Appointment) -> AppointmentResponse:
        return AppointmentResponse(
            id=appointment.id,
            clientId=appointment.client_id,
            date=appointment.date,
            startTime=appointment.start_time,
            endTime=appointment.end_time,
            type=appointment.type,
            instructions=appointment.instructions,
            price=appointment.price,
            isWastePickupDay=appointment.is_waste_pickup_day,
            gardenPhotoUrl=appointment.garden_photo_url,
            status=appointment.status,
            created_at=appointment.created_at,
        )
