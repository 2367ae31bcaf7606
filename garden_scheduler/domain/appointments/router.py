"""Appointment router - FastAPI endpoints for manual visit entry"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...database import get_db
from .schemas import AppointmentCreate, AppointmentResponse, AppointmentUpdate
from .service import AppointmentService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/appointments", tags=["Appointments"])


def get_appointment_service(db: Session = Depends(get_db)) -> AppointmentService:
    """Dependency injection for AppointmentService"""
    return AppointmentService(db)


@router.get("", response_model=list[AppointmentResponse])
async def get_appointments(
    date: Optional[str] = Query(None, description="YYYY-MM-DD"),
    client_id: Optional[int] = Query(None),
    service: AppointmentService = Depends(get_appointment_service),
):
    """List visits, optionally for one day or one client"""
    return [service.to_response(a) for a in service.get_appointments(date, client_id)]


@router.get("/{appointment_id}", response_model=AppointmentResponse)
async def get_appointment(
    appointment_id: int, service: AppointmentService = Depends(get_appointment_service)
):
    return service.to_response(service.get_appointment(appointment_id))


@router.post("", response_model=AppointmentResponse, status_code=201)
async def create_appointment(
    data: AppointmentCreate, service: AppointmentService = Depends(get_appointment_service)
):
    """Book a visit by hand; rejects invalid times, negative prices and overlaps"""
    return service.to_response(service.create_appointment(data))


@router.patch("/{appointment_id}", response_model=AppointmentResponse)
async def update_appointment(
    appointment_id: int,
    data: AppointmentUpdate,
    service: AppointmentService = Depends(get_appointment_service),
):
    """Edit a visit; the visit itself is ignored by the overlap check"""
    return service.to_response(service.update_appointment(appointment_id, data))


@router.delete("/{appointment_id}")
async def delete_appointment(
    appointment_id: int, service: AppointmentService = Depends(get_appointment_service)
):
    return service.delete_appointment(appointment_id)
