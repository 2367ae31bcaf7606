"""Appointment repository - Database operations for booked visits"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import Appointment


class AppointmentRepository:
    """Repository for appointment database operations"""

    @staticmethod
    def get_appointments(
        db: Session,
        date: Optional[str] = None,
        client_id: Optional[int] = None,
    ) -> list[Appointment]:
        """Get visits ordered by date and start time, optionally filtered"""
        query = db.query(Appointment)

        if date:
            query = query.filter(Appointment.date == date)

        if client_id is not None:
            query = query.filter(Appointment.client_id == client_id)

        return query.order_by(Appointment.date, Appointment.start_time).all()

    @staticmethod
    def get_appointment_by_id(db: Session, appointment_id: int) -> Optional[Appointment]:
        return db.query(Appointment).filter(Appointment.id == appointment_id).first()

    @staticmethod
    def create_appointment(db: Session, **appointment_data) -> Appointment:
        appointment = Appointment(**appointment_data)
        db.add(appointment)
        db.commit()
        db.refresh(appointment)
        return appointment

    @staticmethod
    def update_appointment(db: Session, appointment: Appointment, **updates) -> Appointment:
        for key, value in updates.items():
            if value is not None and hasattr(appointment, key):
                setattr(appointment, key, value)

        db.commit()
        db.refresh(appointment)
        return appointment

    @staticmethod
    def delete_appointment(db: Session, appointment: Appointment) -> None:
        db.delete(appointment)
        db.commit()
