from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .database import Base


class Client(Base):
    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=True)
    address = Column(String(500), nullable=True)
    # Service area, matched against waste pickup rules
    area = Column(String(100), nullable=False, index=True)
    avatar = Column(Text, nullable=True)
    notes = Column(String(1000), nullable=True)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    plan = relationship(
        "RecurringPlan", back_populates="client", uselist=False, cascade="all, delete-orphan"
    )
    appointments = relationship(
        "Appointment", back_populates="client", cascade="all, delete-orphan"
    )


class RecurringPlan(Base):
    """Standing service agreement that drives smart scheduling for a client"""

    __tablename__ = "recurring_plans"

    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, ForeignKey("clients.id"), unique=True, nullable=False)
    base_interval_days = Column(Integer, nullable=False)
    waste_preference = Column(String(20), default="IGNORE", nullable=False)  # AVOID, PREFER, IGNORE
    last_visit_date = Column(String(10), nullable=False)  # YYYY-MM-DD
    # Month index (0-11, as string keys) -> signed days added to the base interval
    seasonal_adjustments = Column(JSON, nullable=True)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    client = relationship("Client", back_populates="plan")


class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)

    # Dates and times are fixed-width strings so they compare lexicographically
    date = Column(String(10), nullable=False, index=True)  # YYYY-MM-DD
    start_time = Column(String(5), nullable=False)  # HH:mm
    end_time = Column(String(5), nullable=False)  # HH:mm

    type = Column(String(20), default="One-off", nullable=False)  # One-off, Recurring
    instructions = Column(Text, nullable=True)
    price = Column(Float, default=0, nullable=False)
    is_waste_pickup_day = Column(Boolean, default=False, nullable=False)
    garden_photo_url = Column(Text, nullable=True)
    status = Column(String(20), default="scheduled", nullable=False)  # scheduled, completed, cancelled

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    client = relationship("Client", back_populates="appointments")


class WasteScheduleRule(Base):
    """Weekly municipal waste pickup day for a service area"""

    __tablename__ = "waste_schedule_rules"

    id = Column(Integer, primary_key=True, index=True)
    area = Column(String(100), nullable=False, index=True)
    day_of_week = Column(Integer, nullable=False)  # 0 = Sunday ... 6 = Saturday

    created_at = Column(DateTime, server_default=func.now())
