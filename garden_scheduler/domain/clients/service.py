"""Client service - Business logic for clients and recurring plans"""

import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...models import Client, RecurringPlan
from ..scheduling.calendar import format_date
from ..scheduling.schemas import RecurringPlanData
from ..scheduling.target_date import calculate_target_date
from .repository import ClientRepository
from .schemas import ClientCreate, ClientUpdate, PlanResponse, PlanUpsert

logger = logging.getLogger(__name__)


class ClientService:
    """Service layer for client business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ClientRepository()

    def get_clients(self) -> list[Client]:
        return self.repo.get_clients(self.db)

    def get_client(self, client_id: int) -> Client:
        """Get a specific client"""
        client = self.repo.get_client_by_id(self.db, client_id)
        if not client:
            raise HTTPException(status_code=404, detail="Client not found")
        return client

    def create_client(self, data: ClientCreate) -> Client:
        """Create a new client"""
        logger.info(f"📥 Creating client '{data.name}' in area {data.area}")
        return self.repo.create_client(self.db, **data.model_dump())

    def update_client(self, client_id: int, data: ClientUpdate) -> Client:
        """Update a client"""
        client = self.get_client(client_id)
        return self.repo.update_client(self.db, client, **data.model_dump(exclude_unset=True))

    def delete_client(self, client_id: int) -> dict:
        """Delete a client"""
        client = self.get_client(client_id)
        self.repo.delete_client(self.db, client)
        logger.info(f"🗑️ Deleted client {client_id}")
        return {"message": "Client deleted"}

    def get_plan(self, client_id: int) -> RecurringPlan:
        """Get a client's recurring plan"""
        self.get_client(client_id)
        plan = self.repo.get_plan(self.db, client_id)
        if not plan:
            raise HTTPException(status_code=404, detail="Recurring plan not found")
        return plan

    def upsert_plan(self, client_id: int, data: PlanUpsert) -> RecurringPlan:
        """Create or replace a client's recurring plan"""
        self.get_client(client_id)
        plan = self.repo.upsert_plan(
            self.db,
            client_id,
            base_interval_days=data.baseIntervalDays,
            waste_preference=data.wastePreference.value,
            last_visit_date=data.lastVisitDate,
            # JSON object keys are strings
            seasonal_adjustments={str(k): v for k, v in data.seasonalAdjustments.items()},
        )
        logger.info(
            f"📅 Saved plan for client {client_id}: every {plan.base_interval_days} days, "
            f"waste preference {plan.waste_preference}"
        )
        return plan

    @staticmethod
    def to_plan_response(plan: RecurringPlan) -> PlanResponse:
        data = RecurringPlanData.model_validate(plan)
        return PlanResponse(
            clientId=plan.client_id,
            baseIntervalDays=data.base_interval_days,
            wastePreference=data.waste_preference,
            lastVisitDate=format_date(data.last_visit_date),
            seasonalAdjustments=data.seasonal_adjustments,
            targetDate=format_date(calculate_target_date(data)),
        )
