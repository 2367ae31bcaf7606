"""Client router - FastAPI endpoints for clients and recurring plans"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...database import get_db
from .schemas import ClientCreate, ClientResponse, ClientUpdate, PlanResponse, PlanUpsert
from .service import ClientService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/clients", tags=["Clients"])


def get_client_service(db: Session = Depends(get_db)) -> ClientService:
    """Dependency injection for ClientService"""
    return ClientService(db)


# ============================================================================
# CORE CRUD OPERATIONS
# ============================================================================


@router.get("", response_model=list[ClientResponse])
async def get_clients(service: ClientService = Depends(get_client_service)):
    """Get all clients"""
    return [ClientResponse.model_validate(c) for c in service.get_clients()]


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(client_id: int, service: ClientService = Depends(get_client_service)):
    """Get a specific client"""
    return ClientResponse.model_validate(service.get_client(client_id))


@router.post("", response_model=ClientResponse, status_code=201)
async def create_client(data: ClientCreate, service: ClientService = Depends(get_client_service)):
    """Create a new client"""
    return ClientResponse.model_validate(service.create_client(data))


@router.patch("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: int,
    data: ClientUpdate,
    service: ClientService = Depends(get_client_service),
):
    """Update a client"""
    return ClientResponse.model_validate(service.update_client(client_id, data))


@router.delete("/{client_id}")
async def delete_client(client_id: int, service: ClientService = Depends(get_client_service)):
    """Delete a client with its plan and visits"""
    return service.delete_client(client_id)


# ============================================================================
# RECURRING PLAN
# ============================================================================


@router.get("/{client_id}/plan", response_model=PlanResponse)
async def get_plan(client_id: int, service: ClientService = Depends(get_client_service)):
    """Get the client's recurring plan with its projected target date"""
    return service.to_plan_response(service.get_plan(client_id))


@router.put("/{client_id}/plan", response_model=PlanResponse)
async def upsert_plan(
    client_id: int,
    data: PlanUpsert,
    service: ClientService = Depends(get_client_service),
):
    """Create or replace the client's recurring plan"""
    return service.to_plan_response(service.upsert_plan(client_id, data))
