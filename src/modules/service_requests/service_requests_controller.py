# src/modules/service_requests/service_requests_controller.py
"""Service requests controller with API routes."""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.auth_service import CurrentIdentity
from src.auth.dependencies import get_current_identity
from src.common.database.database import get_db_session

from . import service_requests_service as service
from .schemas import (
    PaymentReleaseResponse, ServiceRequestCreateRequest, ServiceRequestResponse,
    StateUpdateRequest, StateUpdateResponse,
)

router = APIRouter(prefix="/service-requests", tags=["Service Requests"])


@router.get("", response_model=List[ServiceRequestResponse])
async def list_service_requests(
    db: AsyncSession = Depends(get_db_session),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """Get every service request."""
    return await service.list_all(db)


@router.post("", response_model=ServiceRequestResponse, status_code=status.HTTP_201_CREATED)
async def create_service_request(
    request: ServiceRequestCreateRequest,
    db: AsyncSession = Depends(get_db_session),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """Create a new service request."""
    return await service.create_service_request(db, request)


@router.get("/nurse/{nurse_id}", response_model=List[ServiceRequestResponse])
async def list_nurse_service_requests(
    nurse_id: str,
    db: AsyncSession = Depends(get_db_session),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """Get the service requests assigned to a nurse."""
    return await service.list_for_nurse(db, nurse_id)


@router.get("/{request_id}", response_model=ServiceRequestResponse)
async def get_service_request(
    request_id: str,
    db: AsyncSession = Depends(get_db_session),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """Get a single service request the caller takes part in."""
    return await service.get_service_request(db, identity, request_id)


@router.put("/{request_id}/estado", response_model=StateUpdateResponse)
async def update_state(
    request_id: str,
    request: StateUpdateRequest,
    db: AsyncSession = Depends(get_db_session),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """Move a service request to pendiente, en_progreso or completado."""
    service_request = await service.transition_service_request(db, identity, request_id, request.estado)
    return StateUpdateResponse(service_request=ServiceRequestResponse.model_validate(service_request))


@router.post("/{request_id}/release-payment", response_model=PaymentReleaseResponse)
async def release_payment(
    request_id: str,
    db: AsyncSession = Depends(get_db_session),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """Release the payment of a completed service request to its nurse."""
    service_request = await service.release_payment(db, identity, request_id)
    return PaymentReleaseResponse(service_request=ServiceRequestResponse.model_validate(service_request))
