# src/modules/service_requests/service_requests_service.py
"""
Service request lifecycle.

A request moves pendiente -> en_progreso -> completado; completado is
terminal. Messages, reviews and payments all check the caller against the
request's user_id/nurse_id before acting.

Every operation is a read followed by a write with no locking, so two
concurrent transitions on the same request both succeed and the last write
wins.
"""

import logging
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.auth_service import CurrentIdentity
from src.common.config import settings
from src.common.exceptions import (
    AccessDenied, InvalidState, NotFound, ValidationError, translate_storage_errors,
)
from src.common.utils.global_messages import GlobalMessages
from src.models.models import Nurse, Patient, ServiceRequest, ServiceRequestStatus
from .schemas import ServiceRequestCreateRequest

logger = logging.getLogger(__name__)


def parse_status(value: Optional[str]) -> ServiceRequestStatus:
    """Map a raw estado value onto the three lifecycle states."""
    try:
        return ServiceRequestStatus(value)
    except ValueError as exc:
        raise InvalidState(GlobalMessages.SERVICE_REQUEST_INVALID_STATE) from exc


def is_party(service_request: ServiceRequest, identity_id: str) -> bool:
    return identity_id in (service_request.user_id, service_request.nurse_id)


async def _get_service_request(db: AsyncSession, request_id: str) -> ServiceRequest:
    service_request = await db.get(ServiceRequest, request_id)
    if service_request is None:
        raise NotFound(GlobalMessages.SERVICE_REQUEST_NOT_FOUND)
    return service_request


async def get_request_for_party(
    db: AsyncSession,
    caller: CurrentIdentity,
    request_id: str,
) -> ServiceRequest:
    """
    Load a service request the caller takes part in.

    A missing request and a request the caller is not part of fail the same
    way, so ids of other people's requests cannot be probed.
    """
    service_request = await db.get(ServiceRequest, request_id)
    if service_request is None or not is_party(service_request, caller.identity_id):
        logger.warning("Identity %s denied access to service request %s", caller.identity_id, request_id)
        raise AccessDenied(GlobalMessages.ACCESS_DENIED)
    return service_request


async def _check_references(db: AsyncSession, nurse_id: str, patient_ids: List[str]) -> None:
    if await db.get(Nurse, nurse_id) is None:
        raise ValidationError(GlobalMessages.NURSE_NOT_FOUND)

    result = await db.execute(
        select(func.count(Patient.id)).where(Patient.id.in_(set(patient_ids)))
    )
    if (result.scalar() or 0) != len(set(patient_ids)):
        raise ValidationError(GlobalMessages.PATIENT_NOT_FOUND)


@translate_storage_errors("Error creating the service request")
async def create_service_request(
    db: AsyncSession,
    request: ServiceRequestCreateRequest,
) -> ServiceRequest:
    """
    Create a service request.

    The initial estado comes from the caller and must be one of the lifecycle
    states. nurse_id and patient_ids are only checked for existence when
    VALIDATE_SERVICE_REQUEST_REFERENCES is on. Payment flags always start
    false; only payment and release change them.
    """
    if not request.user_id:
        raise ValidationError(GlobalMessages.SERVICE_REQUEST_USER_REQUIRED)
    estado = parse_status(request.estado)

    if settings.VALIDATE_SERVICE_REQUEST_REFERENCES:
        await _check_references(db, request.nurse_id, request.patient_ids)

    service_request = ServiceRequest(
        user_id=request.user_id,
        nurse_id=request.nurse_id,
        patient_ids=list(request.patient_ids),
        estado=estado,
        detalles=request.detalles,
        fecha=request.fecha,
        tarifa=request.tarifa,
    )
    db.add(service_request)
    await db.commit()
    await db.refresh(service_request)

    logger.info("Service request %s created for nurse %s", service_request.id, service_request.nurse_id)
    return service_request


@translate_storage_errors("Error changing the state of the service request")
async def transition_service_request(
    db: AsyncSession,
    caller: CurrentIdentity,
    request_id: str,
    new_estado: Optional[str],
) -> ServiceRequest:
    """
    Move a service request to another state.

    The value is validated before anything is read, and nothing is written
    unless every rule passes.
    """
    estado = parse_status(new_estado)
    service_request = await _get_service_request(db, request_id)

    if settings.ENFORCE_NURSE_TRANSITIONS and caller.identity_id != service_request.nurse_id:
        logger.warning(
            "Identity %s tried to move service request %s assigned to %s",
            caller.identity_id, request_id, service_request.nurse_id,
        )
        raise AccessDenied(GlobalMessages.SERVICE_REQUEST_NOT_ASSIGNED)

    if service_request.estado == ServiceRequestStatus.COMPLETED and estado != ServiceRequestStatus.COMPLETED:
        raise InvalidState(GlobalMessages.SERVICE_REQUEST_COMPLETED)

    previous = service_request.estado
    service_request.estado = estado
    await db.commit()
    await db.refresh(service_request)

    logger.info("Service request %s moved %s -> %s", request_id, previous.value, estado.value)
    return service_request


@translate_storage_errors("Error fetching service requests")
async def list_for_nurse(db: AsyncSession, nurse_id: str) -> List[ServiceRequest]:
    result = await db.execute(select(ServiceRequest).where(ServiceRequest.nurse_id == nurse_id))
    service_requests = list(result.scalars().all())
    if not service_requests:
        raise NotFound(GlobalMessages.NO_REQUESTS_FOR_NURSE)
    return service_requests


@translate_storage_errors("Error fetching service requests")
async def list_all(db: AsyncSession) -> List[ServiceRequest]:
    """Every service request in storage, regardless of who asks."""
    result = await db.execute(select(ServiceRequest))
    return list(result.scalars().all())


@translate_storage_errors("Error fetching the service request")
async def get_service_request(
    db: AsyncSession,
    caller: CurrentIdentity,
    request_id: str,
) -> ServiceRequest:
    return await get_request_for_party(db, caller, request_id)


@translate_storage_errors("Error releasing the payment")
async def release_payment(
    db: AsyncSession,
    caller: CurrentIdentity,
    request_id: str,
) -> ServiceRequest:
    """Release a paid request's funds to the nurse once the service is completed."""
    service_request = await _get_service_request(db, request_id)
    if service_request.user_id != caller.identity_id:
        raise AccessDenied(GlobalMessages.ACCESS_DENIED)

    if service_request.estado != ServiceRequestStatus.COMPLETED or not service_request.pago_realizado:
        raise ValidationError(GlobalMessages.PAYMENT_NOT_RELEASABLE)

    service_request.pago_liberado = True
    await db.commit()
    await db.refresh(service_request)

    logger.info("Payment released for service request %s", request_id)
    return service_request
