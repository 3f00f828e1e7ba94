# src/modules/patients/patients_service.py
"""Patients owned by a user account."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.auth_service import CurrentIdentity
from src.common.exceptions import AccessDenied, NotFound, ValidationError, translate_storage_errors
from src.common.utils.global_messages import GlobalMessages
from src.common.utils.pagination import fetch_page
from src.models.models import Patient
from .schemas import (
    PatientCreateRequest, PatientListResponse, PatientResponse, PatientUpdateRequest,
)

logger = logging.getLogger(__name__)


async def _get_owned_patient(db: AsyncSession, caller: CurrentIdentity, patient_id: str) -> Patient:
    patient = await db.get(Patient, patient_id)
    if patient is None:
        raise NotFound(GlobalMessages.PATIENT_NOT_FOUND)
    if patient.usuario_id != caller.identity_id:
        logger.warning("Identity %s denied access to patient %s", caller.identity_id, patient_id)
        raise AccessDenied(GlobalMessages.ACCESS_DENIED)
    return patient


@translate_storage_errors("Error fetching patients")
async def list_patients(
    db: AsyncSession,
    user_id: Optional[str],
    page: int = 1,
    limit: int = 10,
) -> PatientListResponse:
    if not user_id:
        raise ValidationError(GlobalMessages.PATIENT_USER_REQUIRED)

    query = select(Patient).where(Patient.usuario_id == user_id)
    total, patients = await fetch_page(db, query, page, limit, Patient.created_at, Patient.id)
    return PatientListResponse(
        total=total,
        page=page,
        limit=limit,
        patients=[PatientResponse.model_validate(p) for p in patients],
    )


@translate_storage_errors("Error creating the patient")
async def create_patient(db: AsyncSession, request: PatientCreateRequest) -> Patient:
    if not request.user_id:
        raise ValidationError(GlobalMessages.PATIENT_USER_REQUIRED)

    data = request.model_dump(exclude={"user_id"})
    patient = Patient(usuario_id=request.user_id, **data)
    db.add(patient)
    await db.commit()
    await db.refresh(patient)
    return patient


@translate_storage_errors("Error updating the patient")
async def update_patient(
    db: AsyncSession,
    caller: CurrentIdentity,
    patient_id: str,
    request: PatientUpdateRequest,
) -> Patient:
    """Update a patient; only its owning user may do so."""
    patient = await _get_owned_patient(db, caller, patient_id)
    for key, value in request.model_dump(exclude_none=True).items():
        setattr(patient, key, value)
    await db.commit()
    await db.refresh(patient)
    return patient


@translate_storage_errors("Error deleting the patient")
async def delete_patient(db: AsyncSession, caller: CurrentIdentity, patient_id: str) -> None:
    """
    Delete a patient owned by the caller.

    Service requests that list this patient id are left as they are.
    """
    patient = await _get_owned_patient(db, caller, patient_id)
    await db.delete(patient)
    await db.commit()
