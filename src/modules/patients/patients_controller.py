# src/modules/patients/patients_controller.py

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.auth_service import CurrentIdentity
from src.auth.dependencies import get_current_identity
from src.common.database.database import get_db_session
from src.modules.patients import patients_service as service, schemas

router = APIRouter(prefix="/patients", tags=["Patients"])


@router.get("", response_model=schemas.PatientListResponse)
async def list_patients(
    user_id: Optional[str] = Query(None, description="Owning user id"),
    page: int = Query(1),
    limit: int = Query(10, ge=1),
    db: AsyncSession = Depends(get_db_session),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """Get the patients of a user, paginated."""
    return await service.list_patients(db, user_id, page, limit)


@router.post("", response_model=schemas.PatientResponse, status_code=status.HTTP_201_CREATED)
async def create_patient(
    request: schemas.PatientCreateRequest,
    db: AsyncSession = Depends(get_db_session),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """Create a patient for a user."""
    return await service.create_patient(db, request)


@router.put("/{patient_id}", response_model=schemas.PatientResponse)
async def update_patient(
    patient_id: str,
    request: schemas.PatientUpdateRequest,
    db: AsyncSession = Depends(get_db_session),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """Update one of the caller's patients."""
    return await service.update_patient(db, identity, patient_id, request)


@router.delete("/{patient_id}", response_model=schemas.PatientDeleteResponse)
async def delete_patient(
    patient_id: str,
    db: AsyncSession = Depends(get_db_session),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """Delete one of the caller's patients."""
    await service.delete_patient(db, identity, patient_id)
    return schemas.PatientDeleteResponse()
