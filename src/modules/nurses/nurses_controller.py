# src/modules/nurses/nurses_controller.py
"""Nurses controller with API routes."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth import auth_service
from src.auth.auth_service import CurrentIdentity
from src.auth.dependencies import get_current_identity, get_current_nurse
from src.auth.schemas import LoginRequest, LoginResponse
from src.common.database.database import get_db_session
from src.models.models import IdentityRole, Nurse

from . import nurses_service as service
from .schemas import (
    NurseListResponse, NurseRegisterRequest, NurseRegisterResponse,
    NurseResponse, UpdateNurseProfileRequest,
)

router = APIRouter(prefix="/nurses", tags=["Nurses"])


@router.get("", response_model=NurseListResponse)
async def list_nurses(
    page: int = Query(1),
    limit: int = Query(10, ge=1),
    db: AsyncSession = Depends(get_db_session),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """Get all nurses, paginated."""
    return await service.list_nurses(db, page, limit)


@router.get("/search", response_model=NurseListResponse)
async def search_nurses(
    especialidad: Optional[str] = Query(None),
    ubicacion: Optional[str] = Query(None),
    tarifa: Optional[float] = Query(None, description="Maximum hourly rate"),
    page: int = Query(1),
    limit: int = Query(10, ge=1),
    db: AsyncSession = Depends(get_db_session),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """Search nurses by specialty, location and maximum rate."""
    return await service.search_nurses(db, especialidad, ubicacion, tarifa, page, limit)


@router.post("/register", response_model=NurseRegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: NurseRegisterRequest,
    db: AsyncSession = Depends(get_db_session),
):
    """Register a new nurse account and sign it in."""
    nurse, access_token = await auth_service.register_identity(db, IdentityRole.NURSE, payload.model_dump())
    return NurseRegisterResponse(
        nurse=NurseResponse.model_validate(nurse),
        access_token=access_token,
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: LoginRequest,
    db: AsyncSession = Depends(get_db_session),
):
    """Authenticate a nurse and return an access token."""
    _, access_token = await auth_service.login_identity(
        db, IdentityRole.NURSE, credentials.user_name, credentials.password
    )
    return LoginResponse(access_token=access_token, role=IdentityRole.NURSE)


@router.get("/me", response_model=NurseResponse)
async def get_profile(current_nurse: Nurse = Depends(get_current_nurse)):
    """Retrieve the profile of the authenticated nurse."""
    return current_nurse


@router.put("/me", response_model=NurseResponse)
async def update_profile(
    profile_data: UpdateNurseProfileRequest,
    current_nurse: Nurse = Depends(get_current_nurse),
    db: AsyncSession = Depends(get_db_session),
):
    """Update the authenticated nurse's public profile."""
    return await auth_service.update_identity_profile(db, current_nurse, profile_data.model_dump())
