# src/modules/nurses/nurses_service.py
"""Nurse directory: listing and search."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.common.exceptions import translate_storage_errors
from src.common.utils.pagination import fetch_page
from src.models.models import Nurse
from .schemas import NurseListResponse, NurseResponse


async def _nurse_page(db: AsyncSession, query, page: int, limit: int) -> NurseListResponse:
    total, nurses = await fetch_page(db, query, page, limit, Nurse.created_at, Nurse.id)
    return NurseListResponse(
        total=total,
        page=page,
        limit=limit,
        nurses=[NurseResponse.model_validate(nurse) for nurse in nurses],
    )


@translate_storage_errors("Error listing nurses")
async def list_nurses(db: AsyncSession, page: int = 1, limit: int = 10) -> NurseListResponse:
    return await _nurse_page(db, select(Nurse), page, limit)


@translate_storage_errors("Error searching nurses")
async def search_nurses(
    db: AsyncSession,
    especialidad: Optional[str] = None,
    ubicacion: Optional[str] = None,
    tarifa: Optional[float] = None,
    page: int = 1,
    limit: int = 10,
) -> NurseListResponse:
    """
    Search nurses by exact specialty and location and a maximum hourly rate.

    Every filter is optional; `tarifa` keeps nurses charging at most that much.
    """
    query = select(Nurse)
    if especialidad:
        query = query.where(Nurse.especialidad == especialidad)
    if ubicacion:
        query = query.where(Nurse.ubicacion == ubicacion)
    if tarifa is not None:
        query = query.where(Nurse.tarifa <= tarifa)
    return await _nurse_page(db, query, page, limit)
