# src/modules/nurses/schemas.py
"""Nurses module Pydantic schemas."""

from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field


class AvailabilitySlot(BaseModel):
    """Weekly availability window, e.g. Lunes 08:00-17:00."""
    dia: str
    horaInicio: str
    horaFin: str


# ============================================================================
# REQUEST SCHEMAS
# ============================================================================

class NurseRegisterRequest(BaseModel):
    name: str = Field(..., min_length=1)
    fecha_nacimiento: str
    genero: str
    especialidad: str
    ubicacion: str
    tarifa: float = Field(..., ge=0)
    disponibilidad: List[AvailabilitySlot] = Field(default_factory=list)
    certificados: List[str] = Field(default_factory=list)
    descripcion: Optional[str] = None
    user_name: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UpdateNurseProfileRequest(BaseModel):
    name: Optional[str] = None
    descripcion: Optional[str] = None
    especialidad: Optional[str] = None
    ubicacion: Optional[str] = None
    tarifa: Optional[float] = Field(None, ge=0)
    disponibilidad: Optional[List[AvailabilitySlot]] = None
    certificados: Optional[List[str]] = None


# ============================================================================
# RESPONSE SCHEMAS
# ============================================================================

class NurseResponse(BaseModel):
    """Public nurse profile; credentials never leave the service."""
    id: str
    name: str
    fecha_nacimiento: str
    genero: str
    descripcion: Optional[str] = None
    especialidad: str
    ubicacion: str
    tarifa: float
    disponibilidad: List[AvailabilitySlot]
    certificados: List[str]
    created_at: datetime

    class Config:
        from_attributes = True


class NurseRegisterResponse(BaseModel):
    message: str = "Nurse registered successfully."
    nurse: NurseResponse
    access_token: str
    token_type: str = "bearer"


class NurseListResponse(BaseModel):
    """Paginated list of nurses."""
    total: int
    page: int
    limit: int
    nurses: List[NurseResponse]
