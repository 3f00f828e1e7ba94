# src/modules/patients/schemas.py

from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel


class PatientCreateRequest(BaseModel):
    user_id: Optional[str] = None
    name: str
    fecha_nacimiento: str
    genero: str
    movilidad: str
    descripcion: str


class PatientUpdateRequest(BaseModel):
    name: Optional[str] = None
    fecha_nacimiento: Optional[str] = None
    genero: Optional[str] = None
    movilidad: Optional[str] = None
    descripcion: Optional[str] = None


class PatientResponse(BaseModel):
    id: str
    usuario_id: str
    name: str
    fecha_nacimiento: str
    genero: str
    movilidad: str
    descripcion: str
    created_at: datetime

    class Config:
        from_attributes = True


class PatientListResponse(BaseModel):
    total: int
    page: int
    limit: int
    patients: List[PatientResponse]


class PatientDeleteResponse(BaseModel):
    message: str = "Patient deleted successfully."
