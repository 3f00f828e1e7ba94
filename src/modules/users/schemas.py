# src/modules/users/schemas.py

from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field


class UserRegisterRequest(BaseModel):
    name: str = Field(..., min_length=1)
    user_name: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    foto: Optional[str] = None
    verificado: str = "No"
    comida_favorita: str = "No especificada"
    descuento_navideno: float = 0


class UserResponse(BaseModel):
    id: str
    name: str
    foto: Optional[str] = None
    verificado: str
    comida_favorita: str
    descuento_navideno: float
    created_at: datetime

    class Config:
        from_attributes = True


class UserRegisterResponse(BaseModel):
    message: str = "User registered successfully."
    user: UserResponse
    access_token: str
    token_type: str = "bearer"


class UpdateUserProfileRequest(BaseModel):
    name: Optional[str] = None
    foto: Optional[str] = None
    comida_favorita: Optional[str] = None


class UserListResponse(BaseModel):
    total: int
    page: int
    limit: int
    users: List[UserResponse]


class PanelResponse(BaseModel):
    message: str = "Bienvenido al panel principal"
    opciones: List[str] = ["Buscar Enfermeros", "Mis Pacientes"]
