# src/auth/schemas.py

from pydantic import BaseModel, Field

from src.models.models import IdentityRole


class LoginRequest(BaseModel):
    user_name: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    role: IdentityRole


class IdentityResponse(BaseModel):
    """Identity decoded from the bearer token."""
    identity_id: str
    role: IdentityRole
