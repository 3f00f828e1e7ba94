# src/auth/auth_controller.py

from fastapi import APIRouter, Depends

from src.auth import schemas
from src.auth.auth_service import CurrentIdentity
from src.auth.dependencies import get_current_identity

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/me", response_model=schemas.IdentityResponse)
async def get_current_identity_info(
    identity: CurrentIdentity = Depends(get_current_identity)
):
    """
    Return the identity and role carried by the bearer token.

    Requires authentication.
    """
    return schemas.IdentityResponse(identity_id=identity.identity_id, role=identity.role)
