# src/auth/dependencies.py

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.auth_service import CurrentIdentity, decode_access_token
from src.common.database.database import get_db_session
from src.common.exceptions import AccessDenied, NotFound
from src.common.utils.global_messages import GlobalMessages
from src.models.models import IdentityRole, Nurse, User

# auto_error is off so a missing header maps to MissingToken instead of FastAPI's default
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> CurrentIdentity:
    """
    Dependency to decode the caller's identity from the Authorization header.

    Tokens are self-contained, so no storage lookup happens here.
    """
    token = credentials.credentials if credentials else None
    return decode_access_token(token)


async def get_current_user(
    identity: CurrentIdentity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db_session),
) -> User:
    """Dependency to load the User record of a user-role caller."""
    if identity.role != IdentityRole.USER:
        raise AccessDenied(GlobalMessages.ACCESS_DENIED)
    user = await db.get(User, identity.identity_id)
    if user is None:
        raise NotFound(GlobalMessages.USER_NOT_FOUND)
    return user


async def get_current_nurse(
    identity: CurrentIdentity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db_session),
) -> Nurse:
    """Dependency to load the Nurse record of a nurse-role caller."""
    if identity.role != IdentityRole.NURSE:
        raise AccessDenied(GlobalMessages.ACCESS_DENIED)
    nurse = await db.get(Nurse, identity.identity_id)
    if nurse is None:
        raise NotFound(GlobalMessages.NURSE_NOT_FOUND)
    return nurse
