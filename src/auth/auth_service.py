# src/auth/auth_service.py

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple, Type, Union

import jwt
from jwt.exceptions import InvalidTokenError
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from src.common.config import settings
from src.common.exceptions import (
    InvalidCredentials, InvalidToken, MalformedClaims, MissingToken,
    ValidationError, translate_storage_errors,
)
from src.common.utils.global_messages import GlobalMessages
from src.models.models import IdentityRole, Nurse, User

logger = logging.getLogger(__name__)

Identity = Union[User, Nurse]

IDENTITY_MODELS: dict = {
    IdentityRole.USER: User,
    IdentityRole.NURSE: Nurse,
}

# Initialize the password context (bcrypt)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


@dataclass(frozen=True)
class CurrentIdentity:
    """Identity decoded from a bearer token."""
    identity_id: str
    role: IdentityRole

    @property
    def is_nurse(self) -> bool:
        return self.role == IdentityRole.NURSE


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify that the provided password matches the hashed password."""
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(
    identity_id: str,
    role: IdentityRole,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Create a signed JWT carrying the identity and its role."""
    expire = datetime.now(timezone.utc) + (
        expires_delta if expires_delta else timedelta(minutes=settings.JWT_EXPIRATION_MINUTES)
    )
    to_encode = {"sub": str(identity_id), "role": role.value, "exp": expire}
    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: Optional[str]) -> CurrentIdentity:
    """
    Verify a bearer token and return the identity it carries.

    Raises MissingToken when no token was sent, InvalidToken when the
    signature or expiry check fails and MalformedClaims when the payload has
    no identity.
    """
    if not token:
        raise MissingToken(GlobalMessages.TOKEN_MISSING)

    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except InvalidTokenError as exc:
        raise InvalidToken(GlobalMessages.TOKEN_INVALID) from exc

    identity_id = payload.get("sub")
    if not identity_id:
        raise MalformedClaims(GlobalMessages.TOKEN_WITHOUT_IDENTITY)

    try:
        role = IdentityRole(payload.get("role"))
    except ValueError as exc:
        raise MalformedClaims(GlobalMessages.TOKEN_WITHOUT_IDENTITY) from exc

    return CurrentIdentity(identity_id=str(identity_id), role=role)


@translate_storage_errors("Error registering the account")
async def register_identity(
    db: AsyncSession,
    role: IdentityRole,
    profile: dict,
) -> Tuple[Identity, str]:
    """
    Persist a new user or nurse and issue its first token.

    Usernames are unique per collection: a nurse and a user may share one.
    """
    model: Type[Identity] = IDENTITY_MODELS[role]

    result = await db.execute(select(model).where(model.user_name == profile["user_name"]))
    if result.scalars().first():
        raise ValidationError(GlobalMessages.ACCOUNT_ALREADY_EXISTS)

    data = dict(profile)
    data["password_hash"] = hash_password(data.pop("password"))
    identity = model(**data)
    db.add(identity)
    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        raise ValidationError(GlobalMessages.ACCOUNT_ALREADY_EXISTS) from exc
    await db.refresh(identity)

    logger.info("Registered %s %s", role.value, identity.id)
    return identity, create_access_token(identity.id, role)


@translate_storage_errors("Error during login")
async def login_identity(
    db: AsyncSession,
    role: IdentityRole,
    user_name: str,
    password: str,
) -> Tuple[Identity, str]:
    """Check a username/password pair and return the identity with a fresh token."""
    model: Type[Identity] = IDENTITY_MODELS[role]

    result = await db.execute(select(model).where(model.user_name == user_name))
    identity = result.scalars().first()

    # Unknown username and wrong password fail the same way
    if not identity or not verify_password(password, identity.password_hash):
        logger.warning("Failed %s login attempt", role.value)
        raise InvalidCredentials(GlobalMessages.INVALID_CREDENTIALS)

    return identity, create_access_token(identity.id, role)


@translate_storage_errors("Error updating the profile")
async def update_identity_profile(db: AsyncSession, identity: Identity, profile_data: dict) -> Identity:
    """
    Update an identity with the provided profile data.

    Only the fields provided (non-None) are updated; credentials are not
    touched here.
    """
    for key, value in profile_data.items():
        if value is not None and key not in ("user_name", "password_hash") and hasattr(identity, key):
            setattr(identity, key, value)
    db.add(identity)
    await db.commit()
    await db.refresh(identity)
    return identity
