# src/modules/users/users_controller.py

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth import auth_service
from src.auth.auth_service import CurrentIdentity
from src.auth.dependencies import get_current_identity, get_current_user
from src.auth.schemas import LoginRequest, LoginResponse
from src.common.database.database import get_db_session
from src.models.models import IdentityRole, User
from src.modules.users import users_service, schemas

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("/register", response_model=schemas.UserRegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: schemas.UserRegisterRequest,
    db: AsyncSession = Depends(get_db_session),
):
    """
    Register a new user account.

    The response carries a token so the caller is signed in right away.
    """
    user, access_token = await auth_service.register_identity(db, IdentityRole.USER, payload.model_dump())
    return schemas.UserRegisterResponse(
        user=schemas.UserResponse.model_validate(user),
        access_token=access_token,
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: LoginRequest,
    db: AsyncSession = Depends(get_db_session),
):
    """Authenticate a user and return an access token."""
    _, access_token = await auth_service.login_identity(
        db, IdentityRole.USER, credentials.user_name, credentials.password
    )
    return LoginResponse(access_token=access_token, role=IdentityRole.USER)


@router.get("", response_model=schemas.UserListResponse)
async def list_users(
    page: int = Query(1),
    limit: int = Query(10, ge=1),
    db: AsyncSession = Depends(get_db_session),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """Get all users, paginated."""
    return await users_service.list_users(db, page, limit)


@router.get("/panel", response_model=schemas.PanelResponse)
async def panel(identity: CurrentIdentity = Depends(get_current_identity)):
    """Main menu shown after login."""
    return schemas.PanelResponse()


@router.get("/me", response_model=schemas.UserResponse)
async def get_profile(current_user: User = Depends(get_current_user)):
    """Retrieve the profile of the authenticated user."""
    return current_user


@router.put("/me", response_model=schemas.UserResponse)
async def update_profile(
    profile_data: schemas.UpdateUserProfileRequest,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
):
    """
    Update the profile of the authenticated user.

    Only the provided fields will be updated.
    """
    return await auth_service.update_identity_profile(db, current_user, profile_data.model_dump())
