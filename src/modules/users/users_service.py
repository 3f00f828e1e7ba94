# src/modules/users/users_service.py

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.common.exceptions import translate_storage_errors
from src.common.utils.pagination import fetch_page
from src.models.models import User
from .schemas import UserListResponse, UserResponse


@translate_storage_errors("Error listing users")
async def list_users(db: AsyncSession, page: int = 1, limit: int = 10) -> UserListResponse:
    """Page through every registered user."""
    total, users = await fetch_page(db, select(User), page, limit, User.created_at, User.id)
    return UserListResponse(
        total=total,
        page=page,
        limit=limit,
        users=[UserResponse.model_validate(user) for user in users],
    )
