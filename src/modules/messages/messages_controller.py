# src/modules/messages/messages_controller.py
"""Messages controller with API routes."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.auth_service import CurrentIdentity
from src.auth.dependencies import get_current_identity
from src.common.database.database import get_db_session

from . import messages_service as service
from .schemas import (
    MessageHistoryResponse, MessageResponse, SendMessageRequest, SendMessageResponse,
)

router = APIRouter(prefix="/messages", tags=["Messages"])


@router.post("", response_model=SendMessageResponse, status_code=status.HTTP_201_CREATED)
async def send_message(
    request: SendMessageRequest,
    db: AsyncSession = Depends(get_db_session),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """Send a message on a service request."""
    message = await service.send_message(db, identity, request)
    return SendMessageResponse(message_data=MessageResponse.model_validate(message))


@router.get("/{service_request_id}", response_model=MessageHistoryResponse)
async def get_message_history(
    service_request_id: str,
    page: int = Query(1),
    limit: int = Query(10, ge=1),
    db: AsyncSession = Depends(get_db_session),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """Get the message history of a service request."""
    return await service.get_message_history(db, identity, service_request_id, page, limit)
