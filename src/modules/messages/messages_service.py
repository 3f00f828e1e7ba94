# src/modules/messages/messages_service.py
"""Service layer for messages business logic."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.auth_service import CurrentIdentity
from src.common.exceptions import ValidationError, translate_storage_errors
from src.common.utils.global_messages import GlobalMessages
from src.common.utils.pagination import fetch_page
from src.models.models import Message, ServiceRequest
from src.modules.service_requests.service_requests_service import get_request_for_party
from .schemas import MessageHistoryResponse, MessageResponse, SendMessageRequest

logger = logging.getLogger(__name__)


def _counterpart(service_request: ServiceRequest, identity_id: str) -> str:
    """The other party of a request, from one party's point of view."""
    if identity_id == service_request.user_id:
        return service_request.nurse_id
    return service_request.user_id


@translate_storage_errors("Error sending the message")
async def send_message(
    db: AsyncSession,
    caller: CurrentIdentity,
    request: SendMessageRequest,
) -> Message:
    """
    Append a message to a service request's conversation.

    Only the request's user and nurse may write, and only to each other.
    """
    service_request = await get_request_for_party(db, caller, request.service_request_id)

    receiver_id = request.receiver_id or _counterpart(service_request, caller.identity_id)
    if receiver_id != _counterpart(service_request, caller.identity_id):
        raise ValidationError(GlobalMessages.RECEIVER_NOT_PARTY)

    message = Message(
        service_request_id=service_request.id,
        sender_id=caller.identity_id,
        receiver_id=receiver_id,
        content=request.content,
    )
    db.add(message)
    await db.commit()
    await db.refresh(message)

    logger.debug("Message %s stored on service request %s", message.id, service_request.id)
    return message


@translate_storage_errors("Error fetching the message history")
async def get_message_history(
    db: AsyncSession,
    caller: CurrentIdentity,
    service_request_id: str,
    page: int = 1,
    limit: int = 10,
) -> MessageHistoryResponse:
    """Page through a request's messages, oldest first."""
    await get_request_for_party(db, caller, service_request_id)

    query = select(Message).where(Message.service_request_id == service_request_id)
    total, messages = await fetch_page(db, query, page, limit, Message.timestamp.asc(), Message.id.asc())

    return MessageHistoryResponse(
        total=total,
        page=page,
        limit=limit,
        messages=[MessageResponse.model_validate(m) for m in messages],
    )
