# src/modules/messages/schemas.py
"""Pydantic schemas for messages module."""

from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, Field


class SendMessageRequest(BaseModel):
    service_request_id: str
    receiver_id: Optional[str] = None  # defaults to the other party of the request
    content: str = Field(..., min_length=1)


class MessageResponse(BaseModel):
    id: str
    service_request_id: str
    sender_id: str
    receiver_id: str
    content: str
    timestamp: datetime

    class Config:
        from_attributes = True


class SendMessageResponse(BaseModel):
    message: str = "Message sent successfully."
    message_data: MessageResponse


class MessageHistoryResponse(BaseModel):
    total: int
    page: int
    limit: int
    messages: List[MessageResponse]
