# src/modules/support/schemas.py

from typing import List
from datetime import datetime
from pydantic import BaseModel

from src.models.models import SupportUserType


class FAQResponse(BaseModel):
    id: str
    pregunta: str
    respuesta: str

    class Config:
        from_attributes = True


class FAQListResponse(BaseModel):
    total: int
    page: int
    limit: int
    faqs: List[FAQResponse]


class SupportRequestCreate(BaseModel):
    # Blank values are rejected by the service with a domain error
    asunto: str = ""
    mensaje: str = ""


class SupportRequestResponse(BaseModel):
    id: str
    user_id: str
    tipo_usuario: SupportUserType
    asunto: str
    mensaje: str
    estado: str
    created_at: datetime

    class Config:
        from_attributes = True


class SupportRequestCreateResponse(BaseModel):
    message: str = "Support request sent successfully."
    support_request: SupportRequestResponse


class SupportRequestListResponse(BaseModel):
    total: int
    page: int
    limit: int
    support_requests: List[SupportRequestResponse]
