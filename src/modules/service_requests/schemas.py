# src/modules/service_requests/schemas.py
"""Service request module Pydantic schemas."""

from typing import List, Optional
from datetime import date, datetime
from pydantic import BaseModel, Field

from src.models.models import ServiceRequestStatus


# ============================================================================
# REQUEST SCHEMAS
# ============================================================================

class ServiceRequestCreateRequest(BaseModel):
    """Request to book a nurse for one or more patients."""
    # user_id and estado are checked by the service so they fail with a domain error
    user_id: Optional[str] = None
    nurse_id: str
    patient_ids: List[str] = Field(..., min_length=1)
    estado: str = ServiceRequestStatus.PENDING.value
    detalles: str
    fecha: date
    tarifa: float = Field(default=0, ge=0)


class StateUpdateRequest(BaseModel):
    """Request to move a service request to another state."""
    estado: Optional[str] = None


# ============================================================================
# RESPONSE SCHEMAS
# ============================================================================

class ServiceRequestResponse(BaseModel):
    id: str
    user_id: str
    nurse_id: str
    patient_ids: List[str]
    estado: ServiceRequestStatus
    detalles: str
    fecha: date
    tarifa: float
    pago_realizado: bool
    pago_liberado: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class StateUpdateResponse(BaseModel):
    message: str = "State updated successfully."
    service_request: ServiceRequestResponse


class PaymentReleaseResponse(BaseModel):
    message: str = "Payment released to the nurse."
    service_request: ServiceRequestResponse
