# src/modules/reviews/schemas.py

from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field


class ReviewCreateRequest(BaseModel):
    nurse_id: str
    service_request_id: str
    calificacion: int = Field(..., ge=1, le=5)
    comentario: Optional[str] = None


class ReviewResponse(BaseModel):
    id: str
    user_id: str
    nurse_id: str
    service_request_id: str
    calificacion: int
    comentario: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class ReviewCreateResponse(BaseModel):
    message: str = "Review created successfully."
    review: ReviewResponse


class ReviewListResponse(BaseModel):
    total: int
    page: int
    limit: int
    reviews: List[ReviewResponse]
