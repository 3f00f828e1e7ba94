# src/modules/reviews/reviews_service.py
"""Reviews of nurses, written by users after a completed service."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.auth_service import CurrentIdentity
from src.common.config import settings
from src.common.exceptions import AccessDenied, CannotReview, translate_storage_errors
from src.common.utils.global_messages import GlobalMessages
from src.common.utils.pagination import fetch_page
from src.models.models import Review, ServiceRequest, ServiceRequestStatus
from .schemas import ReviewCreateRequest, ReviewListResponse, ReviewResponse

logger = logging.getLogger(__name__)


@translate_storage_errors("Error creating the review")
async def create_review(
    db: AsyncSession,
    caller: CurrentIdentity,
    request: ReviewCreateRequest,
) -> Review:
    """
    Review the nurse of a completed service request.

    The request must exist, be completado, belong to the caller and be
    assigned to the nurse being rated; anything else is CannotReview.
    """
    result = await db.execute(
        select(ServiceRequest).where(
            ServiceRequest.id == request.service_request_id,
            ServiceRequest.user_id == caller.identity_id,
            ServiceRequest.nurse_id == request.nurse_id,
            ServiceRequest.estado == ServiceRequestStatus.COMPLETED,
        )
    )
    if result.scalars().first() is None:
        logger.warning(
            "Identity %s cannot review service request %s",
            caller.identity_id, request.service_request_id,
        )
        raise CannotReview(GlobalMessages.CANNOT_REVIEW)

    if not settings.ALLOW_DUPLICATE_REVIEWS:
        existing = await db.execute(
            select(Review.id).where(
                Review.user_id == caller.identity_id,
                Review.service_request_id == request.service_request_id,
            )
        )
        if existing.first() is not None:
            raise CannotReview(GlobalMessages.ALREADY_REVIEWED)

    review = Review(
        user_id=caller.identity_id,
        nurse_id=request.nurse_id,
        service_request_id=request.service_request_id,
        calificacion=request.calificacion,
        comentario=request.comentario,
    )
    db.add(review)
    await db.commit()
    await db.refresh(review)
    return review


@translate_storage_errors("Error fetching reviews")
async def list_reviews_for_nurse(
    db: AsyncSession,
    caller: CurrentIdentity,
    nurse_id: str,
    page: int = 1,
    limit: int = 10,
) -> ReviewListResponse:
    """A nurse's own reviews, newest first."""
    if caller.identity_id != nurse_id:
        raise AccessDenied(GlobalMessages.ACCESS_DENIED)

    query = select(Review).where(Review.nurse_id == nurse_id)
    total, reviews = await fetch_page(db, query, page, limit, Review.created_at.desc(), Review.id.desc())
    return ReviewListResponse(
        total=total,
        page=page,
        limit=limit,
        reviews=[ReviewResponse.model_validate(r) for r in reviews],
    )
