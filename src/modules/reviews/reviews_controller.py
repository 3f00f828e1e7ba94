# src/modules/reviews/reviews_controller.py

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.auth_service import CurrentIdentity
from src.auth.dependencies import get_current_identity
from src.common.database.database import get_db_session
from src.modules.reviews import reviews_service as service, schemas

router = APIRouter(prefix="/reviews", tags=["Reviews"])


@router.post("", response_model=schemas.ReviewCreateResponse, status_code=status.HTTP_201_CREATED)
async def create_review(
    request: schemas.ReviewCreateRequest,
    db: AsyncSession = Depends(get_db_session),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """Review the nurse of a completed service request."""
    review = await service.create_review(db, identity, request)
    return schemas.ReviewCreateResponse(review=schemas.ReviewResponse.model_validate(review))


@router.get("/{nurse_id}", response_model=schemas.ReviewListResponse)
async def list_reviews(
    nurse_id: str,
    page: int = Query(1),
    limit: int = Query(10, ge=1),
    db: AsyncSession = Depends(get_db_session),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """Get the reviews of the authenticated nurse."""
    return await service.list_reviews_for_nurse(db, identity, nurse_id, page, limit)
