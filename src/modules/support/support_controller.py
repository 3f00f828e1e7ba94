# src/modules/support/support_controller.py

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.auth_service import CurrentIdentity
from src.auth.dependencies import get_current_identity
from src.common.database.database import get_db_session
from src.modules.support import support_service as service, schemas

router = APIRouter(prefix="/support", tags=["Support"])


@router.get("/faq", response_model=schemas.FAQListResponse)
async def list_faqs(
    page: int = Query(1),
    limit: int = Query(10, ge=1),
    db: AsyncSession = Depends(get_db_session),
):
    """Frequently asked questions. No authentication required."""
    return await service.list_faqs(db, page, limit)


@router.post("/request", response_model=schemas.SupportRequestCreateResponse, status_code=status.HTTP_201_CREATED)
async def create_support_request(
    request: schemas.SupportRequestCreate,
    db: AsyncSession = Depends(get_db_session),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """Open a support ticket."""
    support_request = await service.create_support_request(db, identity, request)
    return schemas.SupportRequestCreateResponse(
        support_request=schemas.SupportRequestResponse.model_validate(support_request)
    )


@router.get("/requests", response_model=schemas.SupportRequestListResponse)
async def list_support_requests(
    page: int = Query(1),
    limit: int = Query(10, ge=1),
    db: AsyncSession = Depends(get_db_session),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """The caller's own support tickets."""
    return await service.list_own_support_requests(db, identity, page, limit)
