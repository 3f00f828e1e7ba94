# src/modules/support/support_service.py

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.auth_service import CurrentIdentity
from src.common.exceptions import ValidationError, translate_storage_errors
from src.common.utils.pagination import fetch_page
from src.models.models import FAQ, IdentityRole, SupportRequest, SupportUserType
from .schemas import (
    FAQListResponse, FAQResponse, SupportRequestCreate,
    SupportRequestListResponse, SupportRequestResponse,
)

ROLE_TO_SUPPORT_TYPE = {
    IdentityRole.USER: SupportUserType.USER,
    IdentityRole.NURSE: SupportUserType.NURSE,
}


@translate_storage_errors("Error fetching frequently asked questions")
async def list_faqs(db: AsyncSession, page: int = 1, limit: int = 10) -> FAQListResponse:
    total, faqs = await fetch_page(db, select(FAQ), page, limit, FAQ.id)
    return FAQListResponse(
        total=total,
        page=page,
        limit=limit,
        faqs=[FAQResponse.model_validate(f) for f in faqs],
    )


@translate_storage_errors("Error sending the support request")
async def create_support_request(
    db: AsyncSession,
    caller: CurrentIdentity,
    request: SupportRequestCreate,
) -> SupportRequest:
    if not request.asunto.strip() or not request.mensaje.strip():
        raise ValidationError("The asunto and mensaje fields are required.")

    support_request = SupportRequest(
        user_id=caller.identity_id,
        tipo_usuario=ROLE_TO_SUPPORT_TYPE[caller.role],
        asunto=request.asunto,
        mensaje=request.mensaje,
    )
    db.add(support_request)
    await db.commit()
    await db.refresh(support_request)
    return support_request


@translate_storage_errors("Error fetching support requests")
async def list_own_support_requests(
    db: AsyncSession,
    caller: CurrentIdentity,
    page: int = 1,
    limit: int = 10,
) -> SupportRequestListResponse:
    query = select(SupportRequest).where(SupportRequest.user_id == caller.identity_id)
    total, requests = await fetch_page(db, query, page, limit, SupportRequest.created_at.desc(), SupportRequest.id.desc())
    return SupportRequestListResponse(
        total=total,
        page=page,
        limit=limit,
        support_requests=[SupportRequestResponse.model_validate(r) for r in requests],
    )
