# src/modules/transactions/transactions_controller.py

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.auth_service import CurrentIdentity
from src.auth.dependencies import get_current_identity
from src.common.database.database import get_db_session
from src.modules.transactions import transactions_service as service, schemas

router = APIRouter(prefix="/transactions", tags=["Transactions"])


@router.get("", response_model=schemas.TransactionListResponse)
async def list_transactions(
    page: int = Query(1),
    limit: int = Query(10, ge=1),
    db: AsyncSession = Depends(get_db_session),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """Get the authenticated nurse's payment history."""
    return await service.list_transactions(db, identity, page, limit)


@router.post("", response_model=schemas.PaymentResponse, status_code=status.HTTP_201_CREATED)
async def pay_service_request(
    request: schemas.PaymentRequest,
    db: AsyncSession = Depends(get_db_session),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """Pay for a service request (simulated)."""
    transaction = await service.pay_service_request(db, identity, request)
    return schemas.PaymentResponse(transaction=schemas.TransactionResponse.model_validate(transaction))


@router.post("/{transaction_id}/factura", response_model=schemas.InvoiceResponse)
async def generate_invoice(
    transaction_id: str,
    db: AsyncSession = Depends(get_db_session),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """Generate the invoice of one of the authenticated nurse's transactions."""
    invoice = await service.generate_invoice(db, identity, transaction_id)
    return schemas.InvoiceResponse(factura=invoice)
