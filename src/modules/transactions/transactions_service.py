# src/modules/transactions/transactions_service.py
"""Simulated payments: transaction history and invoices for nurses."""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.auth_service import CurrentIdentity
from src.common.exceptions import (
    AccessDenied, NotFound, ValidationError, translate_storage_errors,
)
from src.common.utils.global_messages import GlobalMessages
from src.common.utils.pagination import fetch_page
from src.models.models import ServiceRequest, Transaction
from .schemas import (
    Invoice, PaymentRequest, TransactionListResponse, TransactionResponse,
)

logger = logging.getLogger(__name__)


@translate_storage_errors("Error recording the payment")
async def pay_service_request(
    db: AsyncSession,
    caller: CurrentIdentity,
    request: PaymentRequest,
) -> Transaction:
    """
    Record the user's payment for a service request.

    No money moves: a completed transaction for the request's tarifa is
    stored and pago_realizado is set.
    """
    service_request = await db.get(ServiceRequest, request.service_request_id)
    if service_request is None:
        raise NotFound(GlobalMessages.SERVICE_REQUEST_NOT_FOUND)
    if service_request.user_id != caller.identity_id:
        raise AccessDenied(GlobalMessages.ACCESS_DENIED)
    if service_request.pago_realizado:
        raise ValidationError(GlobalMessages.ALREADY_PAID)

    transaction = Transaction(
        nurse_id=service_request.nurse_id,
        user_id=service_request.user_id,
        service_request_id=service_request.id,
        monto=service_request.tarifa,
    )
    service_request.pago_realizado = True
    db.add(transaction)
    await db.commit()
    await db.refresh(transaction)

    logger.info("Payment %s recorded for service request %s", transaction.id, service_request.id)
    return transaction


@translate_storage_errors("Error fetching the payment history")
async def list_transactions(
    db: AsyncSession,
    caller: CurrentIdentity,
    page: int = 1,
    limit: int = 10,
) -> TransactionListResponse:
    """The caller's received payments, newest first. Nurses only."""
    if not caller.is_nurse:
        raise AccessDenied(GlobalMessages.ACCESS_DENIED)

    query = select(Transaction).where(Transaction.nurse_id == caller.identity_id)
    total, transactions = await fetch_page(db, query, page, limit, Transaction.fecha_pago.desc(), Transaction.id.desc())
    return TransactionListResponse(
        total=total,
        page=page,
        limit=limit,
        transactions=[TransactionResponse.model_validate(t) for t in transactions],
    )


@translate_storage_errors("Error generating the invoice")
async def generate_invoice(
    db: AsyncSession,
    caller: CurrentIdentity,
    transaction_id: str,
) -> Invoice:
    result = await db.execute(
        select(Transaction).where(
            Transaction.id == transaction_id,
            Transaction.nurse_id == caller.identity_id,
        )
    )
    transaction = result.scalars().first()
    if transaction is None:
        raise NotFound(GlobalMessages.TRANSACTION_NOT_FOUND)

    return Invoice(
        nurse_id=transaction.nurse_id,
        user_id=transaction.user_id,
        service_request_id=transaction.service_request_id,
        monto=transaction.monto,
        fecha_pago=transaction.fecha_pago,
        estado=transaction.estado,
        fecha_factura=datetime.now(timezone.utc),
    )
