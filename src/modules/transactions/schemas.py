# src/modules/transactions/schemas.py

from typing import List
from datetime import datetime
from pydantic import BaseModel

INVOICE_DETAILS = "Servicio de enfermería proporcionado"


class PaymentRequest(BaseModel):
    service_request_id: str


class TransactionResponse(BaseModel):
    id: str
    nurse_id: str
    user_id: str
    service_request_id: str
    monto: float
    fecha_pago: datetime
    estado: str

    class Config:
        from_attributes = True


class PaymentResponse(BaseModel):
    message: str = "Payment recorded successfully."
    transaction: TransactionResponse


class TransactionListResponse(BaseModel):
    total: int
    page: int
    limit: int
    transactions: List[TransactionResponse]


class Invoice(BaseModel):
    nurse_id: str
    user_id: str
    service_request_id: str
    monto: float
    fecha_pago: datetime
    estado: str
    fecha_factura: datetime
    detalles: str = INVOICE_DETAILS


class InvoiceResponse(BaseModel):
    message: str = "Invoice generated and sent successfully."
    factura: Invoice
