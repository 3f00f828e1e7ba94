"""
Simulated payments, nurse payment history and invoices.
"""

import pytest

from conftest import auth_headers, nurse_identity, user_identity
from src.common.exceptions import AccessDenied, NotFound, ValidationError
from src.models.models import IdentityRole, ServiceRequestStatus
from src.modules.transactions import transactions_service as service
from src.modules.transactions.schemas import INVOICE_DETAILS, PaymentRequest

pytestmark = pytest.mark.unit


class TestPay:
    async def test_payment_records_transaction(self, db_session, make_service_request):
        service_request = await make_service_request(tarifa=75)

        transaction = await service.pay_service_request(
            db_session, user_identity("u1"), PaymentRequest(service_request_id=service_request.id)
        )
        await db_session.refresh(service_request)

        assert transaction.monto == 75
        assert transaction.nurse_id == "n1"
        assert transaction.estado == "completado"
        assert service_request.pago_realizado is True

    async def test_cannot_pay_twice(self, db_session, make_service_request):
        service_request = await make_service_request()
        request = PaymentRequest(service_request_id=service_request.id)

        await service.pay_service_request(db_session, user_identity("u1"), request)
        with pytest.raises(ValidationError):
            await service.pay_service_request(db_session, user_identity("u1"), request)

    async def test_only_requesting_user_pays(self, db_session, make_service_request):
        service_request = await make_service_request()
        with pytest.raises(AccessDenied):
            await service.pay_service_request(
                db_session, nurse_identity("n1"), PaymentRequest(service_request_id=service_request.id)
            )

    async def test_missing_request(self, db_session):
        with pytest.raises(NotFound):
            await service.pay_service_request(db_session, user_identity("u1"), PaymentRequest(service_request_id="missing"))


class TestHistoryAndInvoice:
    async def test_history_is_for_nurses(self, db_session, make_service_request):
        service_request = await make_service_request()
        await service.pay_service_request(
            db_session, user_identity("u1"), PaymentRequest(service_request_id=service_request.id)
        )

        history = await service.list_transactions(db_session, nurse_identity("n1"))
        assert history.total == 1

        assert (await service.list_transactions(db_session, nurse_identity("n2"))).total == 0
        with pytest.raises(AccessDenied):
            await service.list_transactions(db_session, user_identity("u1"))

    async def test_invoice_for_own_transaction(self, db_session, make_service_request):
        service_request = await make_service_request()
        transaction = await service.pay_service_request(
            db_session, user_identity("u1"), PaymentRequest(service_request_id=service_request.id)
        )

        invoice = await service.generate_invoice(db_session, nurse_identity("n1"), transaction.id)
        assert invoice.service_request_id == service_request.id
        assert invoice.detalles == INVOICE_DETAILS

        with pytest.raises(NotFound):
            await service.generate_invoice(db_session, nurse_identity("n2"), transaction.id)


class TestRoutes:
    async def test_pay_then_release_over_http(self, client, make_service_request):
        service_request = await make_service_request(estado=ServiceRequestStatus.COMPLETED)

        response = await client.post(
            f"/service-requests/{service_request.id}/release-payment", headers=auth_headers("u1")
        )
        assert response.status_code == 400

        response = await client.post(
            "/transactions", json={"service_request_id": service_request.id}, headers=auth_headers("u1")
        )
        assert response.status_code == 201
        transaction_id = response.json()["transaction"]["id"]

        response = await client.post(
            f"/service-requests/{service_request.id}/release-payment", headers=auth_headers("u1")
        )
        assert response.status_code == 200
        assert response.json()["service_request"]["pago_liberado"] is True

        nurse_headers = auth_headers("n1", IdentityRole.NURSE)
        response = await client.get("/transactions", headers=nurse_headers)
        assert response.json()["total"] == 1

        response = await client.post(f"/transactions/{transaction_id}/factura", headers=nurse_headers)
        assert response.status_code == 200
        assert response.json()["factura"]["monto"] == 50
