"""
Reviews are only accepted for completed requests, from the requesting user.
"""

from datetime import datetime, timedelta, timezone

import pytest

from conftest import auth_headers, nurse_identity, user_identity
from src.common.config import settings
from src.common.exceptions import AccessDenied, CannotReview
from src.models.models import IdentityRole, Review, ServiceRequestStatus
from src.modules.reviews import reviews_service as service
from src.modules.reviews.schemas import ReviewCreateRequest

pytestmark = pytest.mark.unit


def _review(request_id: str, nurse_id: str = "n1", calificacion: int = 5) -> ReviewCreateRequest:
    return ReviewCreateRequest(
        nurse_id=nurse_id,
        service_request_id=request_id,
        calificacion=calificacion,
        comentario="Muy atenta",
    )


class TestCreateReview:
    @pytest.mark.parametrize("estado", [ServiceRequestStatus.PENDING, ServiceRequestStatus.IN_PROGRESS])
    async def test_request_must_be_completed(self, db_session, make_service_request, estado):
        service_request = await make_service_request(estado=estado)
        with pytest.raises(CannotReview):
            await service.create_review(db_session, user_identity("u1"), _review(service_request.id))

    async def test_after_completion(self, db_session, make_service_request):
        service_request = await make_service_request(estado=ServiceRequestStatus.COMPLETED)
        review = await service.create_review(db_session, user_identity("u1"), _review(service_request.id))
        assert review.user_id == "u1"
        assert review.nurse_id == "n1"
        assert review.calificacion == 5

    async def test_only_the_requesting_user(self, db_session, make_service_request):
        service_request = await make_service_request(estado=ServiceRequestStatus.COMPLETED)

        for caller in (user_identity("u2"), nurse_identity("n1")):
            with pytest.raises(AccessDenied):
                await service.create_review(db_session, caller, _review(service_request.id))

    async def test_nurse_must_match_request(self, db_session, make_service_request):
        service_request = await make_service_request(estado=ServiceRequestStatus.COMPLETED)
        with pytest.raises(CannotReview):
            await service.create_review(db_session, user_identity("u1"), _review(service_request.id, nurse_id="n2"))

    async def test_missing_request(self, db_session):
        with pytest.raises(CannotReview):
            await service.create_review(db_session, user_identity("u1"), _review("missing"))

    async def test_duplicates_allowed_by_default(self, db_session, make_service_request):
        service_request = await make_service_request(estado=ServiceRequestStatus.COMPLETED)
        await service.create_review(db_session, user_identity("u1"), _review(service_request.id))
        await service.create_review(db_session, user_identity("u1"), _review(service_request.id, calificacion=3))

    async def test_duplicates_rejected_when_disabled(self, db_session, make_service_request, monkeypatch):
        monkeypatch.setattr(settings, "ALLOW_DUPLICATE_REVIEWS", False)
        service_request = await make_service_request(estado=ServiceRequestStatus.COMPLETED)

        await service.create_review(db_session, user_identity("u1"), _review(service_request.id))
        with pytest.raises(CannotReview):
            await service.create_review(db_session, user_identity("u1"), _review(service_request.id))


class TestListReviews:
    async def test_newest_first_for_own_nurse(self, db_session):
        start = datetime(2024, 1, 1, tzinfo=timezone.utc)
        for day in (0, 2, 1):
            db_session.add(Review(
                user_id="u1",
                nurse_id="n1",
                service_request_id=f"sr{day}",
                calificacion=4,
                created_at=start + timedelta(days=day),
            ))
        db_session.add(Review(user_id="u1", nurse_id="n2", service_request_id="x", calificacion=1))
        await db_session.commit()

        listing = await service.list_reviews_for_nurse(db_session, nurse_identity("n1"), "n1")
        assert listing.total == 3
        assert [r.service_request_id for r in listing.reviews] == ["sr2", "sr1", "sr0"]

    async def test_other_identities_are_denied(self, db_session):
        with pytest.raises(AccessDenied):
            await service.list_reviews_for_nurse(db_session, nurse_identity("n2"), "n1")
        with pytest.raises(AccessDenied):
            await service.list_reviews_for_nurse(db_session, user_identity("u1"), "n1")


class TestRoutes:
    async def test_review_flow_over_http(self, client, make_service_request):
        service_request = await make_service_request()
        payload = {"nurse_id": "n1", "service_request_id": service_request.id, "calificacion": 5}

        response = await client.post("/reviews", json=payload, headers=auth_headers("u1"))
        assert response.status_code == 400

        response = await client.put(
            f"/service-requests/{service_request.id}/estado",
            json={"estado": "completado"},
            headers=auth_headers("n1", IdentityRole.NURSE),
        )
        assert response.status_code == 200

        response = await client.post("/reviews", json=payload, headers=auth_headers("u1"))
        assert response.status_code == 201

        response = await client.get("/reviews/n1", headers=auth_headers("n1", IdentityRole.NURSE))
        assert response.status_code == 200
        assert response.json()["total"] == 1

    async def test_rating_out_of_range(self, client):
        payload = {"nurse_id": "n1", "service_request_id": "x", "calificacion": 6}
        response = await client.post("/reviews", json=payload, headers=auth_headers("u1"))
        assert response.status_code == 422
