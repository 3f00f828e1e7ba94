"""
Token issuing/verification and the user/nurse login flow.
"""

import time
from datetime import timedelta

import jwt
import pytest

from conftest import auth_headers
from src.auth.auth_service import (
    create_access_token, decode_access_token, login_identity, register_identity,
    verify_password,
)
from src.common.config import settings
from src.common.exceptions import (
    InvalidCredentials, InvalidToken, MalformedClaims, MissingToken, ValidationError,
)
from src.models.models import IdentityRole

pytestmark = pytest.mark.unit


def _user_profile(user_name: str = "ana") -> dict:
    return {"name": "Ana", "user_name": user_name, "password": "s3cret"}


def _nurse_profile(user_name: str = "ana") -> dict:
    return {
        "name": "Ana Enfermera",
        "user_name": user_name,
        "password": "s3cret",
        "fecha_nacimiento": "1990-01-01",
        "genero": "F",
        "especialidad": "Pediatría",
        "ubicacion": "Lima",
        "tarifa": 30,
        "disponibilidad": [],
        "certificados": [],
    }


class TestTokens:
    def test_issued_token_decodes_to_same_identity(self):
        token = create_access_token("abc", IdentityRole.NURSE)
        identity = decode_access_token(token)
        assert identity.identity_id == "abc"
        assert identity.role == IdentityRole.NURSE

    def test_token_expires_after_one_hour(self):
        token = create_access_token("abc", IdentityRole.USER)
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
        assert 3590 <= payload["exp"] - time.time() <= 3600

    def test_missing_token(self):
        with pytest.raises(MissingToken):
            decode_access_token(None)
        with pytest.raises(MissingToken):
            decode_access_token("")

    def test_expired_token_is_invalid(self):
        token = create_access_token("abc", IdentityRole.USER, expires_delta=timedelta(seconds=-5))
        with pytest.raises(InvalidToken):
            decode_access_token(token)

    def test_wrong_signature_is_invalid(self):
        token = jwt.encode({"sub": "abc", "role": "user"}, "another-secret", algorithm="HS256")
        with pytest.raises(InvalidToken):
            decode_access_token(token)

    def test_garbage_is_invalid(self):
        with pytest.raises(InvalidToken):
            decode_access_token("not-a-jwt")

    def test_token_without_identity_is_malformed(self):
        token = jwt.encode({"role": "user"}, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
        with pytest.raises(MalformedClaims):
            decode_access_token(token)

    def test_token_with_unknown_role_is_malformed(self):
        token = jwt.encode({"sub": "abc", "role": "admin"}, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
        with pytest.raises(MalformedClaims):
            decode_access_token(token)


class TestLogin:
    async def test_register_then_login_yields_same_identity(self, db_session):
        user, register_token = await register_identity(db_session, IdentityRole.USER, _user_profile())
        _, login_token = await login_identity(db_session, IdentityRole.USER, "ana", "s3cret")

        for token in (register_token, login_token):
            identity = decode_access_token(token)
            assert identity.identity_id == user.id
            assert identity.role == IdentityRole.USER

    async def test_nurse_login_carries_nurse_role(self, db_session):
        nurse, _ = await register_identity(db_session, IdentityRole.NURSE, _nurse_profile())
        _, token = await login_identity(db_session, IdentityRole.NURSE, "ana", "s3cret")
        identity = decode_access_token(token)
        assert identity.identity_id == nurse.id
        assert identity.role == IdentityRole.NURSE

    async def test_password_is_stored_hashed(self, db_session):
        user, _ = await register_identity(db_session, IdentityRole.USER, _user_profile())
        assert user.password_hash != "s3cret"
        assert verify_password("s3cret", user.password_hash)

    async def test_wrong_password_and_unknown_user_fail_alike(self, db_session):
        await register_identity(db_session, IdentityRole.USER, _user_profile())

        with pytest.raises(InvalidCredentials) as wrong_password:
            await login_identity(db_session, IdentityRole.USER, "ana", "nope")
        with pytest.raises(InvalidCredentials) as unknown_user:
            await login_identity(db_session, IdentityRole.USER, "nobody", "s3cret")

        assert wrong_password.value.message == unknown_user.value.message

    async def test_username_is_unique_per_collection(self, db_session):
        await register_identity(db_session, IdentityRole.USER, _user_profile())
        with pytest.raises(ValidationError):
            await register_identity(db_session, IdentityRole.USER, _user_profile())

        # the nurse collection has its own username space
        nurse, _ = await register_identity(db_session, IdentityRole.NURSE, _nurse_profile())
        assert nurse.user_name == "ana"

    async def test_user_cannot_log_in_as_nurse(self, db_session):
        await register_identity(db_session, IdentityRole.USER, _user_profile())
        with pytest.raises(InvalidCredentials):
            await login_identity(db_session, IdentityRole.NURSE, "ana", "s3cret")


class TestAuthRoutes:
    async def test_missing_header_is_401(self, client):
        response = await client.get("/auth/me")
        assert response.status_code == 401
        assert response.json()["message"] == "Token not provided."

    async def test_invalid_token_is_403(self, client):
        response = await client.get("/auth/me", headers={"Authorization": "Bearer nope"})
        assert response.status_code == 403

    async def test_me_returns_token_identity(self, client):
        response = await client.get("/auth/me", headers=auth_headers("n7", IdentityRole.NURSE))
        assert response.status_code == 200
        assert response.json() == {"identity_id": "n7", "role": "nurse"}

    async def test_register_and_login_over_http(self, client):
        response = await client.post("/users/register", json=_user_profile("luis"))
        assert response.status_code == 201
        body = response.json()
        assert "password" not in body["user"]
        assert "password_hash" not in body["user"]
        assert body["access_token"]

        response = await client.post("/users/login", json={"user_name": "luis", "password": "s3cret"})
        assert response.status_code == 200
        assert response.json()["role"] == "user"

        response = await client.post("/users/login", json={"user_name": "luis", "password": "bad"})
        assert response.status_code == 401

    async def test_register_missing_fields_is_rejected(self, client):
        response = await client.post("/nurses/register", json={"name": "Sin datos"})
        assert response.status_code == 422

    async def test_profile_update_keeps_credentials(self, client):
        response = await client.post("/users/register", json=_user_profile("marta"))
        token = response.json()["access_token"]
        headers = {"Authorization": f"Bearer {token}"}

        response = await client.put("/users/me", json={"name": "Marta R."}, headers=headers)
        assert response.status_code == 200
        assert response.json()["name"] == "Marta R."

        response = await client.post("/users/login", json={"user_name": "marta", "password": "s3cret"})
        assert response.status_code == 200

    async def test_nurse_profile_requires_nurse_role(self, client):
        response = await client.get("/nurses/me", headers=auth_headers("u1", IdentityRole.USER))
        assert response.status_code == 403
