"""
Shared fixtures.

Environment variables are set before any `src` import because the settings
object is built at import time.
"""

import os

os.environ["APP_ENV"] = "test"
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("LOG_LEVEL", "warning")

from datetime import date  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from src.auth.auth_service import CurrentIdentity, create_access_token  # noqa: E402
from src.common.database.database import get_db_session  # noqa: E402
from src.main import app  # noqa: E402
from src.models.models import (  # noqa: E402
    Base, IdentityRole, ServiceRequest, ServiceRequestStatus,
)


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    async def override_get_db_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


# ============================================================================
# Identity helpers
# ============================================================================

def user_identity(identity_id: str = "u1") -> CurrentIdentity:
    return CurrentIdentity(identity_id=identity_id, role=IdentityRole.USER)


def nurse_identity(identity_id: str = "n1") -> CurrentIdentity:
    return CurrentIdentity(identity_id=identity_id, role=IdentityRole.NURSE)


def auth_headers(identity_id: str, role: IdentityRole = IdentityRole.USER) -> dict:
    return {"Authorization": f"Bearer {create_access_token(identity_id, role)}"}


@pytest.fixture
def make_service_request(db_session):
    """Insert a service request directly, bypassing the create rules."""

    async def _make(
        user_id: str = "u1",
        nurse_id: str = "n1",
        estado: ServiceRequestStatus = ServiceRequestStatus.PENDING,
        **overrides,
    ) -> ServiceRequest:
        service_request = ServiceRequest(
            user_id=user_id,
            nurse_id=nurse_id,
            patient_ids=overrides.pop("patient_ids", ["p1"]),
            estado=estado,
            detalles=overrides.pop("detalles", "checkup"),
            fecha=overrides.pop("fecha", date(2024, 1, 1)),
            tarifa=overrides.pop("tarifa", 50),
            **overrides,
        )
        db_session.add(service_request)
        await db_session.commit()
        await db_session.refresh(service_request)
        # release the shared connection before HTTP calls use it
        await db_session.commit()
        return service_request

    return _make
