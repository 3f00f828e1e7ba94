# src/router/routers.py

from fastapi import FastAPI
from src.auth.auth_controller import router as auth_router
from src.modules.users.users_controller import router as users_router
from src.modules.nurses.nurses_controller import router as nurses_router
from src.modules.patients.patients_controller import router as patients_router
from src.modules.service_requests.service_requests_controller import router as service_requests_router
from src.modules.messages.messages_controller import router as messages_router
from src.modules.reviews.reviews_controller import router as reviews_router
from src.modules.transactions.transactions_controller import router as transactions_router
from src.modules.support.support_controller import router as support_router

def include_routers(app: FastAPI) -> None:
    """Include all API routers in the FastAPI application."""
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(nurses_router)
    app.include_router(patients_router)
    app.include_router(service_requests_router)
    app.include_router(messages_router)
    app.include_router(reviews_router)
    app.include_router(transactions_router)
    app.include_router(support_router)
