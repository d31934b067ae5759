from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.backend.api.routes_auth import router as auth_router
from src.backend.api.routes_dashboard import router as dashboard_router
from src.backend.config import settings
from src.backend.services.users.service import InMemoryCredentialStore


def create_app(credential_store: Optional[InMemoryCredentialStore] = None) -> FastAPI:
    """Build the API application.

    The credential store lives for as long as the app does. When none is
    passed, a new one is created, seeded with the test accounts unless
    SEED_TEST_USERS=false.
    """

    application = FastAPI(title="DoseRight Medication Adherence API")

    if credential_store is None:
        if settings.seed_test_users:
            credential_store = InMemoryCredentialStore.with_seed_users()
        else:
            credential_store = InMemoryCredentialStore()
    application.state.credential_store = credential_store

    # CORS configuration – permissive by default for development. Tighten via
    # CORS_ALLOW_ORIGINS in production deployments.
    allow_origins = [origin.strip() for origin in settings.cors_allow_origins.split(",") if origin.strip()] or ["*"]
    application.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @application.get("/health", tags=["system"])
    async def health_check() -> dict:
        """Basic liveness probe for the API root."""
        return {"status": "ok"}

    application.include_router(auth_router, prefix=settings.api_prefix)
    application.include_router(dashboard_router, prefix=settings.api_prefix)

    return application


app = create_app()
