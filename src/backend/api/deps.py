from __future__ import annotations

from fastapi import Request

from src.backend.services.users.service import InMemoryCredentialStore


def get_credential_store(request: Request) -> InMemoryCredentialStore:
    """Return the credential store owned by the running application.

    The store is created once in ``create_app`` and kept on ``app.state``.
    Tests can replace it through ``app.dependency_overrides``.
    """

    return request.app.state.credential_store
