from __future__ import annotations

import hashlib
import hmac
from typing import Optional

from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader

from src.backend.config import settings

_diagnostics_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


def caller_fingerprint(api_key: str) -> str:
    """Short, non-reversible id for an API key, safe to put in audit logs."""
    return "api-key:" + hashlib.sha256(api_key.encode("utf-8")).hexdigest()[:16]


def _key_is_allowed(api_key: str) -> bool:
    candidate = api_key.encode("utf-8")
    return any(hmac.compare_digest(candidate, allowed.encode("utf-8")) for allowed in settings.allowed_api_keys())


async def require_user_listing(
    api_key: Optional[str] = Security(_diagnostics_key_header),
) -> Optional[str]:
    """Guard for the diagnostic user listing.

    Order matters: a disabled listing answers 404 before any key is looked
    at, so callers cannot learn the route exists. With ENABLE_API_AUTH on,
    the X-API-Key header must match one of API_KEYS.

    Returns the caller fingerprint, or None when API auth is off.
    """

    if not settings.enable_user_listing:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")

    if not settings.enable_api_auth:
        return None

    if not api_key or not _key_is_allowed(api_key):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing API key.",
        )

    return caller_fingerprint(api_key)
