from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional


@dataclass
class Settings:
    """Centralized application settings.

    This keeps environment-variable handling in one place so other modules can
    depend on strongly-typed attributes instead of calling os.getenv
    directly.
    """

    # Prefix under which the auth and dashboard routers are mounted.
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    # Whether the credential store starts with the three test accounts.
    seed_test_users: bool = os.getenv("SEED_TEST_USERS", "true").lower() == "true"

    # The /auth/users listing exposes every stored profile. It is kept for
    # local testing; set ENABLE_USER_LISTING=false to turn it into a 404.
    enable_user_listing: bool = os.getenv("ENABLE_USER_LISTING", "true").lower() == "true"

    # Optional API key check for the diagnostic user listing.
    # When ENABLE_API_AUTH=true, the listing requires a valid X-API-Key.
    enable_api_auth: bool = os.getenv("ENABLE_API_AUTH", "false").lower() == "true"
    # Comma-separated list of allowed API keys when auth is enabled.
    api_keys: Optional[str] = os.getenv("API_KEYS")

    # CORS configuration: comma-separated origins (e.g. "https://app.example.com").
    # Default is "*" (allow all) which suits local development with the
    # dashboard frontend; tighten in production.
    cors_allow_origins: str = os.getenv("CORS_ALLOW_ORIGINS", "*")

    def allowed_api_keys(self) -> List[str]:
        """API_KEYS split on commas, whitespace stripped, empties dropped."""
        if not self.api_keys:
            return []
        return [key.strip() for key in self.api_keys.split(",") if key.strip()]


settings = Settings()
