"""Application settings read from the environment.

Protean providers are configured in ``domain.toml``; everything the HTTP
layer needs lives here.
"""

import os


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


SESSION_SECRET = os.getenv("SESSION_SECRET", "change-me-in-production")
SESSION_COOKIE = os.getenv("SESSION_COOKIE", "storefront_session")
SESSION_MAX_AGE = int(os.getenv("SESSION_MAX_AGE", str(60 * 60 * 24)))  # 24 hours

CORS_ORIGINS = [
    origin.strip() for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",") if origin.strip()
]

SEED_CATALOGUE_ON_STARTUP = _as_bool(os.getenv("SEED_CATALOGUE_ON_STARTUP", "true"))
