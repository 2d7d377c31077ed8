"""Shared route dependencies."""

import hmac

from fastapi import Header, HTTPException

from app.config import settings


async def verify_api_key(x_api_key: str | None = Header(default=None)):
    """Require X-API-Key when API_KEY is configured; no-op otherwise."""
    if not settings.api_key:
        return
    if not x_api_key or not hmac.compare_digest(x_api_key.encode(), settings.api_key.encode()):
        raise HTTPException(401, "Invalid or missing API key")
