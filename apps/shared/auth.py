"""
API Key Authentication

Simple API key-based authentication for admin operations.
Checks for X-API-Key header and validates against environment variable.
"""

import os
import hmac
import logging
from typing import Optional

from fastapi import HTTPException, status, Security
from fastapi.security import APIKeyHeader

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-API-Key"

INTERNAL_API_KEY = os.getenv("INTERNAL_API_KEY")
ENVIRONMENT = os.getenv("ENVIRONMENT", "development")

api_key_header = APIKeyHeader(name=API_KEY_HEADER, auto_error=False)


async def get_api_key(api_key: Optional[str] = Security(api_key_header)) -> Optional[str]:
    """
    Dependency to validate API key from header

    Usage in endpoints:
    @router.post("/reset")
    def reset(api_key: str = Depends(get_api_key)):
        # This endpoint requires valid API key
        pass
    """
    if not INTERNAL_API_KEY:
        if ENVIRONMENT == "production":
            raise RuntimeError(
                "INTERNAL_API_KEY must be set in production. "
                "Generate one with: python -c 'import secrets; print(secrets.token_urlsafe(32))'"
            )
        logger.warning(
            "API key authentication disabled - running in development mode. "
            "Set INTERNAL_API_KEY environment variable for security."
        )
        return None

    # Constant-time comparison
    if api_key is None or not hmac.compare_digest(api_key, INTERNAL_API_KEY):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={
                "message": "Invalid or missing API key",
                "category": "security",
            },
        )

    return api_key
