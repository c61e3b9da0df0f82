"""Configuration challenge endpoints: the flag and a demo token."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

import jwt
from fastapi import APIRouter, HTTPException

from ...core.config import get_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["challenge"])

API_FLAG = "FLAG{API_CONFIGURED}"
TOKEN_ALGORITHM = "HS256"


def _require_secret() -> str:
    secret = get_settings().jwt_secret
    if not secret:
        logger.error("JWT_SECRET is not configured")
        raise HTTPException(
            status_code=500,
            detail={
                "message": "Server misconfigured: JWT_SECRET not set",
                "hint": "Check your .env file!",
            },
        )
    return secret


@router.get("/flag")
async def get_flag():
    _require_secret()
    return {
        "success": True,
        "flag": API_FLAG,
        "message": "Congratulations! You fixed the API configuration!",
    }


@router.get("/token")
async def issue_token():
    """Issue a short-lived demo token signed with ``JWT_SECRET``."""
    secret = _require_secret()
    settings = get_settings()
    now = datetime.now(timezone.utc)
    claims = {
        "user": "demo",
        "role": "admin",
        "iat": now,
        "exp": now + timedelta(seconds=settings.token_ttl_seconds),
    }
    token = jwt.encode(claims, secret, algorithm=TOKEN_ALGORITHM)
    return {"token": token}
