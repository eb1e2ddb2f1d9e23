"""Dependency injection for FastAPI endpoints"""

from typing import Optional
from fastapi import Header, HTTPException, Request


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_user_id(x_user_id: Optional[str] = Header(None, alias="X-User-ID")) -> str:
    """
    Authenticated user identifier.

    Set by the auth layer in front of this service; every record is scoped by it.
    """
    if x_user_id is None or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Missing X-User-ID header")
    return x_user_id.strip()
