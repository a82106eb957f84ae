"""
Shared request dependencies: caller identity and storage
"""
from functools import lru_cache
from typing import Optional

import logfire
from fastapi import Header, HTTPException, status

from config.settings import settings
from storage.local_storage import LocalStorage


def get_current_user_id(x_user_id: Optional[str] = Header(None)) -> str:
    """
    Resolve the caller's user ID from the X-User-Id header.
    Session handling lives in front of this service; it forwards the ID.
    """
    if not x_user_id or not x_user_id.strip():
        logfire.warn("unauthenticated_request")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required"
        )
    return x_user_id.strip()


@lru_cache
def get_storage() -> LocalStorage:
    """Storage bound to the configured data directory"""
    return LocalStorage(settings.data_directory)
