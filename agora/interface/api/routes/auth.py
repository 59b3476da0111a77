"""Caller identity.

Authentication happens upstream; the gateway forwards the authenticated
user's id in the ``X-User-Id`` header.
"""

from typing import Optional
from uuid import UUID

from fastapi import Header, HTTPException, status


async def require_user_id(
    x_user_id: Optional[UUID] = Header(default=None, alias="X-User-Id"),
) -> str:
    """Return the caller's user id, or fail with 401."""
    if x_user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to vote",
        )
    return str(x_user_id)


async def optional_user_id(
    x_user_id: Optional[UUID] = Header(default=None, alias="X-User-Id"),
) -> Optional[str]:
    """Return the caller's user id when present."""
    return str(x_user_id) if x_user_id else None
