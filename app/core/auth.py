"""Current-user capability.

Operations that write on behalf of a signed-in user receive a
``CurrentUser`` explicitly.  The FastAPI dependency ``get_current_user``
builds it from the ``Authorization: Bearer <jwt>`` header by asking
Supabase Auth who the token belongs to.
"""

from __future__ import annotations

import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel

from app.db.supabase import get_supabase

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


class CurrentUser(BaseModel):
    """Identity of the signed-in user making the request."""
    id: str
    email: str | None = None


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> CurrentUser:
    """Resolve the bearer token into a ``CurrentUser`` or answer 401."""
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Not authenticated")

    try:
        response = get_supabase().auth.get_user(credentials.credentials)
    except Exception as exc:
        logger.warning("auth_token_rejected", extra={"error_message": str(exc)})
        raise _unauthorized("Invalid or expired token") from exc

    user = getattr(response, "user", None)
    if user is None or not getattr(user, "id", None):
        raise _unauthorized("Invalid or expired token")

    return CurrentUser(id=str(user.id), email=getattr(user, "email", None))
