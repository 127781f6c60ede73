"""FastAPI dependency utilities.

Authentication happens upstream; requests reach this service with the
caller's identifier in ``X-User-Id``. Admin-only operations additionally
require the shared ``X-Admin-Key``.
"""

import secrets

from fastapi import Depends, Header, HTTPException, status

from app.config import Settings, get_settings


def get_current_user_id(
    x_user_id: int | None = Header(default=None, alias="X-User-Id"),
) -> int:
    """Return the caller's user id or reject the request."""

    if x_user_id is None or x_user_id <= 0:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing or invalid X-User-Id header",
        )
    return x_user_id


def require_admin(
    x_admin_key: str | None = Header(default=None, alias="X-Admin-Key"),
    settings: Settings = Depends(get_settings),
) -> None:
    """Ensure the request carries the configured administrator key."""

    expected = settings.admin_api_key
    if not expected or not x_admin_key or not secrets.compare_digest(x_admin_key, expected):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized",
        )
