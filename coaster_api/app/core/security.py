"""
HTTP Basic authentication for the admin portal.

There is exactly one account.  The username is fixed to ``admin``
and the password is taken from ``Settings.admin_password``.

Known weakness: credentials are compared with plain string equality,
which is not constant-time and can leak timing information.
"""

import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from .config import Settings


ADMIN_USERNAME = "admin"

logger = logging.getLogger(__name__)

security = HTTPBasic(auto_error=False)


def get_settings(request: Request) -> Settings:
    """Return the settings the application was built with."""
    return request.app.state.settings


async def basic_credentials(request: Request) -> Optional[HTTPBasicCredentials]:
    """Return the Basic credentials of the request, or ``None``.

    ``HTTPBasic`` raises its own 401 for headers it cannot decode even
    with ``auto_error=False``; those are treated as missing credentials.
    """
    try:
        return await security(request)
    except HTTPException:
        logger.warning("Undecodable Basic authorization header")
        return None


def require_admin(
    credentials: Optional[HTTPBasicCredentials] = Depends(basic_credentials),
    settings: Settings = Depends(get_settings),
) -> str:
    """Dependency that admits only the admin account.

    Raises HTTP 401 when credentials are missing or wrong.  Returns the
    authenticated username on success.
    """
    if (
        credentials is None
        or credentials.username != ADMIN_USERNAME
        or credentials.password != settings.admin_password
    ):
        if credentials is not None:
            logger.warning("Rejected admin login for user %r", credentials.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="401 unauthorized",
            headers={"WWW-Authenticate": "Basic"},
        )
    return credentials.username
