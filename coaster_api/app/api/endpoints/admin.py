"""
Admin portal.

A single page protected by HTTP Basic authentication; see
``core.security.require_admin`` for the credential check.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from coaster_api.app.core.security import require_admin

router = APIRouter()

WELCOME_HTML = "<div><h2 style='color:orange;'>Welcome, admin</h2></div>"


@router.get("", response_class=HTMLResponse)
def admin_portal(username: str = Depends(require_admin)) -> HTMLResponse:
    return HTMLResponse(WELCOME_HTML)
