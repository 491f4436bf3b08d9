"""
Shared FastAPI dependencies.

``create_app`` attaches the store to ``app.state``; these helpers hand
it to endpoints so that no handler touches a module level global.
"""

import logging

from fastapi import HTTPException, Request, status
from pydantic import ValidationError

from coaster_api.app.schemas.coaster import CoasterCreate
from coaster_api.app.services.coaster_store import CoasterStore


JSON_MEDIA_TYPE = "application/json"

logger = logging.getLogger(__name__)


def get_store(request: Request) -> CoasterStore:
    """Return the coaster store owned by the running application."""
    return request.app.state.store


async def coaster_payload(request: Request) -> CoasterCreate:
    """Read and validate the body of a coaster creation request.

    The ``content-type`` header must be exactly ``application/json``;
    otherwise HTTP 415 is raised before the body is read.  Decoding is
    left to pydantic, so a body that is not valid JSON, nests too
    deeply, or is not an object that fits :class:`CoasterCreate`
    results in HTTP 400 carrying the parser's message.
    """
    content_type = request.headers.get("content-type", "")
    if content_type != JSON_MEDIA_TYPE:
        logger.info("Rejected coaster with content-type %r", content_type)
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail=f"Need type of {JSON_MEDIA_TYPE} but got '{content_type}'",
        )

    body = await request.body()
    try:
        return CoasterCreate.model_validate_json(body)
    except ValidationError as exc:
        logger.info("Rejected malformed coaster body: %s", exc.errors()[0]["msg"])
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
