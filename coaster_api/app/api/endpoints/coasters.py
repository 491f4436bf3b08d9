"""
Coaster endpoints.

These routes expose the coaster collection: list, create, fetch by
id and a redirect to a randomly chosen coaster.  All handlers are
plain functions, so the server runs each request in a worker thread;
the store serialises access internally.

``/random`` is declared before ``/{coaster_id}`` so that the literal
segment wins over the path parameter.
"""

import logging
import random
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import RedirectResponse

from coaster_api.app.api.deps import coaster_payload, get_store
from coaster_api.app.schemas.coaster import Coaster, CoasterCreate
from coaster_api.app.services.coaster_store import CoasterStore

router = APIRouter()

logger = logging.getLogger(__name__)


@router.get("", response_model=List[Coaster])
def list_coasters(store: CoasterStore = Depends(get_store)) -> List[Coaster]:
    """Return every stored coaster.  Order is unspecified."""
    return store.list()


@router.post("", response_model=Coaster, status_code=status.HTTP_201_CREATED)
def create_coaster(
    response: Response,
    coaster_in: CoasterCreate = Depends(coaster_payload),
    store: CoasterStore = Depends(get_store),
) -> Coaster:
    """Create a coaster and return it with its assigned id.

    The content type and body are checked by :func:`coaster_payload`
    before this handler runs.
    """
    coaster_id = store.put(coaster_in)
    response.headers["Location"] = f"/coasters/{coaster_id}"
    return store.get(coaster_id)


@router.get("/random", status_code=status.HTTP_302_FOUND, response_class=RedirectResponse)
def random_coaster(store: CoasterStore = Depends(get_store)) -> RedirectResponse:
    """Redirect to a coaster picked uniformly at random.

    Returns HTTP 404 when the store is empty.
    """
    ids = store.ids()
    if not ids:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No coasters stored")
    if len(ids) == 1:
        target = ids[0]
    else:
        target = random.choice(ids)
    return RedirectResponse(url=f"/coasters/{target}", status_code=status.HTTP_302_FOUND)


@router.get("/{coaster_id}", response_model=Coaster)
def get_coaster(coaster_id: str, store: CoasterStore = Depends(get_store)) -> Coaster:
    """Retrieve a single coaster by id.  Returns HTTP 404 if missing."""
    coaster = store.get(coaster_id)
    if coaster is None:
        logger.info("Coaster %s not found", coaster_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No content found for ID, '{coaster_id}'",
        )
    return coaster
