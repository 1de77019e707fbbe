"""
BirdAPI: Bird Route Handlers
=============================

What:  GET /bird lists stored birds; POST /bird stores one from a form.
How:   Both handlers take the store through Depends(get_store).
Who:   GET is called by the landing page script; POST by its HTML form.

Request Flow (POST /bird):
    1. Browser submits species/description as form data
    2. Fields are extracted (missing fields read as "")
    3. The store persists a Bird
    4. 302 Found back to the landing page under ASSETS_URL
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse

from birdapi.config import Settings
from birdapi.dependencies import get_settings, get_store
from birdapi.forms import read_form_fields
from birdapi.schemas.bird import Bird, ErrorResponse
from birdapi.stores import BirdStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Birds"])


@router.get(
    "/bird",
    response_model=List[Bird],
    responses={
        200: {"description": "Every stored bird"},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="List birds",
)
async def list_birds(store: BirdStore = Depends(get_store)) -> List[Bird]:
    birds = await store.get_birds()
    logger.debug("Listing %d birds", len(birds))
    return birds


@router.post(
    "/bird",
    status_code=302,
    response_class=RedirectResponse,
    responses={
        302: {"description": "Bird stored; redirect to the landing page"},
        500: {"description": "Malformed form or store error", "model": ErrorResponse},
    },
    summary="Store a bird from form data",
    description=(
        "Accepts `species` and `description` as form fields. Missing fields are "
        "stored as empty strings. Redirects to the static landing page."
    ),
)
async def create_bird(
    request: Request,
    store: BirdStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> RedirectResponse:
    fields = await read_form_fields(request, "species", "description")
    bird = Bird(**fields)

    await store.create_bird(bird)
    logger.info("Stored bird '%s'", bird.species)

    return RedirectResponse(url=settings.assets_url, status_code=302)
