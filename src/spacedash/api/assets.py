# src/spacedash/api/assets.py

"""API endpoints for character images and spritesheets."""

from fastapi import APIRouter, Depends, Query
from starlette.concurrency import run_in_threadpool

from spacedash.assets.catalog import AssetCatalog, get_asset_catalog
from spacedash.exceptions import MissingParameterError
from spacedash.schemas.assets import SpritesheetRead

router = APIRouter(tags=["Assets"])


@router.get("/characters", response_model=dict[str, str])
async def read_character_urls(
    catalog: AssetCatalog = Depends(get_asset_catalog),
) -> dict[str, str]:
    """
    List every character image as a colour -> CDN URL mapping.

    These are shown on the profile page for character selection.
    """
    return await run_in_threadpool(catalog.character_urls)


@router.get("/spritesheets", response_model=SpritesheetRead)
async def read_spritesheet(
    character_colour: str | None = Query(
        None, alias="characterColour", description="Colour picked by the player"
    ),
    catalog: AssetCatalog = Depends(get_asset_catalog),
) -> SpritesheetRead:
    """
    Get the CDN URL of the spritesheet for a character colour.

    Raises:
        400 Bad Request: If `characterColour` is missing.
        404 Not Found: If no spritesheet matches the colour.
    """
    if not character_colour:
        raise MissingParameterError("characterColour")

    url = await run_in_threadpool(catalog.spritesheet_url, character_colour)
    return SpritesheetRead(character_colour=character_colour, url=url)
