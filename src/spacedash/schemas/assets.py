# src/spacedash/schemas/assets.py

"""Schemas for character asset lookups."""

from .common import CamelModel


class SpritesheetRead(CamelModel):
    """CDN location of the spritesheet for one character colour."""

    character_colour: str
    url: str
