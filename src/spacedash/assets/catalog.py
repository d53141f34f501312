# src/spacedash/assets/catalog.py

"""Character image and spritesheet lookup in the asset bucket."""

from __future__ import annotations

import logging
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from spacedash.config import settings
from spacedash.exceptions import AssetNotFoundError, StoreUnavailableError

logger = logging.getLogger(__name__)

CHARACTERS_PREFIX = "characters/"
SPRITESHEETS_PREFIX = "spritesheets/"


def colour_of(key: str) -> str:
    """Extract the colour name from an object key.

    'characters/blue.png' -> 'blue'
    """
    return key.rsplit("/", 1)[-1].split(".", 1)[0]


class AssetCatalog:
    """Lists assets in an S3 bucket and maps them to CDN URLs.

    The S3 client is injected so tests can stub it.
    """

    def __init__(self, client: Any, bucket: str, cdn_domain: str) -> None:
        self._client = client
        self._bucket = bucket
        self._cdn_domain = cdn_domain.rstrip("/")

    def url_for(self, key: str) -> str:
        return f"{self._cdn_domain}/{key}"

    def list_files(self, prefix: str) -> list[str]:
        """Return every object key under ``prefix``, skipping folder keys."""
        keys: list[str] = []
        try:
            paginator = self._client.get_paginator("list_objects_v2")
            for page in paginator.paginate(Bucket=self._bucket, Prefix=prefix):
                for obj in page.get("Contents", []):
                    key = obj.get("Key")
                    if key and not key.endswith("/"):
                        keys.append(key)
        except (BotoCoreError, ClientError) as e:
            logger.error(
                "Error listing assets: %s",
                e,
                extra={"bucket": self._bucket, "prefix": prefix},
            )
            raise StoreUnavailableError("list_objects", str(e)) from e

        logger.debug(
            "Listed assets",
            extra={"bucket": self._bucket, "prefix": prefix, "count": len(keys)},
        )
        return keys

    def character_urls(self) -> dict[str, str]:
        """Map each character colour to the CDN URL of its image."""
        keys = self.list_files(CHARACTERS_PREFIX)
        if not keys:
            logger.warning("No character images found", extra={"prefix": CHARACTERS_PREFIX})
        return {colour_of(key): self.url_for(key) for key in keys}

    def spritesheet_url(self, colour: str) -> str:
        """Find the spritesheet for ``colour`` and return its CDN URL.

        Raises:
            AssetNotFoundError: If the folder is empty or no file matches
        """
        keys = self.list_files(SPRITESHEETS_PREFIX)
        if not keys:
            raise AssetNotFoundError(
                "No files found in the spritesheets folder",
                prefix=SPRITESHEETS_PREFIX,
            )

        for key in keys:
            if colour_of(key) == colour:
                return self.url_for(key)

        raise AssetNotFoundError(
            f"Spritesheet for character colour '{colour}' not found",
            prefix=SPRITESHEETS_PREFIX,
            colour=colour,
        )


def get_asset_catalog() -> AssetCatalog:
    """FastAPI dependency that provides a catalog for the configured bucket."""
    client = boto3.client("s3", region_name=settings.asset_region)
    return AssetCatalog(client, settings.asset_bucket, settings.cdn_domain)
