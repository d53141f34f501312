# src/spacedash/db/store.py

"""Key-value access to raw player stats records."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from spacedash.db.models import PlayerStatsRecord
from spacedash.db.session import get_db
from spacedash.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)


class PlayerStatsStore:
    """Get, put and scan raw stats records by username.

    Records are returned as plain dicts exactly as stored; the only
    guarantee is that ``username`` carries the primary key.
    """

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def get(self, username: str) -> dict[str, Any] | None:
        """Fetch a single record, or None if the username is unknown."""
        try:
            row = await self._db.get(PlayerStatsRecord, username)
        except SQLAlchemyError as e:
            raise self._unavailable("get", e) from e

        if row is None:
            return None
        return _with_key(row)

    async def put(self, username: str, record: dict[str, Any]) -> None:
        """Overwrite the whole record for a username (last write wins)."""
        document = dict(record)
        document["username"] = username

        try:
            row = await self._db.get(PlayerStatsRecord, username)
            if row is None:
                row = PlayerStatsRecord(username=username, record=document)
                self._db.add(row)
            else:
                row.record = document
            await self._db.commit()
        except SQLAlchemyError as e:
            await self._db.rollback()
            raise self._unavailable("put", e) from e

        logger.debug("Stored player stats", extra={"username": username})

    async def scan_all(self) -> list[dict[str, Any]]:
        """Read every record, oldest first.

        The full result set is materialized before returning.
        """
        query = select(PlayerStatsRecord).order_by(
            PlayerStatsRecord.created_at, PlayerStatsRecord.username
        )
        try:
            result = await self._db.execute(query)
            rows = list(result.scalars().all())
        except SQLAlchemyError as e:
            raise self._unavailable("scan", e) from e

        logger.debug("Scanned player stats", extra={"record_count": len(rows)})
        return [_with_key(row) for row in rows]

    @staticmethod
    def _unavailable(operation: str, exc: Exception) -> StoreUnavailableError:
        logger.error(
            "Player stats store %s failed: %s",
            operation,
            exc,
            extra={"operation": operation},
        )
        return StoreUnavailableError(operation, str(exc))


def _with_key(row: PlayerStatsRecord) -> dict[str, Any]:
    document = dict(row.record) if isinstance(row.record, dict) else {}
    document["username"] = row.username
    return document


async def get_stats_store(db: AsyncSession = Depends(get_db)) -> PlayerStatsStore:
    """FastAPI dependency that provides a store bound to the request session."""
    return PlayerStatsStore(db)
