# src/spacedash/db/models.py

"""Database models for the SpaceDash application."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, declarative_base, mapped_column

Base = declarative_base()


# ===============================================
# Mixins for Common Columns
# ===============================================


class TimestampMixin:
    """Mixin providing created_at and updated_at timestamp columns."""

    created_at: Mapped[datetime] = mapped_column(
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        default=None,
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=True,
    )


# ===============================================
# Key-Value Tables
# ===============================================


class PlayerStatsRecord(Base, TimestampMixin):
    """One player's raw stats document, keyed by username.

    The document is schema-less on purpose. Typical shape:
        {
            "username": "ace",
            "coins-collected": 120,
            "enemies-defeated": 14,
            "levels-completed": ["level1", "level2"],
            "fastest-times": {"level1": {"L": [{"N": "31.2"}]}},
        }
    Readers must go through the record normalizer.
    """

    __tablename__ = "player_stats"
    username: Mapped[str] = mapped_column(String, primary_key=True)
    record: Mapped[dict] = mapped_column(JSON, nullable=False, default=lambda: {})

    def __init__(self, username: str, **kw: Any):
        super().__init__(**kw)
        self.username = username


class UserAccount(Base, TimestampMixin):
    """A player account and the character colour they picked."""

    __tablename__ = "users"
    username: Mapped[str] = mapped_column(String, primary_key=True)
    character: Mapped[str | None] = mapped_column(String, nullable=True)

    def __init__(self, username: str, **kw: Any):
        super().__init__(**kw)
        self.username = username
