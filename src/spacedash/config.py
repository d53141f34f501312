# src/spacedash/config.py

"""Application settings loaded from environment variables."""

import os

from pydantic import BaseModel, Field


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


class Settings(BaseModel):
    """Runtime configuration for the SpaceDash stats service.

    Attributes:
        database_url: SQLAlchemy async URL (SQLite fallback for development)
        db_echo: Echo SQL statements to the log
        db_pool_size: Connection pool size for non-SQLite databases
        db_max_overflow: Extra connections allowed beyond the pool size
        db_pool_recycle: Seconds before a pooled connection is recycled
        cors_origins: Comma-separated list of allowed origins
        asset_bucket: S3 bucket holding character images and spritesheets
        asset_region: AWS region of the asset bucket
        cdn_domain: CDN domain that serves objects from the asset bucket
        leaderboard_size: Number of players in each top-N ranking
    """

    database_url: str = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./spacedash.db")
    db_echo: bool = _env_flag("DB_ECHO")
    db_pool_size: int = int(os.getenv("DB_POOL_SIZE", "20"))
    db_max_overflow: int = int(os.getenv("DB_MAX_OVERFLOW", "10"))
    db_pool_recycle: int = int(os.getenv("DB_POOL_RECYCLE", "3600"))

    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    asset_bucket: str = os.getenv("ASSET_BUCKET", "spacedash")
    asset_region: str = os.getenv("ASSET_REGION", "us-east-1")
    cdn_domain: str = os.getenv("CDN_DOMAIN", "https://d3vva0g6vi1eo1.cloudfront.net")

    leaderboard_size: int = Field(int(os.getenv("LEADERBOARD_SIZE", "10")), ge=0)

    @property
    def cors_origin_list(self) -> list[str]:
        """Allowed CORS origins as a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
