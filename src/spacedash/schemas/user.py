# src/spacedash/schemas/user.py

"""Pydantic schemas for user accounts."""

from pydantic import BaseModel, ConfigDict


class UserRead(BaseModel):
    """Properties to return to the client."""

    username: str
    character: str | None = None

    model_config = ConfigDict(from_attributes=True)
