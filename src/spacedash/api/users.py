# src/spacedash/api/users.py

"""API endpoints for user accounts."""

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from spacedash.db.models import UserAccount
from spacedash.db.session import get_db
from spacedash.exceptions import MissingParameterError, UserNotFoundError
from spacedash.schemas.user import UserRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=UserRead)
async def read_user(
    username: str | None = Query(None, description="Account to fetch"),
    db: AsyncSession = Depends(get_db),
) -> UserAccount:
    """
    Retrieve a user account.

    Raises:
        400 Bad Request: If `username` is missing.
        404 Not Found: If the account doesn't exist.
    """
    if not username:
        raise MissingParameterError("username")

    user = await db.get(UserAccount, username)
    if user is None:
        raise UserNotFoundError(username)

    return user


@router.put("/character", response_model=UserRead)
async def update_character(
    username: str | None = Query(None, description="Account to update"),
    colour: str | None = Query(None, description="Character colour to select"),
    db: AsyncSession = Depends(get_db),
) -> UserAccount:
    """
    Select the character colour for a user.

    The account is created if it doesn't exist yet.

    Raises:
        400 Bad Request: If `username` or `colour` is missing.
    """
    if not username:
        raise MissingParameterError("username")
    if not colour:
        raise MissingParameterError("colour")

    user = await db.get(UserAccount, username)
    if user is None:
        user = UserAccount(username=username)
        db.add(user)
        logger.info("Creating user account", extra={"username": username})

    user.character = colour
    await db.commit()
    await db.refresh(user)

    return user
