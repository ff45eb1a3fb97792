"""
Request-scoped dependencies shared by all routers.

Authentication happens upstream: the gateway verifies the caller and forwards
the identity in X-User-Id / X-User-Role. This module only parses that identity
and enforces role checks.
"""

import logging
from typing import AsyncIterator

from fastapi import Depends, Header
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from db import get_db_session
from enums.user_role import UserRole
from exceptions.user import AdminRequiredException, InvalidIdentityException

logger = logging.getLogger(__name__)


class CurrentUser(BaseModel):
    id: int
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


async def get_session() -> AsyncIterator[AsyncSession]:
    async with get_db_session() as session:
        yield session


async def get_current_user(x_user_id: str | None = Header(None),
                           x_user_role: str | None = Header(None)) -> CurrentUser:
    if not x_user_id:
        logger.warning("Missing X-User-Id header")
        raise InvalidIdentityException("Authentication required")
    try:
        user_id = int(x_user_id)
        role = UserRole((x_user_role or UserRole.USER.value).upper())
    except ValueError:
        logger.warning(f"Malformed identity headers: user_id={x_user_id!r}, role={x_user_role!r}")
        raise InvalidIdentityException("Invalid identity", user_id=x_user_id, role=x_user_role)
    if user_id <= 0:
        raise InvalidIdentityException("Invalid identity", user_id=x_user_id)
    return CurrentUser(id=user_id, role=role)


async def require_admin(current_user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    if not current_user.is_admin:
        raise AdminRequiredException(current_user.id)
    return current_user
