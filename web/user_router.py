from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

import config
from services.user import UserService
from web.dependencies import CurrentUser, get_current_user, get_session, require_admin
from web.responses import envelope

user_router = APIRouter(prefix="/api/users", tags=["users"])


@user_router.get("/me")
async def get_me(current_user: CurrentUser = Depends(get_current_user),
                 session: AsyncSession = Depends(get_session)):
    return envelope(await UserService.get_me(current_user.id, session))


@user_router.get("")
async def list_users(page: int = Query(1, ge=1),
                     limit: int = Query(config.PAGE_LIMIT_DEFAULT, ge=1),
                     current_user: CurrentUser = Depends(require_admin),
                     session: AsyncSession = Depends(get_session)):
    """List all users (Admin only)."""
    return envelope(await UserService.list_users(page, limit, session))
