from sqlalchemy.ext.asyncio import AsyncSession

from exceptions.user import UserNotFoundException
from models.user import UserDTO
from repositories.user import UserRepository
from utils.pagination import PageDTO, build_page


class UserService:

    @staticmethod
    async def get_me(user_id: int, session: AsyncSession) -> UserDTO:
        user = await UserRepository.get_by_id(user_id, session)
        if user is None:
            raise UserNotFoundException(user_id)
        return user

    @staticmethod
    async def list_users(page: int, limit: int, session: AsyncSession) -> PageDTO[UserDTO]:
        users, total = await UserRepository.get_paginated(page, limit, session)
        return build_page(users, total, page, limit)
