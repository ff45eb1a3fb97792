from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from models.user import UserDTO, User
from utils.pagination import get_offset


class UserRepository:
    @staticmethod
    async def get_by_id(user_id: int, session: AsyncSession) -> UserDTO | None:
        stmt = select(User).where(User.id == user_id)
        user = await session.execute(stmt)
        user = user.scalar()
        if user is not None:
            return UserDTO.model_validate(user, from_attributes=True)
        else:
            return user

    @staticmethod
    async def create(user_dto: UserDTO, session: AsyncSession) -> int:
        user = User(**user_dto.model_dump(exclude_none=True))
        session.add(user)
        await session.flush()
        return user.id

    @staticmethod
    async def get_paginated(page: int, limit: int, session: AsyncSession) -> tuple[list[UserDTO], int]:
        stmt = (select(User)
                .order_by(User.created_at.desc(), User.id.desc())
                .offset(get_offset(page, limit))
                .limit(limit))
        users = await session.execute(stmt)
        total = await session.execute(select(func.count(User.id)))
        return [UserDTO.model_validate(user, from_attributes=True) for user in users.scalars().all()], total.scalar()
