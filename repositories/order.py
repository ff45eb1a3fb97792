from decimal import Decimal

from sqlalchemy import select, update, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from enums.order_status import OrderStatus
from models.order import Order, OrderDTO, OrderSummaryDTO
from models.user import UserSummaryDTO
from repositories.orderItem import OrderItemRepository
from utils.pagination import get_offset


class OrderRepository:
    @staticmethod
    async def create(user_id: int, total_price: Decimal, session: AsyncSession) -> int:
        order = Order(user_id=user_id, status=OrderStatus.PENDING, total_price=total_price)
        session.add(order)
        await session.flush()
        return order.id

    @staticmethod
    async def get_by_id(order_id: int, session: AsyncSession) -> OrderDTO | None:
        stmt = (select(Order)
                .where(Order.id == order_id)
                .options(selectinload(Order.items))
                .execution_options(populate_existing=True))
        order = await session.execute(stmt)
        order = order.scalar()
        if order is not None:
            return OrderDTO.model_validate(order, from_attributes=True)
        else:
            return None

    @staticmethod
    async def get_without_items(order_id: int, session: AsyncSession) -> OrderDTO | None:
        stmt = (select(Order)
                .where(Order.id == order_id)
                .execution_options(populate_existing=True))
        order = await session.execute(stmt)
        order = order.scalar()
        if order is None:
            return None
        # items stays None; the relationship is never loaded
        return OrderDTO(
            id=order.id,
            user_id=order.user_id,
            status=order.status,
            total_price=order.total_price,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )

    @staticmethod
    async def get_paginated_by_user_id(user_id: int, page: int, limit: int,
                                       session: AsyncSession) -> tuple[list[OrderSummaryDTO], int]:
        return await OrderRepository._get_paginated(page, limit, session, user_id=user_id)

    @staticmethod
    async def get_paginated(page: int, limit: int, session: AsyncSession) -> tuple[list[OrderSummaryDTO], int]:
        return await OrderRepository._get_paginated(page, limit, session)

    @staticmethod
    async def _get_paginated(page: int, limit: int, session: AsyncSession,
                             user_id: int | None = None) -> tuple[list[OrderSummaryDTO], int]:
        # Owner listings carry no user block; the admin listing shows who ordered
        conditions = [] if user_id is None else [Order.user_id == user_id]
        item_count = OrderItemRepository.count_subquery()
        stmt = (select(Order, item_count)
                .where(*conditions)
                .order_by(Order.created_at.desc(), Order.id.desc())
                .offset(get_offset(page, limit))
                .limit(limit))
        count_stmt = select(func.count(Order.id)).where(*conditions)

        rows = await session.execute(stmt)
        total = await session.execute(count_stmt)
        orders = []
        for order, count in rows.all():
            summary = OrderSummaryDTO(
                id=order.id,
                status=order.status,
                total_price=order.total_price,
                created_at=order.created_at,
                item_count=count,
            )
            if user_id is None:
                summary.user_id = order.user_id
                summary.user = UserSummaryDTO.model_validate(order.user, from_attributes=True)
            orders.append(summary)
        return orders, total.scalar()

    @staticmethod
    async def update_status(order_id: int, status: OrderStatus, session: AsyncSession) -> bool:
        stmt = update(Order).where(Order.id == order_id).values(status=status)
        result = await session.execute(stmt)
        return result.rowcount == 1
