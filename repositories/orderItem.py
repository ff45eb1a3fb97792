from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from models.order import Order
from models.orderItem import OrderItem, OrderItemDTO


class OrderItemRepository:
    @staticmethod
    async def create_many(order_id: int, order_items: list[OrderItemDTO], session: AsyncSession) -> list[OrderItemDTO]:
        created = []
        for order_item_dto in order_items:
            order_item = OrderItem(order_id=order_id, **order_item_dto.model_dump(exclude={'id'}))
            session.add(order_item)
            created.append(order_item)
        await session.flush()
        return [OrderItemDTO.model_validate(order_item, from_attributes=True) for order_item in created]

    @staticmethod
    async def get_by_order_id(order_id: int, session: AsyncSession) -> list[OrderItemDTO]:
        stmt = select(OrderItem).where(OrderItem.order_id == order_id).order_by(OrderItem.id)
        order_items = await session.execute(stmt)
        return [OrderItemDTO.model_validate(order_item, from_attributes=True)
                for order_item in order_items.scalars().all()]

    @staticmethod
    def count_subquery():
        """Correlated COUNT of order lines, for use as a column in order listings."""
        return (select(func.count(OrderItem.id))
                .where(OrderItem.order_id == Order.id)
                .correlate(Order)
                .scalar_subquery())
