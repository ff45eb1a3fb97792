from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel
from sqlalchemy import Column, Integer, Numeric, DateTime, ForeignKey, CheckConstraint, Index, Enum as SQLEnum
from sqlalchemy.orm import relationship

from enums.order_status import OrderStatus
from models.base import Base
from models.orderItem import OrderItemDTO
from models.user import UserSummaryDTO


class Order(Base):
    __tablename__ = 'orders'

    id = Column(Integer, primary_key=True, unique=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False)
    # Only column that changes after creation; any status may follow any other
    status = Column(SQLEnum(OrderStatus), nullable=False, default=OrderStatus.PENDING)
    # Snapshot of Σ(product_price × quantity) at placement time
    total_price = Column(Numeric(10, 2), nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.now)
    updated_at = Column(DateTime, nullable=False, default=datetime.now, onupdate=datetime.now)

    # Relations
    user = relationship('User', lazy="joined")
    items = relationship('OrderItem', back_populates='order', cascade='all, delete-orphan',
                         order_by='OrderItem.id')

    __table_args__ = (
        CheckConstraint('total_price >= 0', name='check_order_total_price_non_negative'),
        Index('ix_orders_user_created', 'user_id', 'created_at'),
    )


class OrderDTO(BaseModel):
    id: int | None = None
    user_id: int | None = None
    status: OrderStatus | None = None
    total_price: Decimal | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    items: list[OrderItemDTO] | None = None


class OrderSummaryDTO(BaseModel):
    """Row of an order listing."""
    id: int
    user_id: int | None = None
    status: OrderStatus
    total_price: Decimal
    created_at: datetime
    item_count: int
    user: UserSummaryDTO | None = None


class OrderStatusUpdateDTO(BaseModel):
    status: OrderStatus
