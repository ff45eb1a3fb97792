from decimal import Decimal

from pydantic import BaseModel
from sqlalchemy import Column, Integer, String, Numeric, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import relationship

from models.base import Base


# Immutable record of one purchased line. product_name / product_price are copied
# from the catalog when the order is placed and never re-derived, so later catalog
# edits or deactivation do not alter order history.
class OrderItem(Base):
    __tablename__ = 'order_items'

    __table_args__ = (
        CheckConstraint('product_price >= 0', name='ck_order_item_non_negative_price'),
        CheckConstraint('quantity > 0', name='ck_order_item_positive_quantity'),
        Index('ix_order_items_order_id', 'order_id'),
    )

    id = Column(Integer, primary_key=True)
    order_id = Column(Integer, ForeignKey('orders.id', ondelete='CASCADE'), nullable=False)
    # Soft reference: no FK, the product may be deactivated later
    product_id = Column(Integer, nullable=False)
    product_name = Column(String(255), nullable=False)
    product_price = Column(Numeric(10, 2), nullable=False)
    quantity = Column(Integer, nullable=False)

    order = relationship("Order", back_populates="items")


class OrderItemDTO(BaseModel):
    id: int | None = None
    product_id: int | None = None
    product_name: str | None = None
    product_price: Decimal | None = None
    quantity: int | None = None
