# cart is a container for products a user intends to buy. One cart per user,
# created lazily on the first add.
#
# note that products are NOT reserved or blocked by the cart, so stock and the
# active flag are checked again when the order is placed
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel
from sqlalchemy import Column, Integer, ForeignKey, DateTime
from sqlalchemy.orm import relationship

from models.base import Base
from models.cartItem import CartItemDTO


class Cart(Base):
    __tablename__ = "carts"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False, unique=True)
    created_at = Column(DateTime, nullable=False, default=datetime.now)

    items = relationship("CartItem", back_populates="cart", cascade="all, delete-orphan",
                         order_by="CartItem.id")


class CartDTO(BaseModel):
    # id is None for the synthetic empty cart of a user who never added anything
    id: int | None = None
    items: list[CartItemDTO] = []
    total_price: Decimal = Decimal("0")
