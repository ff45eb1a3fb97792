from decimal import Decimal

from pydantic import BaseModel, Field
from sqlalchemy import Column, Integer, ForeignKey, CheckConstraint, UniqueConstraint
from sqlalchemy.orm import relationship

from models.base import Base


class CartItem(Base):
    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True)
    cart_id = Column(Integer, ForeignKey("carts.id", ondelete="CASCADE"), nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    quantity = Column(Integer, nullable=False)

    cart = relationship("Cart", back_populates="items")
    product = relationship("Product", lazy="joined")

    __table_args__ = (
        CheckConstraint('quantity > 0', name='check_quantity_positive'),
        UniqueConstraint('cart_id', 'product_id', name='uq_cart_items_cart_product'),
    )


class CartProductDTO(BaseModel):
    id: int
    name: str
    price: Decimal
    stock: int
    image: str | None = None
    is_active: bool


class CartItemDTO(BaseModel):
    id: int
    quantity: int
    product: CartProductDTO

    @property
    def line_total(self) -> Decimal:
        return self.product.price * self.quantity


class CartItemAddDTO(BaseModel):
    product_id: int = Field(..., gt=0)
    quantity: int = Field(..., ge=1)


class CartItemUpdateDTO(BaseModel):
    quantity: int = Field(..., ge=1)
