from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field
from sqlalchemy import Column, Integer, String, Text, Numeric, Boolean, DateTime, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import relationship

from models.base import Base
from models.category import CategoryRefDTO


class Product(Base):
    __tablename__ = 'products'

    id = Column(Integer, primary_key=True, unique=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False)
    category = relationship("Category", back_populates="products", lazy="joined")
    name = Column(String(255), nullable=False)
    slug = Column(String(300), nullable=False, unique=True)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    # Decremented only by order placement; see ProductRepository.decrement_stock
    stock = Column(Integer, nullable=False, default=0)
    image = Column(String(500), nullable=True)
    # Soft delete flag: historical orders keep pointing at deactivated rows
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=datetime.now)
    updated_at = Column(DateTime, nullable=False, default=datetime.now, onupdate=datetime.now)

    __table_args__ = (
        CheckConstraint('price >= 0', name='check_product_price_non_negative'),
        CheckConstraint('stock >= 0', name='check_product_stock_non_negative'),
        Index('ix_products_category_id', 'category_id'),
    )


class ProductDTO(BaseModel):
    id: int | None = None
    category_id: int | None = None
    name: str | None = None
    slug: str | None = None
    description: str | None = None
    price: Decimal | None = None
    stock: int | None = None
    image: str | None = None
    is_active: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    category: CategoryRefDTO | None = None


class ProductCreateDTO(BaseModel):
    name: str = Field(..., min_length=2, max_length=255)
    description: str | None = None
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    stock: int = Field(..., ge=0)
    image: str | None = Field(None, max_length=500)
    category_id: int = Field(..., gt=0)


class ProductUpdateDTO(BaseModel):
    name: str | None = Field(None, min_length=2, max_length=255)
    description: str | None = None
    price: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    stock: int | None = Field(None, ge=0)
    image: str | None = Field(None, max_length=500)
    category_id: int | None = Field(None, gt=0)
    is_active: bool | None = None
