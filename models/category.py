from datetime import datetime

from pydantic import BaseModel, Field
from sqlalchemy import Integer, Column, String, DateTime
from sqlalchemy.orm import relationship

from models.base import Base


class Category(Base):
    __tablename__ = 'categories'

    id = Column(Integer, primary_key=True, unique=True)
    name = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False, unique=True)
    created_at = Column(DateTime, nullable=False, default=datetime.now)

    # Relationships
    products = relationship("Product", back_populates="category")


class CategoryDTO(BaseModel):
    id: int | None = None
    name: str | None = None
    slug: str | None = None
    created_at: datetime | None = None
    product_count: int | None = None


class CategoryRefDTO(BaseModel):
    id: int
    name: str


class CategoryCreateDTO(BaseModel):
    name: str = Field(..., min_length=2, max_length=255)


class CategoryUpdateDTO(BaseModel):
    name: str | None = Field(None, min_length=2, max_length=255)
