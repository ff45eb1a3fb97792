"""
Models Package

This file ensures all SQLAlchemy models are imported and registered,
which is required for relationships to work correctly.
"""

from models.base import Base
from models.user import User
from models.category import Category
from models.product import Product
from models.cart import Cart
from models.cartItem import CartItem
from models.order import Order
from models.orderItem import OrderItem

__all__ = [
    'Base',
    'User',
    'Category',
    'Product',
    'Cart',
    'CartItem',
    'Order',
    'OrderItem',
]
