"""
Custom exceptions for the store backend.

This module provides a hierarchy of custom exceptions for consistent error handling
throughout the application.

Exception Hierarchy:
--------------------
StoreException (base)
├── NotFoundException          (kind → HTTP 404)
├── InvalidRequestException    (kind → HTTP 400)
├── ForbiddenException         (kind → HTTP 403)
├── ConflictException          (kind → HTTP 409)
├── AuthenticationException    (kind → HTTP 401)
├── CartException
│   ├── EmptyCartException                  (InvalidRequest)
│   ├── CartItemNotFoundException           (NotFound)
│   └── InvalidCartQuantityException        (InvalidRequest)
├── ProductException
│   ├── ProductNotFoundException            (NotFound)
│   ├── ProductUnavailableException         (InvalidRequest)
│   └── InsufficientStockException          (InvalidRequest)
├── CategoryException
│   ├── CategoryNotFoundException           (NotFound)
│   ├── UnknownCategoryReferenceException   (InvalidRequest)
│   ├── CategoryAlreadyExistsException      (Conflict)
│   └── CategoryInUseException              (Conflict)
├── OrderException
│   ├── OrderNotFoundException              (NotFound)
│   └── OrderOwnershipException             (Forbidden)
└── UserException
    ├── UserNotFoundException               (NotFound)
    ├── AdminRequiredException              (Forbidden)
    └── InvalidIdentityException            (Authentication)

Usage:
------
Services raise specific exceptions:
    raise OrderNotFoundException(order_id=123)

The HTTP layer catches StoreException and answers with the status of its kind:
    except NotFoundException as e:  # 404
"""

from .base import (
    StoreException,
    NotFoundException,
    InvalidRequestException,
    ForbiddenException,
    ConflictException,
    AuthenticationException,
)
from .cart import CartException, EmptyCartException, CartItemNotFoundException, InvalidCartQuantityException
from .product import (
    ProductException,
    ProductNotFoundException,
    ProductUnavailableException,
    InsufficientStockException,
)
from .category import (
    CategoryException,
    CategoryNotFoundException,
    UnknownCategoryReferenceException,
    CategoryAlreadyExistsException,
    CategoryInUseException,
)
from .order import OrderException, OrderNotFoundException, OrderOwnershipException
from .user import UserException, UserNotFoundException, AdminRequiredException, InvalidIdentityException

__all__ = [
    # Base and kinds
    'StoreException',
    'NotFoundException',
    'InvalidRequestException',
    'ForbiddenException',
    'ConflictException',
    'AuthenticationException',

    # Cart
    'CartException',
    'EmptyCartException',
    'CartItemNotFoundException',
    'InvalidCartQuantityException',

    # Product
    'ProductException',
    'ProductNotFoundException',
    'ProductUnavailableException',
    'InsufficientStockException',

    # Category
    'CategoryException',
    'CategoryNotFoundException',
    'UnknownCategoryReferenceException',
    'CategoryAlreadyExistsException',
    'CategoryInUseException',

    # Order
    'OrderException',
    'OrderNotFoundException',
    'OrderOwnershipException',

    # User
    'UserException',
    'UserNotFoundException',
    'AdminRequiredException',
    'InvalidIdentityException',
]
