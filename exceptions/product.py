"""
Product-related exceptions.
"""

from .base import StoreException, NotFoundException, InvalidRequestException


class ProductException(StoreException):
    """Base exception for product-related errors."""
    pass


class ProductNotFoundException(ProductException, NotFoundException):
    """Raised when product is missing, or inactive where an active one is required."""

    def __init__(self, product_id: int, message: str = "Product not found"):
        super().__init__(
            message,
            details={'product_id': product_id}
        )
        self.product_id = product_id


class ProductUnavailableException(ProductException, InvalidRequestException):
    """Raised when an inactive product is found in a cart being ordered."""

    def __init__(self, product_id: int, product_name: str):
        super().__init__(
            f'Product "{product_name}" is no longer available',
            details={'product_id': product_id, 'product_name': product_name}
        )
        self.product_id = product_id
        self.product_name = product_name


class InsufficientStockException(ProductException, InvalidRequestException):
    """Raised when requested quantity exceeds available stock."""

    def __init__(self, product_id: int, requested: int, available: int | None = None,
                 product_name: str | None = None):
        if product_name:
            message = f'Insufficient stock for "{product_name}"'
        else:
            message = "Insufficient stock"
        details = {'product_id': product_id, 'requested': requested}
        if available is not None:
            details['available'] = available
        super().__init__(message, details)
        self.product_id = product_id
        self.requested = requested
        self.available = available
        self.product_name = product_name
