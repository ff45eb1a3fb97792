"""
Order-related exceptions.
"""

from .base import StoreException, NotFoundException, ForbiddenException


class OrderException(StoreException):
    """Base exception for order-related errors."""
    pass


class OrderNotFoundException(OrderException, NotFoundException):
    """Raised when order is not found in database."""

    def __init__(self, order_id: int):
        super().__init__(
            "Order not found",
            details={'order_id': order_id}
        )
        self.order_id = order_id


class OrderOwnershipException(OrderException, ForbiddenException):
    """Raised when user attempts to access an order they don't own."""

    def __init__(self, order_id: int, user_id: int):
        super().__init__(
            "Access denied",
            details={'order_id': order_id, 'user_id': user_id}
        )
        self.order_id = order_id
        self.user_id = user_id
