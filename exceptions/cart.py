"""
Cart-related exceptions.
"""

from .base import StoreException, NotFoundException, InvalidRequestException


class CartException(StoreException):
    """Base exception for cart-related errors."""
    pass


class EmptyCartException(CartException, InvalidRequestException):
    """Raised when trying to place an order with an empty cart."""

    def __init__(self, user_id: int):
        super().__init__(
            "Cart is empty",
            details={'user_id': user_id}
        )
        self.user_id = user_id


class CartItemNotFoundException(CartException, NotFoundException):
    """Raised when cart item does not exist or belongs to another user's cart."""

    def __init__(self, cart_item_id: int):
        super().__init__(
            "Cart item not found",
            details={'cart_item_id': cart_item_id}
        )
        self.cart_item_id = cart_item_id


class InvalidCartQuantityException(CartException, InvalidRequestException):
    """Raised when a cart quantity is not a positive integer."""

    def __init__(self, quantity):
        super().__init__(
            f"Quantity must be a positive integer (got: {quantity!r})",
            details={'quantity': quantity}
        )
        self.quantity = quantity
