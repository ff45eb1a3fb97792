from enum import Enum


class OrderStatus(str, Enum):
    PENDING = "PENDING"             # Created from cart, awaiting processing
    PROCESSING = "PROCESSING"       # Picked up by staff
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"
