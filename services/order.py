from decimal import Decimal
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from enums.order_status import OrderStatus
from exceptions.cart import EmptyCartException
from exceptions.order import OrderNotFoundException, OrderOwnershipException
from exceptions.product import ProductUnavailableException, InsufficientStockException
from models.cart import CartDTO
from models.order import OrderDTO, OrderSummaryDTO
from models.orderItem import OrderItemDTO
from repositories.cart import CartRepository
from repositories.cartItem import CartItemRepository
from repositories.order import OrderRepository
from repositories.orderItem import OrderItemRepository
from repositories.product import ProductRepository
from utils.pagination import PageDTO, build_page
from utils.transaction_manager import TransactionManager

logger = logging.getLogger(__name__)


class OrderService:

    @staticmethod
    async def place_order(user_id: int, session: AsyncSession) -> OrderDTO:
        """
        Convert the user's cart into an order.

        Flow:
        1. Snapshot cart lines with their products (read only, no transaction yet)
        2. Validate every line: product active and stock >= quantity
        3. Compute total from the snapshot prices
        4. In one transaction: insert order + order items (name/price copied from
           the snapshot), decrement stock per line, empty the cart
        5. Return the created order

        Validation is all-or-nothing: the first bad line aborts placement. The stock
        decrement in step 4 is a conditional UPDATE, so an order that lost a race for
        the last units fails with InsufficientStockException and rolls back fully. The
        cart clear is checked the same way: if the snapshot lines are no longer all
        there (a parallel placement consumed the cart), the order rolls back with
        EmptyCartException.

        The total uses the price read in step 1; a catalog price change between the
        snapshot and the commit is accepted.

        Args:
            user_id: Owner of the cart
            session: Database session

        Returns:
            Created OrderDTO with items

        Raises:
            EmptyCartException: No cart or no lines, or the cart was consumed concurrently
            ProductUnavailableException: A line's product is inactive
            InsufficientStockException: A line exceeds stock (at validation or commit)
        """
        cart = await CartRepository.get_with_items(user_id, session)
        if cart is None or len(cart.items) == 0:
            raise EmptyCartException(user_id)

        OrderService._validate_cart(cart)
        total_price = OrderService._calculate_total(cart)
        order_items = [
            OrderItemDTO(
                product_id=item.product.id,
                product_name=item.product.name,
                product_price=item.product.price,
                quantity=item.quantity,
            )
            for item in cart.items
        ]

        async with TransactionManager.atomic_transaction(session):
            order_id = await OrderRepository.create(user_id, total_price, session)
            await OrderItemRepository.create_many(order_id, order_items, session)

            for item in cart.items:
                decremented = await ProductRepository.decrement_stock(item.product.id, item.quantity, session)
                if not decremented:
                    logger.warning(
                        f"⚠️ Stock for product {item.product.id} changed during placement for user {user_id}, "
                        f"rolling back order {order_id}"
                    )
                    raise InsufficientStockException(item.product.id, requested=item.quantity,
                                                     product_name=item.product.name)

            # A concurrent placement that already emptied this cart leaves fewer lines to delete
            cleared = await CartItemRepository.delete_by_cart_id(cart.id, session)
            if cleared != len(cart.items):
                logger.warning(f"⚠️ Cart {cart.id} of user {user_id} changed during placement, rolling back order {order_id}")
                raise EmptyCartException(user_id)

        logger.info(f"✅ Order {order_id} placed by user {user_id}: {len(order_items)} line(s), total {total_price}")
        return await OrderRepository.get_by_id(order_id, session)

    @staticmethod
    def _validate_cart(cart: CartDTO) -> None:
        for item in cart.items:
            if not item.product.is_active:
                raise ProductUnavailableException(item.product.id, item.product.name)
            if item.product.stock < item.quantity:
                raise InsufficientStockException(item.product.id, requested=item.quantity,
                                                 available=item.product.stock, product_name=item.product.name)

    @staticmethod
    def _calculate_total(cart: CartDTO) -> Decimal:
        return sum((item.line_total for item in cart.items), Decimal("0")).quantize(Decimal("0.01"))

    @staticmethod
    async def list_for_user(user_id: int, page: int, limit: int, session: AsyncSession) -> PageDTO[OrderSummaryDTO]:
        orders, total = await OrderRepository.get_paginated_by_user_id(user_id, page, limit, session)
        return build_page(orders, total, page, limit)

    @staticmethod
    async def list_all(page: int, limit: int, session: AsyncSession) -> PageDTO[OrderSummaryDTO]:
        orders, total = await OrderRepository.get_paginated(page, limit, session)
        return build_page(orders, total, page, limit)

    @staticmethod
    async def get_order(order_id: int, requester_id: int, is_admin: bool, session: AsyncSession) -> OrderDTO:
        order = await OrderRepository.get_by_id(order_id, session)
        if order is None:
            raise OrderNotFoundException(order_id)
        if not is_admin and order.user_id != requester_id:
            raise OrderOwnershipException(order_id, requester_id)
        return order

    @staticmethod
    async def update_status(order_id: int, status: OrderStatus, session: AsyncSession) -> OrderDTO:
        # No transition graph: any status may follow any status
        updated = await OrderRepository.update_status(order_id, status, session)
        if not updated:
            raise OrderNotFoundException(order_id)
        await session.commit()
        logger.info(f"📦 Order {order_id} status set to {status.value}")

        return await OrderRepository.get_without_items(order_id, session)
