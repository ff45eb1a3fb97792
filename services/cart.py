import logging

from sqlalchemy.ext.asyncio import AsyncSession

from exceptions.cart import CartItemNotFoundException, InvalidCartQuantityException
from exceptions.product import ProductNotFoundException, InsufficientStockException
from models.cart import CartDTO
from repositories.cart import CartRepository
from repositories.cartItem import CartItemRepository
from repositories.product import ProductRepository

logger = logging.getLogger(__name__)


class CartService:
    """
    Per-user shopping cart.

    Cart writes are optimistic: they check stock against the requested quantity only,
    without a transaction. A cart is a hint, OrderService.place_order re-validates
    every line against live stock before anything is sold.
    """

    @staticmethod
    def _validate_quantity(quantity) -> None:
        # bool is an int subclass but never a valid quantity
        if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity < 1:
            raise InvalidCartQuantityException(quantity)

    @staticmethod
    async def get_cart(user_id: int, session: AsyncSession) -> CartDTO:
        cart = await CartRepository.get_with_items(user_id, session)
        if cart is None:
            return CartDTO(id=None, items=[])
        return cart

    @staticmethod
    async def add_item(user_id: int, product_id: int, quantity: int, session: AsyncSession) -> CartDTO:
        CartService._validate_quantity(quantity)

        product = await ProductRepository.get_by_id(product_id, session)
        if product is None or not product.is_active:
            raise ProductNotFoundException(product_id, "Product not found or unavailable")
        if product.stock < quantity:
            raise InsufficientStockException(product_id, requested=quantity, available=product.stock)

        cart_id = await CartRepository.get_or_create(user_id, session)
        await CartRepository.add_to_cart(cart_id, product_id, quantity, session)
        await session.commit()
        logger.info(f"🛒 User {user_id} added product {product_id} x{quantity} to cart {cart_id}")

        return await CartService.get_cart(user_id, session)

    @staticmethod
    async def update_item(user_id: int, cart_item_id: int, quantity: int, session: AsyncSession) -> CartDTO:
        CartService._validate_quantity(quantity)

        cart_item = await CartItemRepository.get_owned(cart_item_id, user_id, session)
        if cart_item is None:
            raise CartItemNotFoundException(cart_item_id)
        if cart_item.product.stock < quantity:
            raise InsufficientStockException(cart_item.product.id, requested=quantity,
                                             available=cart_item.product.stock)

        await CartItemRepository.update_quantity(cart_item_id, quantity, session)
        await session.commit()
        logger.info(f"🛒 User {user_id} set cart item {cart_item_id} to x{quantity}")

        return await CartService.get_cart(user_id, session)

    @staticmethod
    async def remove_item(user_id: int, cart_item_id: int, session: AsyncSession) -> CartDTO:
        cart_item = await CartItemRepository.get_owned(cart_item_id, user_id, session)
        if cart_item is None:
            raise CartItemNotFoundException(cart_item_id)

        await CartItemRepository.delete(cart_item_id, session)
        await session.commit()
        logger.info(f"🗑️ User {user_id} removed cart item {cart_item_id}")

        return await CartService.get_cart(user_id, session)

    @staticmethod
    async def clear_cart(user_id: int, session: AsyncSession) -> dict:
        cart_id = await CartRepository.get_id_by_user_id(user_id, session)
        if cart_id is not None:
            removed = await CartItemRepository.delete_by_cart_id(cart_id, session)
            await session.commit()
            logger.info(f"🗑️ User {user_id} cleared cart {cart_id} ({removed} item(s))")
        return {"message": "Cart cleared successfully"}
