from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession

from models.cart import Cart
from models.cartItem import CartItem, CartItemDTO, CartProductDTO


class CartItemRepository:
    @staticmethod
    async def create(cart_id: int, product_id: int, quantity: int, session: AsyncSession) -> int:
        cart_item = CartItem(cart_id=cart_id, product_id=product_id, quantity=quantity)
        session.add(cart_item)
        await session.flush()
        return cart_item.id

    @staticmethod
    async def get_owned(cart_item_id: int, user_id: int, session: AsyncSession) -> CartItemDTO | None:
        """
        Fetch a cart line only if it sits in the cart of `user_id`.

        Ownership is part of the query itself; a line in someone else's cart is
        indistinguishable from a missing one.
        """
        stmt = (select(CartItem)
                .join(Cart, Cart.id == CartItem.cart_id)
                .where(CartItem.id == cart_item_id, Cart.user_id == user_id)
                .execution_options(populate_existing=True))
        cart_item = await session.execute(stmt)
        cart_item = cart_item.scalar()
        if cart_item is None:
            return None
        return CartItemDTO(
            id=cart_item.id,
            quantity=cart_item.quantity,
            product=CartProductDTO.model_validate(cart_item.product, from_attributes=True)
        )

    @staticmethod
    async def update_quantity(cart_item_id: int, quantity: int, session: AsyncSession) -> None:
        stmt = (update(CartItem)
                .where(CartItem.id == cart_item_id)
                .values(quantity=quantity))
        await session.execute(stmt)

    @staticmethod
    async def delete(cart_item_id: int, session: AsyncSession) -> None:
        stmt = delete(CartItem).where(CartItem.id == cart_item_id)
        await session.execute(stmt)

    @staticmethod
    async def delete_by_cart_id(cart_id: int, session: AsyncSession) -> int:
        stmt = delete(CartItem).where(CartItem.cart_id == cart_id)
        result = await session.execute(stmt)
        return result.rowcount
