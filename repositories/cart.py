from decimal import Decimal

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from models.cart import Cart, CartDTO
from models.cartItem import CartItem, CartItemDTO, CartProductDTO
from repositories.cartItem import CartItemRepository


class CartRepository:
    @staticmethod
    async def get_id_by_user_id(user_id: int, session: AsyncSession) -> int | None:
        stmt = select(Cart.id).where(Cart.user_id == user_id)
        cart_id = await session.execute(stmt)
        return cart_id.scalar()

    @staticmethod
    async def get_or_create(user_id: int, session: AsyncSession) -> int:
        cart_id = await CartRepository.get_id_by_user_id(user_id, session)
        if cart_id is None:
            cart = Cart(user_id=user_id)
            session.add(cart)
            await session.flush()
            return cart.id
        else:
            return cart_id

    @staticmethod
    async def get_with_items(user_id: int, session: AsyncSession) -> CartDTO | None:
        """
        Load the user's cart together with every line and its current product state.

        The result is a detached snapshot: prices, stock and the active flag are the
        values at read time and total_price is computed from them.
        """
        stmt = (select(Cart)
                .where(Cart.user_id == user_id)
                .options(selectinload(Cart.items).joinedload(CartItem.product))
                .execution_options(populate_existing=True))
        cart = await session.execute(stmt)
        cart = cart.scalar()
        if cart is None:
            return None

        items = [
            CartItemDTO(
                id=cart_item.id,
                quantity=cart_item.quantity,
                product=CartProductDTO.model_validate(cart_item.product, from_attributes=True)
            )
            for cart_item in cart.items
        ]
        total_price = sum((item.line_total for item in items), Decimal("0"))
        return CartDTO(id=cart.id, items=items, total_price=total_price)

    @staticmethod
    async def add_to_cart(cart_id: int, product_id: int, quantity: int, session: AsyncSession) -> None:
        # if the cart already holds a line for this product, increase its quantity,
        # otherwise create a new line
        get_existing_stmt = select(CartItem.id).where(
            CartItem.cart_id == cart_id,
            CartItem.product_id == product_id)
        existing_item_id = await session.execute(get_existing_stmt)
        existing_item_id = existing_item_id.scalar()

        if existing_item_id is None:
            await CartItemRepository.create(cart_id, product_id, quantity, session)
        else:
            # Incremented in SQL; stock is not re-checked against the merged quantity
            quantity_update_stmt = (update(CartItem)
                                    .where(CartItem.id == existing_item_id)
                                    .values(quantity=CartItem.quantity + quantity))
            await session.execute(quantity_update_stmt)
