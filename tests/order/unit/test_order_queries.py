"""
Unit Tests: order listings, detail access and status updates.
"""

from decimal import Decimal
from unittest.mock import patch

import pytest

from enums.order_status import OrderStatus
from exceptions.order import OrderNotFoundException, OrderOwnershipException
from repositories.order import OrderRepository
from services.cart import CartService
from services.order import OrderService


async def place(session, user_id: int, product_id: int, quantity: int = 1):
    await CartService.add_item(user_id, product_id, quantity, session)
    return await OrderService.place_order(user_id, session)


class TestListForUser:

    @pytest.mark.asyncio
    async def test_only_own_orders_newest_first(self, test_session, users, products):
        first = await place(test_session, users["alice"], products["cable"])
        await place(test_session, users["bob"], products["cable"])
        second = await place(test_session, users["alice"], products["keyboard"], 2)

        page = await OrderService.list_for_user(users["alice"], 1, 10, test_session)

        assert [order.id for order in page.data] == [second.id, first.id]
        assert page.meta.total == 2
        assert page.meta.total_pages == 1
        assert page.data[0].item_count == 1
        assert page.data[0].total_price == Decimal("99.98")
        assert page.data[0].user is None

    @pytest.mark.asyncio
    async def test_pagination_meta(self, test_session, users, products):
        for _ in range(5):
            await place(test_session, users["alice"], products["cable"])

        page = await OrderService.list_for_user(users["alice"], 3, 2, test_session)

        assert len(page.data) == 1
        assert page.meta.model_dump() == {'total': 5, 'page': 3, 'limit': 2, 'total_pages': 3}

    @pytest.mark.asyncio
    async def test_no_orders(self, test_session, users):
        page = await OrderService.list_for_user(users["alice"], 1, 10, test_session)

        assert page.data == []
        assert page.meta.total == 0
        assert page.meta.total_pages == 0


class TestListAll:

    @pytest.mark.asyncio
    async def test_includes_every_user_with_user_block(self, test_session, users, products):
        await place(test_session, users["alice"], products["cable"])
        await place(test_session, users["bob"], products["cable"])

        page = await OrderService.list_all(1, 10, test_session)

        assert page.meta.total == 2
        assert {order.user_id for order in page.data} == {users["alice"], users["bob"]}
        bob_row = page.data[0]
        assert bob_row.user.email == "bob@example.com"
        assert bob_row.user.name == "Bob"


class TestGetOrder:

    @pytest.mark.asyncio
    async def test_owner_sees_order_with_items(self, test_session, users, products):
        order = await place(test_session, users["alice"], products["keyboard"], 2)

        fetched = await OrderService.get_order(order.id, users["alice"], False, test_session)

        assert fetched.id == order.id
        assert [(item.product_name, item.quantity) for item in fetched.items] == [("Keyboard", 2)]

    @pytest.mark.asyncio
    async def test_admin_sees_any_order(self, test_session, users, products):
        order = await place(test_session, users["alice"], products["keyboard"])

        fetched = await OrderService.get_order(order.id, users["admin"], True, test_session)

        assert fetched.user_id == users["alice"]

    @pytest.mark.asyncio
    async def test_other_user_is_forbidden(self, test_session, users, products):
        order = await place(test_session, users["alice"], products["keyboard"])

        with pytest.raises(OrderOwnershipException) as exc_info:
            await OrderService.get_order(order.id, users["bob"], False, test_session)

        assert exc_info.value.message == "Access denied"

    @pytest.mark.asyncio
    async def test_missing_order_is_not_found_even_for_strangers(self, test_session, users):
        with pytest.raises(OrderNotFoundException):
            await OrderService.get_order(777, users["bob"], False, test_session)


class TestUpdateStatus:

    @pytest.mark.asyncio
    async def test_sets_status_and_omits_items(self, test_session, users, products):
        order = await place(test_session, users["alice"], products["keyboard"])

        updated = await OrderService.update_status(order.id, OrderStatus.SHIPPED, test_session)

        assert updated.status == OrderStatus.SHIPPED
        assert updated.items is None
        assert updated.total_price == order.total_price

    @pytest.mark.asyncio
    async def test_reread_skips_order_items(self, test_session, users, products):
        order = await place(test_session, users["alice"], products["keyboard"])

        with patch.object(OrderRepository, 'get_by_id') as get_by_id:
            updated = await OrderService.update_status(order.id, OrderStatus.CANCELLED, test_session)

        get_by_id.assert_not_called()
        assert updated.id == order.id
        assert updated.user_id == users["alice"]
        assert updated.status == OrderStatus.CANCELLED
        assert updated.items is None

    @pytest.mark.asyncio
    async def test_without_items_missing_order(self, test_session):
        assert await OrderRepository.get_without_items(404, test_session) is None

    @pytest.mark.asyncio
    async def test_any_transition_is_allowed(self, test_session, users, products):
        order = await place(test_session, users["alice"], products["keyboard"])

        await OrderService.update_status(order.id, OrderStatus.DELIVERED, test_session)
        updated = await OrderService.update_status(order.id, OrderStatus.PENDING, test_session)

        assert updated.status == OrderStatus.PENDING

    @pytest.mark.asyncio
    async def test_status_change_does_not_restock(self, test_session, users, products):
        order = await place(test_session, users["alice"], products["keyboard"], 4)

        await OrderService.update_status(order.id, OrderStatus.CANCELLED, test_session)

        from repositories.product import ProductRepository
        product = await ProductRepository.get_by_id(products["keyboard"], test_session)
        assert product.stock == 6

    @pytest.mark.asyncio
    async def test_missing_order(self, test_session, users):
        with pytest.raises(OrderNotFoundException):
            await OrderService.update_status(404, OrderStatus.SHIPPED, test_session)
