"""
Unit Tests: ProductService

- list_products(): active-only listing, search, category filter, sorting
- get_product(): inactive products stay readable by id
- create/update/deactivate: category checks and slug generation
"""

from decimal import Decimal

import pytest

from enums.product_sort import ProductSort
from exceptions.category import UnknownCategoryReferenceException
from exceptions.product import ProductNotFoundException
from models.category import Category
from models.product import ProductCreateDTO, ProductUpdateDTO
from services.product import ProductService


class TestListProducts:

    @pytest.mark.asyncio
    async def test_inactive_products_are_hidden(self, test_session, products):
        page = await ProductService.list_products(1, 10, test_session)

        names = {product.name for product in page.data}
        assert names == {"Keyboard", "Mouse", "USB Cable"}
        assert page.meta.total == 3

    @pytest.mark.asyncio
    async def test_sort_by_price(self, test_session, products):
        page = await ProductService.list_products(1, 10, test_session, sort_by=ProductSort.PRICE_ASC)

        assert [product.price for product in page.data] == [Decimal("5.50"), Decimal("19.99"), Decimal("49.99")]

    @pytest.mark.asyncio
    async def test_sort_by_name_desc(self, test_session, products):
        page = await ProductService.list_products(1, 10, test_session, sort_by=ProductSort.NAME_DESC)

        assert [product.name for product in page.data] == ["USB Cable", "Mouse", "Keyboard"]

    @pytest.mark.asyncio
    async def test_search_by_name(self, test_session, products):
        page = await ProductService.list_products(1, 10, test_session, search="Cable")

        assert [product.name for product in page.data] == ["USB Cable"]

    @pytest.mark.asyncio
    async def test_filter_by_category(self, test_session, products):
        other = Category(name="Books", slug="books")
        test_session.add(other)
        await test_session.commit()
        await ProductService.create_product(
            ProductCreateDTO(name="Novel", price=Decimal("12.00"), stock=3, category_id=other.id), test_session)

        page = await ProductService.list_products(1, 10, test_session, category_id=other.id)

        assert [product.name for product in page.data] == ["Novel"]
        assert page.data[0].category.name == "Books"

    @pytest.mark.asyncio
    async def test_pagination(self, test_session, products):
        page = await ProductService.list_products(2, 2, test_session, sort_by=ProductSort.NAME_ASC)

        assert [product.name for product in page.data] == ["USB Cable"]
        assert page.meta.total_pages == 2


class TestGetProduct:

    @pytest.mark.asyncio
    async def test_inactive_product_is_readable_by_id(self, test_session, products):
        product = await ProductService.get_product(products["retired"], test_session)

        assert product.is_active is False
        assert product.category.name == "Electronics"

    @pytest.mark.asyncio
    async def test_missing(self, test_session, products):
        with pytest.raises(ProductNotFoundException):
            await ProductService.get_product(31337, test_session)


class TestCreateProduct:

    @pytest.mark.asyncio
    async def test_creates_with_generated_slug(self, test_session, category):
        product = await ProductService.create_product(
            ProductCreateDTO(name="Gaming Mouse", price=Decimal("29.90"), stock=4, category_id=category),
            test_session)

        assert product.id is not None
        assert product.slug.startswith("gaming-mouse-")
        assert product.is_active is True
        assert product.price == Decimal("29.90")

    @pytest.mark.asyncio
    async def test_same_name_gets_distinct_slugs(self, test_session, category):
        payload = ProductCreateDTO(name="Lamp", price=Decimal("9.00"), stock=1, category_id=category)

        first = await ProductService.create_product(payload, test_session)
        second = await ProductService.create_product(payload, test_session)

        assert first.slug != second.slug

    @pytest.mark.asyncio
    async def test_unknown_category(self, test_session, category):
        with pytest.raises(UnknownCategoryReferenceException):
            await ProductService.create_product(
                ProductCreateDTO(name="Lamp", price=Decimal("9.00"), stock=1, category_id=999), test_session)


class TestUpdateProduct:

    @pytest.mark.asyncio
    async def test_partial_update(self, test_session, products):
        product = await ProductService.update_product(
            products["mouse"], ProductUpdateDTO(stock=25), test_session)

        assert product.stock == 25
        assert product.name == "Mouse"
        assert product.slug == "mouse-1"

    @pytest.mark.asyncio
    async def test_rename_regenerates_slug(self, test_session, products):
        product = await ProductService.update_product(
            products["mouse"], ProductUpdateDTO(name="Wireless Mouse"), test_session)

        assert product.slug.startswith("wireless-mouse-")

    @pytest.mark.asyncio
    async def test_explicit_null_on_required_field_is_ignored(self, test_session, products):
        product = await ProductService.update_product(
            products["mouse"], ProductUpdateDTO(price=None, description=None), test_session)

        assert product.price == Decimal("19.99")
        assert product.description is None

    @pytest.mark.asyncio
    async def test_unknown_category(self, test_session, products):
        with pytest.raises(UnknownCategoryReferenceException):
            await ProductService.update_product(products["mouse"], ProductUpdateDTO(category_id=999), test_session)

    @pytest.mark.asyncio
    async def test_missing_product(self, test_session, products):
        with pytest.raises(ProductNotFoundException):
            await ProductService.update_product(999, ProductUpdateDTO(stock=1), test_session)


class TestDeactivateProduct:

    @pytest.mark.asyncio
    async def test_soft_delete(self, test_session, products):
        result = await ProductService.deactivate_product(products["keyboard"], test_session)

        assert result == {"message": "Product deactivated successfully"}
        product = await ProductService.get_product(products["keyboard"], test_session)
        assert product.is_active is False
        page = await ProductService.list_products(1, 10, test_session)
        assert products["keyboard"] not in {product.id for product in page.data}
