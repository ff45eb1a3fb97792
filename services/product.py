import logging

from sqlalchemy.ext.asyncio import AsyncSession

from enums.product_sort import ProductSort
from exceptions.category import UnknownCategoryReferenceException
from exceptions.product import ProductNotFoundException
from models.product import ProductDTO, ProductCreateDTO, ProductUpdateDTO
from repositories.category import CategoryRepository
from repositories.product import ProductRepository
from utils.pagination import PageDTO, build_page
from utils.slug import product_slug

logger = logging.getLogger(__name__)


class ProductService:

    @staticmethod
    async def list_products(page: int,
                            limit: int,
                            session: AsyncSession,
                            search: str | None = None,
                            category_id: int | None = None,
                            sort_by: ProductSort = ProductSort.NEWEST) -> PageDTO[ProductDTO]:
        """Active products only; deactivated ones stay reachable by id for order history."""
        products, total = await ProductRepository.get_paginated(page, limit, session,
                                                                search=search,
                                                                category_id=category_id,
                                                                sort_by=sort_by)
        return build_page(products, total, page, limit)

    @staticmethod
    async def get_product(product_id: int, session: AsyncSession) -> ProductDTO:
        product = await ProductRepository.get_by_id(product_id, session)
        if product is None:
            raise ProductNotFoundException(product_id)
        return product

    @staticmethod
    async def create_product(product_create: ProductCreateDTO, session: AsyncSession) -> ProductDTO:
        if await CategoryRepository.get_by_id(product_create.category_id, session) is None:
            raise UnknownCategoryReferenceException(product_create.category_id)

        product_dto = ProductDTO(**product_create.model_dump(), slug=product_slug(product_create.name))
        product_id = await ProductRepository.create(product_dto, session)
        await session.commit()
        logger.info(f"Product {product_id} created: {product_dto.slug}")
        return await ProductRepository.get_by_id(product_id, session)

    @staticmethod
    async def update_product(product_id: int, product_update: ProductUpdateDTO, session: AsyncSession) -> ProductDTO:
        await ProductService.get_product(product_id, session)

        values = product_update.model_dump(exclude_unset=True)
        if values.get('category_id') is not None:
            if await CategoryRepository.get_by_id(values['category_id'], session) is None:
                raise UnknownCategoryReferenceException(values['category_id'])
        if values.get('name'):
            values['slug'] = product_slug(values['name'])

        # Explicit nulls are only meaningful for optional columns
        for required in ('name', 'price', 'stock', 'category_id', 'is_active'):
            if required in values and values[required] is None:
                values.pop(required)

        if values:
            await ProductRepository.update(product_id, values, session)
            await session.commit()
            logger.info(f"Product {product_id} updated: {sorted(values)}")
        return await ProductRepository.get_by_id(product_id, session)

    @staticmethod
    async def deactivate_product(product_id: int, session: AsyncSession) -> dict:
        await ProductService.get_product(product_id, session)
        await ProductRepository.update(product_id, {'is_active': False}, session)
        await session.commit()
        logger.info(f"Product {product_id} deactivated")
        return {"message": "Product deactivated successfully"}
