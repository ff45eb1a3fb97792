from sqlalchemy import select, func, update
from sqlalchemy.ext.asyncio import AsyncSession

from enums.product_sort import ProductSort
from models.product import Product, ProductDTO
from utils.pagination import get_offset


class ProductRepository:

    _ORDERING = {
        ProductSort.PRICE_ASC: (Product.price.asc(),),
        ProductSort.PRICE_DESC: (Product.price.desc(),),
        ProductSort.NAME_ASC: (Product.name.asc(),),
        ProductSort.NAME_DESC: (Product.name.desc(),),
        ProductSort.NEWEST: (Product.created_at.desc(), Product.id.desc()),
    }

    @staticmethod
    async def get_by_id(product_id: int, session: AsyncSession) -> ProductDTO | None:
        # populate_existing: re-read rows already in the identity map (e.g. right after an update)
        stmt = select(Product).where(Product.id == product_id).execution_options(populate_existing=True)
        product = await session.execute(stmt)
        product = product.scalar()
        if product is not None:
            return ProductDTO.model_validate(product, from_attributes=True)
        else:
            return None

    @staticmethod
    async def get_paginated(page: int,
                            limit: int,
                            session: AsyncSession,
                            search: str | None = None,
                            category_id: int | None = None,
                            sort_by: ProductSort = ProductSort.NEWEST) -> tuple[list[ProductDTO], int]:
        conditions = [Product.is_active == True]
        if category_id:
            conditions.append(Product.category_id == category_id)
        if search:
            conditions.append(Product.name.contains(search))

        stmt = (select(Product)
                .where(*conditions)
                .order_by(*ProductRepository._ORDERING[sort_by])
                .offset(get_offset(page, limit))
                .limit(limit))
        count_stmt = select(func.count(Product.id)).where(*conditions)

        products = await session.execute(stmt)
        total = await session.execute(count_stmt)
        return ([ProductDTO.model_validate(product, from_attributes=True) for product in products.scalars().all()],
                total.scalar())

    @staticmethod
    async def create(product_dto: ProductDTO, session: AsyncSession) -> int:
        product = Product(**product_dto.model_dump(exclude_none=True, exclude={'category'}))
        session.add(product)
        await session.flush()
        return product.id

    @staticmethod
    async def update(product_id: int, values: dict, session: AsyncSession) -> None:
        stmt = update(Product).where(Product.id == product_id).values(**values)
        await session.execute(stmt)

    @staticmethod
    async def decrement_stock(product_id: int, quantity: int, session: AsyncSession) -> bool:
        """
        Atomically take `quantity` units out of stock.

        The guard lives in the UPDATE itself (stock >= quantity AND is_active), so two
        concurrent orders can never both consume the same unit: the loser matches zero
        rows and gets False back. Must run inside the caller's transaction.

        Returns:
            True if the row was decremented, False if stock was insufficient or the
            product is missing/inactive.
        """
        stmt = (update(Product)
                .where(Product.id == product_id,
                       Product.stock >= quantity,
                       Product.is_active == True)
                .values(stock=Product.stock - quantity))
        result = await session.execute(stmt)
        return result.rowcount == 1

    @staticmethod
    async def count_by_category(category_id: int, session: AsyncSession) -> int:
        stmt = select(func.count(Product.id)).where(Product.category_id == category_id)
        count = await session.execute(stmt)
        return count.scalar()
