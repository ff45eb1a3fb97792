from sqlalchemy import select, update, delete, func
from sqlalchemy.ext.asyncio import AsyncSession

from models.category import Category, CategoryDTO
from models.product import Product


class CategoryRepository:
    @staticmethod
    async def get_all(session: AsyncSession) -> list[CategoryDTO]:
        stmt = select(Category).order_by(Category.name.asc())
        categories = await session.execute(stmt)
        return [CategoryDTO.model_validate(category, from_attributes=True) for category in categories.scalars().all()]

    @staticmethod
    async def get_by_id(category_id: int, session: AsyncSession) -> CategoryDTO | None:
        product_count = (select(func.count(Product.id))
                         .where(Product.category_id == Category.id)
                         .correlate(Category)
                         .scalar_subquery())
        stmt = (select(Category, product_count)
                .where(Category.id == category_id)
                .execution_options(populate_existing=True))
        row = await session.execute(stmt)
        row = row.first()
        if row is None:
            return None
        category, count = row
        category_dto = CategoryDTO.model_validate(category, from_attributes=True)
        category_dto.product_count = count
        return category_dto

    @staticmethod
    async def get_by_slug(slug: str, session: AsyncSession) -> CategoryDTO | None:
        stmt = select(Category).where(Category.slug == slug)
        category = await session.execute(stmt)
        category = category.scalar()
        if category is not None:
            return CategoryDTO.model_validate(category, from_attributes=True)
        else:
            return None

    @staticmethod
    async def create(category_dto: CategoryDTO, session: AsyncSession) -> int:
        category = Category(**category_dto.model_dump(exclude_none=True, exclude={'product_count'}))
        session.add(category)
        await session.flush()
        return category.id

    @staticmethod
    async def update(category_id: int, values: dict, session: AsyncSession) -> None:
        stmt = update(Category).where(Category.id == category_id).values(**values)
        await session.execute(stmt)

    @staticmethod
    async def delete(category_id: int, session: AsyncSession) -> None:
        stmt = delete(Category).where(Category.id == category_id)
        await session.execute(stmt)
