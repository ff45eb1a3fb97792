import logging

from sqlalchemy.ext.asyncio import AsyncSession

from exceptions.category import CategoryNotFoundException, CategoryAlreadyExistsException, CategoryInUseException
from models.category import CategoryDTO, CategoryCreateDTO, CategoryUpdateDTO
from repositories.category import CategoryRepository
from repositories.product import ProductRepository
from utils.slug import slugify

logger = logging.getLogger(__name__)


class CategoryService:

    @staticmethod
    async def list_categories(session: AsyncSession) -> list[CategoryDTO]:
        return await CategoryRepository.get_all(session)

    @staticmethod
    async def get_category(category_id: int, session: AsyncSession) -> CategoryDTO:
        category = await CategoryRepository.get_by_id(category_id, session)
        if category is None:
            raise CategoryNotFoundException(category_id)
        return category

    @staticmethod
    async def _ensure_slug_free(name: str, session: AsyncSession, category_id: int | None = None) -> str:
        slug = slugify(name)
        existing = await CategoryRepository.get_by_slug(slug, session)
        if existing is not None and existing.id != category_id:
            raise CategoryAlreadyExistsException(name, slug)
        return slug

    @staticmethod
    async def create_category(category_create: CategoryCreateDTO, session: AsyncSession) -> CategoryDTO:
        slug = await CategoryService._ensure_slug_free(category_create.name, session)
        category_id = await CategoryRepository.create(CategoryDTO(name=category_create.name, slug=slug), session)
        await session.commit()
        logger.info(f"Category {category_id} created: {slug}")
        return await CategoryService.get_category(category_id, session)

    @staticmethod
    async def update_category(category_id: int, category_update: CategoryUpdateDTO,
                              session: AsyncSession) -> CategoryDTO:
        await CategoryService.get_category(category_id, session)

        if category_update.name:
            slug = await CategoryService._ensure_slug_free(category_update.name, session, category_id)
            await CategoryRepository.update(category_id, {'name': category_update.name, 'slug': slug}, session)
            await session.commit()
            logger.info(f"Category {category_id} renamed: {slug}")
        return await CategoryService.get_category(category_id, session)

    @staticmethod
    async def delete_category(category_id: int, session: AsyncSession) -> dict:
        await CategoryService.get_category(category_id, session)

        product_count = await ProductRepository.count_by_category(category_id, session)
        if product_count > 0:
            raise CategoryInUseException(category_id, product_count)

        await CategoryRepository.delete(category_id, session)
        await session.commit()
        logger.info(f"Category {category_id} deleted")
        return {"message": "Category deleted successfully"}
