"""
API router for the public catalog: products and categories.

Reads are open to any authenticated caller; writes require the ADMIN role.
"""

import logging

from fastapi import APIRouter, Depends, Query, Path
from sqlalchemy.ext.asyncio import AsyncSession

import config
from enums.product_sort import ProductSort
from models.category import CategoryCreateDTO, CategoryUpdateDTO
from models.product import ProductCreateDTO, ProductUpdateDTO
from services.category import CategoryService
from services.product import ProductService
from web.dependencies import CurrentUser, get_current_user, get_session, require_admin
from web.responses import envelope

logger = logging.getLogger(__name__)

catalog_router = APIRouter(prefix="/api", tags=["catalog"])


@catalog_router.get("/products")
async def list_products(page: int = Query(1, ge=1),
                        limit: int = Query(config.PAGE_LIMIT_DEFAULT, ge=1),
                        search: str | None = Query(None, min_length=1),
                        category_id: int | None = Query(None, gt=0),
                        sort_by: ProductSort = Query(ProductSort.NEWEST),
                        current_user: CurrentUser = Depends(get_current_user),
                        session: AsyncSession = Depends(get_session)):
    page_dto = await ProductService.list_products(page, limit, session,
                                                  search=search,
                                                  category_id=category_id,
                                                  sort_by=sort_by)
    return envelope(page_dto)


@catalog_router.get("/products/{product_id}")
async def get_product(product_id: int = Path(..., gt=0),
                      current_user: CurrentUser = Depends(get_current_user),
                      session: AsyncSession = Depends(get_session)):
    return envelope(await ProductService.get_product(product_id, session))


@catalog_router.post("/products", status_code=201)
async def create_product(payload: ProductCreateDTO,
                         current_user: CurrentUser = Depends(require_admin),
                         session: AsyncSession = Depends(get_session)):
    return envelope(await ProductService.create_product(payload, session))


@catalog_router.patch("/products/{product_id}")
async def update_product(payload: ProductUpdateDTO,
                         product_id: int = Path(..., gt=0),
                         current_user: CurrentUser = Depends(require_admin),
                         session: AsyncSession = Depends(get_session)):
    return envelope(await ProductService.update_product(product_id, payload, session))


@catalog_router.delete("/products/{product_id}")
async def deactivate_product(product_id: int = Path(..., gt=0),
                             current_user: CurrentUser = Depends(require_admin),
                             session: AsyncSession = Depends(get_session)):
    """Soft delete: the product disappears from listings and can no longer be bought."""
    return envelope(await ProductService.deactivate_product(product_id, session))


@catalog_router.get("/categories")
async def list_categories(current_user: CurrentUser = Depends(get_current_user),
                          session: AsyncSession = Depends(get_session)):
    return envelope(await CategoryService.list_categories(session))


@catalog_router.get("/categories/{category_id}")
async def get_category(category_id: int = Path(..., gt=0),
                       current_user: CurrentUser = Depends(get_current_user),
                       session: AsyncSession = Depends(get_session)):
    return envelope(await CategoryService.get_category(category_id, session))


@catalog_router.post("/categories", status_code=201)
async def create_category(payload: CategoryCreateDTO,
                          current_user: CurrentUser = Depends(require_admin),
                          session: AsyncSession = Depends(get_session)):
    return envelope(await CategoryService.create_category(payload, session))


@catalog_router.patch("/categories/{category_id}")
async def update_category(payload: CategoryUpdateDTO,
                          category_id: int = Path(..., gt=0),
                          current_user: CurrentUser = Depends(require_admin),
                          session: AsyncSession = Depends(get_session)):
    return envelope(await CategoryService.update_category(category_id, payload, session))


@catalog_router.delete("/categories/{category_id}")
async def delete_category(category_id: int = Path(..., gt=0),
                          current_user: CurrentUser = Depends(require_admin),
                          session: AsyncSession = Depends(get_session)):
    return envelope(await CategoryService.delete_category(category_id, session))
