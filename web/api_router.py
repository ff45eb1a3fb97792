"""
API router for the shopping cart and orders.

Every route acts on behalf of the identity forwarded by the auth gateway
(see web/dependencies.py). Cart routes only ever touch the caller's own cart;
order routes check ownership or the ADMIN role.
"""

import logging

from fastapi import APIRouter, Depends, Query, Path
from sqlalchemy.ext.asyncio import AsyncSession

import config
from models.cartItem import CartItemAddDTO, CartItemUpdateDTO
from models.order import OrderStatusUpdateDTO
from services.cart import CartService
from services.order import OrderService
from web.dependencies import CurrentUser, get_current_user, get_session, require_admin
from web.responses import envelope

logger = logging.getLogger(__name__)

api_router = APIRouter(prefix="/api", tags=["api"])


# ============================================================================
# Cart
# ============================================================================

@api_router.get("/cart")
async def get_cart(current_user: CurrentUser = Depends(get_current_user),
                   session: AsyncSession = Depends(get_session)):
    """Get current user's cart."""
    return envelope(await CartService.get_cart(current_user.id, session))


@api_router.post("/cart/items", status_code=201)
async def add_cart_item(payload: CartItemAddDTO,
                        current_user: CurrentUser = Depends(get_current_user),
                        session: AsyncSession = Depends(get_session)):
    """Add item to cart (merges into an existing line for the same product)."""
    cart = await CartService.add_item(current_user.id, payload.product_id, payload.quantity, session)
    return envelope(cart)


@api_router.patch("/cart/items/{item_id}")
async def update_cart_item(payload: CartItemUpdateDTO,
                           item_id: int = Path(..., gt=0),
                           current_user: CurrentUser = Depends(get_current_user),
                           session: AsyncSession = Depends(get_session)):
    """Set cart item quantity."""
    return envelope(await CartService.update_item(current_user.id, item_id, payload.quantity, session))


@api_router.delete("/cart/items/{item_id}")
async def remove_cart_item(item_id: int = Path(..., gt=0),
                           current_user: CurrentUser = Depends(get_current_user),
                           session: AsyncSession = Depends(get_session)):
    """Remove item from cart."""
    return envelope(await CartService.remove_item(current_user.id, item_id, session))


@api_router.delete("/cart")
async def clear_cart(current_user: CurrentUser = Depends(get_current_user),
                     session: AsyncSession = Depends(get_session)):
    """Clear entire cart."""
    return envelope(await CartService.clear_cart(current_user.id, session))


# ============================================================================
# Orders
# ============================================================================

@api_router.post("/orders", status_code=201)
async def place_order(current_user: CurrentUser = Depends(get_current_user),
                      session: AsyncSession = Depends(get_session)):
    """Create order from cart."""
    return envelope(await OrderService.place_order(current_user.id, session))


@api_router.get("/orders")
async def list_orders(page: int = Query(1, ge=1),
                      limit: int = Query(config.PAGE_LIMIT_DEFAULT, ge=1),
                      current_user: CurrentUser = Depends(get_current_user),
                      session: AsyncSession = Depends(get_session)):
    """List current user's orders, newest first."""
    return envelope(await OrderService.list_for_user(current_user.id, page, limit, session))


# Declared before /orders/{order_id} so "admin" is not parsed as an id
@api_router.get("/orders/admin/all")
async def list_all_orders(page: int = Query(1, ge=1),
                          limit: int = Query(config.PAGE_LIMIT_DEFAULT, ge=1),
                          current_user: CurrentUser = Depends(require_admin),
                          session: AsyncSession = Depends(get_session)):
    """List all orders (Admin only)."""
    return envelope(await OrderService.list_all(page, limit, session))


@api_router.get("/orders/{order_id}")
async def get_order(order_id: int = Path(..., gt=0),
                    current_user: CurrentUser = Depends(get_current_user),
                    session: AsyncSession = Depends(get_session)):
    """Get order detail (owner or admin)."""
    return envelope(await OrderService.get_order(order_id, current_user.id, current_user.is_admin, session))


@api_router.patch("/orders/{order_id}/status")
async def update_order_status(payload: OrderStatusUpdateDTO,
                              order_id: int = Path(..., gt=0),
                              current_user: CurrentUser = Depends(require_admin),
                              session: AsyncSession = Depends(get_session)):
    """Update order status (Admin only)."""
    logger.info(f"Admin {current_user.id} sets order {order_id} to {payload.status.value}")
    return envelope(await OrderService.update_status(order_id, payload.status, session))
