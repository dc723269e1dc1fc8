"""
API routers, one per resource
"""

from fastapi import APIRouter

from . import (
    analytics,
    auth,
    categories,
    health,
    menu_items,
    orders,
    reservations,
    reviews,
    staff,
    tables,
)

api_router = APIRouter(prefix="/api")
for module in (
    auth,
    categories,
    menu_items,
    orders,
    reservations,
    reviews,
    staff,
    tables,
    analytics,
):
    api_router.include_router(module.router)

health_router = health.router

__all__ = ["api_router", "health_router"]
