"""Storefront API package."""

from storefront.api.application import create_app
from storefront.api.errors import register_exception_handlers
from storefront.api.routes import auth_router, order_router, product_router, user_router

__all__ = [
    "create_app",
    "auth_router",
    "product_router",
    "order_router",
    "user_router",
    "register_exception_handlers",
]
