"""Pydantic request/response schemas for the storefront API.

These are the external contracts; Protean aggregates and commands stay
internal. User payloads never carry the password.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from storefront.catalogue.product import Product
from storefront.identity.user import User
from storefront.ordering.order import OrderStatus
from storefront.ordering.service import HydratedOrder

# --- Auth ---


class SignUpRequest(BaseModel):
    model_config = {
        "json_schema_extra": {"examples": [{"name": "Ada Lovelace", "email": "ada@example.com", "password": "s3cret"}]}
    }

    name: str = Field(..., max_length=255)
    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=255)


class SignInRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"email": "ada@example.com", "password": "s3cret"}]}}

    email: str
    password: str


class AuthResponse(BaseModel):
    user_id: str
    token: str
    message: str | None = None


class SignOutResponse(BaseModel):
    signed_out: bool = True


# --- Catalogue ---


class CreateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Espresso Cup",
                    "description": "Double-walled glass, 80 ml.",
                    "price": 10.0,
                    "image": "https://cdn.example.com/cup.jpg",
                }
            ]
        }
    }

    name: str = Field(..., max_length=255)
    description: str
    price: float = Field(..., ge=0)
    image: str = Field(..., max_length=500)


class UpdateProductRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"price": 12.5}]}}

    name: str | None = Field(None, max_length=255)
    description: str | None = None
    price: float | None = Field(None, ge=0)
    image: str | None = Field(None, max_length=500)


class ProductResponse(BaseModel):
    id: str
    name: str
    description: str | None = None
    price: float | None = None
    image: str | None = None

    @classmethod
    def from_product(cls, product: Product) -> ProductResponse:
        return cls(
            id=str(product.id),
            name=product.name,
            description=product.description,
            price=product.price,
            image=product.image,
        )


# --- Ordering ---


class CreateOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "user_id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890",
                    "product_ids": [
                        "b2c3d4e5-f6a7-8901-bcde-f12345678901",
                        "b2c3d4e5-f6a7-8901-bcde-f12345678901",
                        "c3d4e5f6-a7b8-9012-cdef-123456789012",
                    ],
                }
            ]
        }
    }

    user_id: str
    product_ids: list[str]
    status: OrderStatus | None = None


class UpdateOrderStatusRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "shipped"}]}}

    status: OrderStatus


class UserResponse(BaseModel):
    id: str
    name: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> UserResponse:
        return cls(id=str(user.id), name=user.name, email=user.email)


class OrderResponse(BaseModel):
    id: str
    user: UserResponse | None = None
    products: list[ProductResponse | None]
    status: str
    total_price: float
    created_at: datetime | None = None

    @classmethod
    def from_hydrated(cls, order: HydratedOrder) -> OrderResponse:
        return cls(
            id=order.id,
            user=UserResponse.from_user(order.user) if order.user else None,
            products=[ProductResponse.from_product(p) if p else None for p in order.products],
            status=order.status,
            total_price=order.total_price,
            created_at=order.created_at,
        )


# --- Shared ---


class MessageResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"message": "Order deleted"}]}}

    message: str
