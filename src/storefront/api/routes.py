"""FastAPI endpoints for the storefront.

Reads are open to anonymous callers. Catalogue and order mutations require an
authenticated caller; sign-up, sign-in and sign-out do not.
"""

from fastapi import APIRouter, Depends
from protean.domain import Domain
from protean.exceptions import ObjectNotFoundError

from storefront.api.dependencies import (
    get_auth_gate,
    get_domain,
    get_order_service,
    require_user,
)
from storefront.api.schemas import (
    AuthResponse,
    CreateOrderRequest,
    CreateProductRequest,
    MessageResponse,
    OrderResponse,
    ProductResponse,
    SignInRequest,
    SignOutResponse,
    SignUpRequest,
    UpdateOrderStatusRequest,
    UpdateProductRequest,
)
from storefront.auth.gate import AuthGate
from storefront.catalogue.management import CreateProduct, DeleteProduct, UpdateProduct
from storefront.catalogue.product import Product
from storefront.ordering.service import OrderService

auth_router = APIRouter(prefix="/auth", tags=["auth"])
product_router = APIRouter(prefix="/products", tags=["products"])
order_router = APIRouter(prefix="/orders", tags=["orders"])
user_router = APIRouter(prefix="/users", tags=["users"])


# --- Auth endpoints ---


@auth_router.post("/sign-up", status_code=201, response_model=AuthResponse)
async def sign_up(body: SignUpRequest, gate: AuthGate = Depends(get_auth_gate)) -> AuthResponse:  # noqa: B008
    result = gate.sign_up(name=body.name, email=body.email, password=body.password)
    return AuthResponse(user_id=result.user_id, token=result.token, message=result.message)


@auth_router.post("/sign-in", response_model=AuthResponse)
async def sign_in(body: SignInRequest, gate: AuthGate = Depends(get_auth_gate)) -> AuthResponse:  # noqa: B008
    result = gate.sign_in(email=body.email, password=body.password)
    return AuthResponse(user_id=result.user_id, token=result.token)


@auth_router.post("/sign-out", response_model=SignOutResponse)
async def sign_out(gate: AuthGate = Depends(get_auth_gate)) -> SignOutResponse:  # noqa: B008
    return SignOutResponse(signed_out=gate.sign_out())


# --- Product endpoints ---


@product_router.get("", response_model=list[ProductResponse])
async def list_products(domain: Domain = Depends(get_domain)) -> list[ProductResponse]:  # noqa: B008
    products = domain.repository_for(Product).all_products()
    return [ProductResponse.from_product(product) for product in products]


@product_router.get("/{product_id}", response_model=ProductResponse | None)
async def get_product(product_id: str, domain: Domain = Depends(get_domain)) -> ProductResponse | None:  # noqa: B008
    try:
        product = domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        return None
    return ProductResponse.from_product(product)


@product_router.post("", status_code=201, response_model=ProductResponse, dependencies=[Depends(require_user)])
async def create_product(
    body: CreateProductRequest,
    domain: Domain = Depends(get_domain),  # noqa: B008
) -> ProductResponse:
    command = CreateProduct(
        name=body.name,
        description=body.description,
        price=body.price,
        image=body.image,
    )
    product_id = domain.process(command, asynchronous=False)
    return ProductResponse.from_product(domain.repository_for(Product).get(product_id))


@product_router.put("/{product_id}", response_model=ProductResponse, dependencies=[Depends(require_user)])
async def update_product(
    product_id: str,
    body: UpdateProductRequest,
    domain: Domain = Depends(get_domain),  # noqa: B008
) -> ProductResponse:
    command = UpdateProduct(
        product_id=product_id,
        name=body.name,
        description=body.description,
        price=body.price,
        image=body.image,
    )
    domain.process(command, asynchronous=False)
    return ProductResponse.from_product(domain.repository_for(Product).get(product_id))


@product_router.delete("/{product_id}", response_model=MessageResponse, dependencies=[Depends(require_user)])
async def delete_product(product_id: str, domain: Domain = Depends(get_domain)) -> MessageResponse:  # noqa: B008
    deleted = domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
    return MessageResponse(message="Product deleted" if deleted else "Product already deleted")


# --- Order endpoints ---


@order_router.get("", response_model=list[OrderResponse])
async def list_orders(service: OrderService = Depends(get_order_service)) -> list[OrderResponse]:  # noqa: B008
    return [OrderResponse.from_hydrated(order) for order in service.list_orders()]


@order_router.get("/{order_id}", response_model=OrderResponse | None)
async def get_order(
    order_id: str,
    service: OrderService = Depends(get_order_service),  # noqa: B008
) -> OrderResponse | None:
    order = service.get_order(order_id)
    return OrderResponse.from_hydrated(order) if order else None


@order_router.post("", status_code=201, response_model=OrderResponse, dependencies=[Depends(require_user)])
async def create_order(
    body: CreateOrderRequest,
    service: OrderService = Depends(get_order_service),  # noqa: B008
) -> OrderResponse:
    order = service.create_order(
        user_id=body.user_id,
        product_ids=body.product_ids,
        status=body.status.value if body.status else None,
    )
    return OrderResponse.from_hydrated(order)


@order_router.put("/{order_id}/status", response_model=OrderResponse, dependencies=[Depends(require_user)])
async def update_order_status(
    order_id: str,
    body: UpdateOrderStatusRequest,
    service: OrderService = Depends(get_order_service),  # noqa: B008
) -> OrderResponse:
    order = service.update_order_status(order_id, body.status.value)
    return OrderResponse.from_hydrated(order)


@order_router.delete("/{order_id}", response_model=MessageResponse, dependencies=[Depends(require_user)])
async def delete_order(
    order_id: str,
    service: OrderService = Depends(get_order_service),  # noqa: B008
) -> MessageResponse:
    return MessageResponse(message=service.delete_order(order_id))


# --- User endpoints ---


@user_router.get("/{user_id}/orders", response_model=list[OrderResponse])
async def list_user_orders(
    user_id: str,
    service: OrderService = Depends(get_order_service),  # noqa: B008
) -> list[OrderResponse]:
    return [OrderResponse.from_hydrated(order) for order in service.list_orders_for_user(user_id)]
