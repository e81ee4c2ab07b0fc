"""Order service: placement, status changes, deletion and hydrated reads.

The service is handed the domain it works against when it is built, and
reaches the user, product and order collections only through that domain's
repositories. Reads and writes span three collections without a transaction:
a product deleted between validation and persistence still ends up referenced
by the new order, which is accepted since orders do not reserve stock.
"""

from dataclasses import dataclass
from datetime import datetime

import structlog
from protean.domain import Domain
from protean.exceptions import ObjectNotFoundError

from storefront.catalogue.product import Product
from storefront.exceptions import InvalidStateError, NotFoundError
from storefront.identity.user import User
from storefront.ordering.order import Order

logger = structlog.get_logger(__name__)


@dataclass
class HydratedOrder:
    """An order with its references replaced by the records they point at.

    A reference whose record has since been deleted hydrates to ``None``.
    """

    id: str
    user: User | None
    products: list[Product | None]
    status: str
    total_price: float
    created_at: datetime


class OrderService:
    def __init__(self, domain: Domain):
        self.domain = domain

    @property
    def users(self):
        return self.domain.repository_for(User)

    @property
    def products(self):
        return self.domain.repository_for(Product)

    @property
    def orders(self):
        return self.domain.repository_for(Order)

    # --- Writes ---

    def create_order(self, user_id, product_ids, status=None) -> HydratedOrder:
        """Validate references, freeze the total and persist a new order.

        Every check runs before the single write, so a failure never leaves a
        partial order behind.
        """
        try:
            self.users.get(user_id)
        except ObjectNotFoundError:
            raise NotFoundError("User not found") from None

        product_ids = [str(product_id) for product_id in product_ids]
        found = self.products.find_many(product_ids)
        resolved = [found[product_id] for product_id in product_ids if product_id in found]
        if len(resolved) != len(product_ids):
            raise NotFoundError("One or more products not found")

        total_price = 0.0
        for product in resolved:
            if product.price is None:
                raise InvalidStateError("Product price is undefined or null")
            total_price += product.price

        order = Order.place(
            user_id=user_id,
            product_ids=product_ids,
            total_price=total_price,
            status=status,
        )
        self.orders.add(order)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            user_id=str(user_id),
            item_count=len(product_ids),
            total_price=total_price,
        )
        return self.hydrate(order)

    def update_order_status(self, order_id, status) -> HydratedOrder:
        try:
            order = self.orders.get(order_id)
        except ObjectNotFoundError:
            raise NotFoundError(f"Order with id {order_id} not found") from None

        previous_status = order.status
        order.change_status(status)
        self.orders.add(order)

        logger.info(
            "Order status changed",
            order_id=str(order_id),
            previous_status=previous_status,
            status=order.status,
        )
        return self.hydrate(order)

    def delete_order(self, order_id) -> str:
        """Hard-delete an order. Deleting a missing order is reported, not raised."""
        try:
            order = self.orders.get(order_id)
        except ObjectNotFoundError:
            logger.info("Order already deleted", order_id=str(order_id))
            return "Order already deleted"

        self.orders._dao.delete(order)
        logger.info("Order deleted", order_id=str(order_id))
        return "Order deleted"

    # --- Reads ---

    def list_orders(self) -> list[HydratedOrder]:
        return self.hydrate_many(self.orders.all_orders())

    def get_order(self, order_id) -> HydratedOrder | None:
        try:
            order = self.orders.get(order_id)
        except ObjectNotFoundError:
            return None
        return self.hydrate(order)

    def list_orders_for_user(self, user_id) -> list[HydratedOrder]:
        return self.hydrate_many(self.orders.for_user(user_id))

    # --- Hydration ---

    def hydrate(self, order: Order) -> HydratedOrder:
        return self.hydrate_many([order])[0]

    def hydrate_many(self, orders: list[Order]) -> list[HydratedOrder]:
        """Resolve references for a batch of orders with one lookup per collection."""
        users = self.users.find_many(order.user_id for order in orders)
        products = self.products.find_many(product_id for order in orders for product_id in (order.product_ids or []))

        return [
            HydratedOrder(
                id=str(order.id),
                user=users.get(str(order.user_id)),
                products=[products.get(str(product_id)) for product_id in (order.product_ids or [])],
                status=order.status,
                total_price=order.total_price,
                created_at=order.created_at,
            )
            for order in orders
        ]
