"""Order aggregate: a user's purchase of a list of products.

An order holds identifiers, not copies: ``user_id`` points at a User and
``product_ids`` at Products, in request order and with duplicates kept.
``total_price`` is the sum of the product prices at placement and is never
recomputed. After placement only ``status`` changes.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, Float, Identifier, List, String

from storefront.domain import storefront
from storefront.ordering.events import OrderPlaced, OrderStatusChanged


class OrderStatus(Enum):
    PLACED = "placed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"


@storefront.aggregate
class Order:
    user_id: Identifier(required=True)
    product_ids: List(content_type=String)
    status: String(choices=OrderStatus, default=OrderStatus.PLACED.value)
    total_price: Float(required=True, min_value=0.0)
    created_at: DateTime(default=lambda: datetime.now(UTC))

    @classmethod
    def place(cls, user_id, product_ids, total_price, status=None):
        now = datetime.now(UTC)
        order = cls(
            user_id=str(user_id),
            product_ids=[str(product_id) for product_id in product_ids],
            status=status or OrderStatus.PLACED.value,
            total_price=total_price,
            created_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=order.id,
                user_id=order.user_id,
                item_count=len(order.product_ids),
                total_price=total_price,
                status=order.status,
                placed_at=now,
            )
        )
        return order

    def change_status(self, status):
        """Overwrite the status.

        There is no transition graph: ``placed`` may jump straight to
        ``shipped`` and ``delivered`` may go back to ``processing``. Only the
        value itself is checked against ``OrderStatus``.
        """
        previous_status = self.status
        self.status = status
        self.raise_(
            OrderStatusChanged(
                order_id=self.id,
                previous_status=previous_status,
                status=self.status,
            )
        )


@storefront.repository(part_of=Order)
class OrderRepository:
    def all_orders(self) -> list[Order]:
        return self._dao.query.order_by("created_at").limit(None).all().items

    def for_user(self, user_id) -> list[Order]:
        return self._dao.query.filter(user_id=str(user_id)).order_by("created_at").limit(None).all().items
