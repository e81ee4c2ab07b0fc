"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """An order was placed with its total frozen at placement time."""

    __version__ = 1

    order_id: Identifier(required=True)
    user_id: Identifier(required=True)
    item_count: Integer(required=True)
    total_price: Float(required=True)
    status: String(required=True)
    placed_at: DateTime(required=True)


@storefront.event(part_of="Order")
class OrderStatusChanged:
    """The order's status was overwritten. Any status may follow any other."""

    __version__ = 1

    order_id: Identifier(required=True)
    previous_status: String(required=True)
    status: String(required=True)
