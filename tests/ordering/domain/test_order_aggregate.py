"""Tests for the Order aggregate: placement and status changes."""

import pytest
from protean.exceptions import ValidationError

from storefront.ordering.events import OrderPlaced, OrderStatusChanged
from storefront.ordering.order import Order, OrderStatus


def _place(**overrides):
    defaults = {
        "user_id": "user-1",
        "product_ids": ["prod-1", "prod-1", "prod-2"],
        "total_price": 35.5,
    }
    defaults.update(overrides)
    return Order.place(**defaults)


class TestOrderPlacement:
    def test_place_sets_fields(self):
        order = _place()
        assert order.user_id == "user-1"
        assert order.product_ids == ["prod-1", "prod-1", "prod-2"]
        assert order.total_price == 35.5
        assert order.created_at is not None

    def test_default_status_is_placed(self):
        assert _place().status == OrderStatus.PLACED.value

    def test_explicit_status(self):
        assert _place(status="processing").status == "processing"

    def test_unknown_status_is_rejected(self):
        with pytest.raises(ValidationError):
            _place(status="lost")

    def test_negative_total_is_rejected(self):
        with pytest.raises(ValidationError):
            _place(total_price=-1.0)

    def test_empty_product_list(self):
        order = _place(product_ids=[], total_price=0.0)
        assert order.product_ids == []
        assert order.total_price == 0.0

    def test_place_raises_order_placed_event(self):
        order = _place()
        assert len(order._events) == 1
        event = order._events[0]
        assert isinstance(event, OrderPlaced)
        assert event.order_id == order.id
        assert event.item_count == 3
        assert event.total_price == 35.5
        assert event.status == "placed"


class TestOrderStatusChange:
    def test_placed_can_jump_to_shipped(self):
        order = _place()
        order.change_status("shipped")
        assert order.status == "shipped"

    def test_delivered_can_go_back_to_processing(self):
        order = _place(status="delivered")
        order.change_status("processing")
        assert order.status == "processing"

    def test_status_change_keeps_total_and_references(self):
        order = _place()
        order.change_status("delivered")
        assert order.total_price == 35.5
        assert order.user_id == "user-1"
        assert order.product_ids == ["prod-1", "prod-1", "prod-2"]

    def test_status_change_raises_event(self):
        order = _place()
        order.change_status("shipped")

        event = order._events[-1]
        assert isinstance(event, OrderStatusChanged)
        assert event.previous_status == "placed"
        assert event.status == "shipped"

    def test_unknown_status_is_rejected(self):
        order = _place()
        with pytest.raises(ValidationError):
            order.change_status("returned")
