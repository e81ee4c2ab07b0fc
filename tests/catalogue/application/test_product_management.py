"""Application tests for the product management command handler."""

import pytest
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from storefront.catalogue.management import CreateProduct, DeleteProduct, UpdateProduct
from storefront.catalogue.product import Product
from storefront.exceptions import NotFoundError


def _create_product(**overrides):
    defaults = {
        "name": "Espresso Cup",
        "description": "Double-walled glass, 80 ml.",
        "price": 10.0,
        "image": "https://cdn.example.com/cup.jpg",
    }
    defaults.update(overrides)
    command = CreateProduct(**defaults)
    return current_domain.process(command, asynchronous=False)


class TestCreateProductHandler:
    def test_create_product(self):
        product_id = _create_product()
        assert product_id is not None

        product = current_domain.repository_for(Product).get(product_id)
        assert product.name == "Espresso Cup"
        assert product.price == 10.0

    def test_create_product_requires_price(self):
        with pytest.raises(ValidationError) as exc:
            CreateProduct(name="No Price", description="", image="")
        assert "price" in exc.value.messages

    def test_create_product_writes_to_event_store(self):
        product_id = _create_product(name="Event Test")

        messages = current_domain.event_store.store.read("storefront::product")
        product_messages = [
            m
            for m in messages
            if m.metadata.headers.type == "Storefront.ProductAdded.v1" and m.data.get("product_id") == product_id
        ]
        assert len(product_messages) >= 1


class TestUpdateProductHandler:
    def test_update_product(self):
        product_id = _create_product()

        current_domain.process(UpdateProduct(product_id=product_id, price=12.5), asynchronous=False)

        product = current_domain.repository_for(Product).get(product_id)
        assert product.price == 12.5
        assert product.name == "Espresso Cup"

    def test_update_missing_product(self):
        with pytest.raises(NotFoundError) as exc:
            current_domain.process(UpdateProduct(product_id="missing", name="Ghost"), asynchronous=False)
        assert exc.value.message == "Product with id missing not found"


class TestDeleteProductHandler:
    def test_delete_product(self):
        product_id = _create_product()

        deleted = current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)

        assert deleted is True
        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(Product).get(product_id)

    def test_delete_is_idempotent(self):
        product_id = _create_product()
        current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)

        deleted_again = current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
        assert deleted_again is False


class TestProductListing:
    def test_all_products_in_creation_order(self):
        first = _create_product(name="First")
        second = _create_product(name="Second")

        products = current_domain.repository_for(Product).all_products()
        assert [str(p.id) for p in products] == [first, second]

    def test_find_many_leaves_out_unknown_ids(self):
        product_id = _create_product()

        found = current_domain.repository_for(Product).find_many([product_id, product_id, "missing"])
        assert list(found) == [product_id]

    def test_all_products_returns_every_product(self):
        for i in range(105):
            _create_product(name=f"Item {i}")

        assert len(current_domain.repository_for(Product).all_products()) == 105
