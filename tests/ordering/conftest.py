import pytest
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.identity.user import User
from storefront.ordering.service import OrderService


@pytest.fixture()
def order_service(domain):
    return OrderService(domain)


@pytest.fixture()
def add_product():
    def _add(name="Espresso Cup", price=10.0, **extra):
        product = Product.add(name=name, price=price, **extra)
        current_domain.repository_for(Product).add(product)
        return product

    return _add


@pytest.fixture()
def user():
    user = User.sign_up(name="Ada Lovelace", email="ada@example.com", password="s3cret")
    current_domain.repository_for(User).add(user)
    return user
