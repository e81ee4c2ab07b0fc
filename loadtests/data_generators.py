"""Faker-based payloads for the storefront load scenarios.

Field names match the API's Pydantic request schemas.
"""

import random
import uuid

from faker import Faker

fake = Faker()


def sign_up_data() -> dict:
    """A sign-up payload with an email unique to this run."""
    local = fake.user_name()[:20]
    return {
        "name": fake.name()[:255],
        "email": f"{local}.{uuid.uuid4().hex[:6]}@{fake.free_email_domain()}",
        "password": fake.password(length=12),
    }


def product_data() -> dict:
    return {
        "name": f"{fake.color_name()} {fake.word().title()}"[:255],
        "description": fake.sentence(nb_words=12),
        "price": round(random.uniform(1.0, 250.0), 2),
        "image": fake.image_url()[:500],
    }


def price_update() -> dict:
    return {"price": round(random.uniform(1.0, 250.0), 2)}


def basket(product_ids: list[str]) -> list[str]:
    """Pick 1-4 products, repeats allowed, the way a shopper adds the same item twice."""
    return random.choices(product_ids, k=random.randint(1, 4))


def next_status() -> str:
    return random.choice(["processing", "shipped", "delivered"])
