"""Runtime settings read from the environment."""

import os

DEFAULT_JWT_SECRET = "secret"
DEFAULT_JWT_ALGORITHM = "HS256"


def get_jwt_secret() -> str:
    return os.getenv("STOREFRONT_JWT_SECRET", DEFAULT_JWT_SECRET)


def get_jwt_algorithm() -> str:
    return os.getenv("STOREFRONT_JWT_ALGORITHM", DEFAULT_JWT_ALGORITHM)
