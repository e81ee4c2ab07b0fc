"""Operation-level failures surfaced to API callers.

Field-level problems (bad status value, negative price) stay
``protean.exceptions.ValidationError``; the classes here cover references and
credentials.
"""


class StorefrontError(Exception):
    """Base class for storefront failures carrying a caller-facing message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(StorefrontError):
    """A user, product or order reference did not resolve."""


class ConflictError(StorefrontError):
    """A record with the same unique key already exists."""


class UnauthorizedError(StorefrontError):
    """Credentials were rejected or are required but absent."""


class InvalidStateError(StorefrontError):
    """A stored record lacks a value the operation depends on."""


class InvalidTokenError(StorefrontError):
    """A credential token could not be verified or decoded."""
