"""Domain initialization and configuration."""

from protean.domain import Domain

from storefront.utils.logging import configure_logging

# Configure logging for the application
configure_logging()

# Domain Composition Root
storefront = Domain(name="storefront")
