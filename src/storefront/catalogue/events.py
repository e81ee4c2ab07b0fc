"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductAdded:
    """A new product was added to the catalogue."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    price: Float()
    added_at: DateTime(required=True)


@storefront.event(part_of="Product")
class ProductUpdated:
    """One or more product fields were overwritten."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    previous_price: Float()
    price: Float()
