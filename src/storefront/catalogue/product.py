"""Product aggregate and its repository."""

from datetime import UTC, datetime

from protean.fields import DateTime, Float, String, Text

from storefront.domain import storefront


@storefront.aggregate
class Product:
    """A catalogue entry that orders refer to by id.

    ``price`` is optional at the field level so that records written before a
    price was known still load; order placement rejects such products.
    """

    name: String(required=True, max_length=255)
    description: Text()
    price: Float(min_value=0.0)
    image: String(max_length=500)
    created_at: DateTime(default=lambda: datetime.now(UTC))
    updated_at: DateTime(default=lambda: datetime.now(UTC))

    @classmethod
    def add(cls, name, price, description=None, image=None):
        from storefront.catalogue.events import ProductAdded

        now = datetime.now(UTC)
        product = cls(
            name=name,
            description=description,
            price=price,
            image=image,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=product.id,
                name=name,
                price=price,
                added_at=now,
            )
        )
        return product

    def update(self, name=None, description=None, price=None, image=None):
        """Overwrite the supplied fields; ``None`` leaves a field untouched."""
        from storefront.catalogue.events import ProductUpdated

        previous_price = self.price

        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
        if price is not None:
            self.price = price
        if image is not None:
            self.image = image

        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductUpdated(
                product_id=self.id,
                name=self.name,
                previous_price=previous_price,
                price=self.price,
            )
        )


@storefront.repository(part_of=Product)
class ProductRepository:
    def all_products(self) -> list[Product]:
        return self._dao.query.order_by("created_at").limit(None).all().items

    def find_many(self, product_ids) -> dict[str, Product]:
        """Look up several products at once, keyed by id. Unknown ids are left out."""
        ids = list({str(product_id) for product_id in product_ids})
        if not ids:
            return {}
        products = self._dao.query.filter(id__in=ids).limit(None).all().items
        return {str(product.id): product for product in products}
