"""Catalogue management: commands and handler for product CRUD."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.exceptions import NotFoundError

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0)
    image: String(max_length=500)


@storefront.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    name: String(max_length=255)
    description: Text()
    price: Float(min_value=0.0)
    image: String(max_length=500)


@storefront.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)


@storefront.command_handler(part_of=Product)
class ManageProductsHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        product = Product.add(
            name=command.name,
            description=command.description,
            price=command.price,
            image=command.image,
        )
        current_domain.repository_for(Product).add(product)
        logger.info("Product created", product_id=str(product.id), price=product.price)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        try:
            product = repo.get(command.product_id)
        except ObjectNotFoundError:
            raise NotFoundError(f"Product with id {command.product_id} not found") from None

        product.update(
            name=command.name,
            description=command.description,
            price=command.price,
            image=command.image,
        )
        repo.add(product)
        return str(product.id)

    @handle(DeleteProduct)
    def delete_product(self, command):
        """Hard-delete a product. Returns ``False`` when there was nothing to delete."""
        repo = current_domain.repository_for(Product)
        try:
            product = repo.get(command.product_id)
        except ObjectNotFoundError:
            logger.info("Product already deleted", product_id=str(command.product_id))
            return False

        repo._dao.delete(product)
        logger.info("Product deleted", product_id=str(command.product_id))
        return True
