from sqlalchemy.orm import Session
from sqlalchemy import update, delete
from sqlalchemy.exc import IntegrityError
from typing import Optional, List
import logging

from pos_api.models.product import Product
from pos_api.models.transaction import TransactionDetail
from pos_api.schemas.product import ProductCreate, ProductUpdate
from pos_api.services.errors import NotFoundError, ProductInUseError

logger = logging.getLogger(__name__)


class ProductService:
    """
    Service class for Product CRUD operations.

    This service handles:
    - Creating new products with their initial stock
    - Reading products
    - Updating name and price
    - Deleting products that no transaction references

    Stock is never written here after creation; the checkout in
    TransactionService is its only writer.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(self, product_data: ProductCreate) -> Product:
        """
        Create a new product.

        Args:
            product_data: Product creation data

        Returns:
            Created product instance
        """
        product = Product(
            name=product_data.name,
            price=product_data.price,
            stock=product_data.stock
        )
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def get_by_id(self, product_id: int) -> Product:
        """
        Get a product by ID.

        Raises:
            NotFoundError: If the product doesn't exist
        """
        product = self.db.query(Product).filter(Product.id == product_id).first()
        if not product:
            raise NotFoundError(f"Product with ID {product_id} not found")
        return product

    def get_all(self, search: Optional[str] = None) -> List[Product]:
        """
        Get all products in insertion (ID) order.

        Args:
            search: Optional case-insensitive search term for product name
        """
        query = self.db.query(Product)

        if search:
            query = query.filter(Product.name.ilike(f"%{search}%"))

        return query.order_by(Product.id).all()

    def update(self, product_id: int, product_data: ProductUpdate) -> Product:
        """
        Update an existing product.

        Args:
            product_id: ID of product to update
            product_data: Update data (only provided fields are updated)

        Raises:
            NotFoundError: If no row matched the ID
        """
        values = product_data.model_dump(exclude_unset=True, exclude_none=True)
        if not values:
            return self.get_by_id(product_id)

        result = self.db.execute(
            update(Product).where(Product.id == product_id).values(**values)
        )
        if result.rowcount == 0:
            self.db.rollback()
            raise NotFoundError(f"Product with ID {product_id} not found")

        self.db.commit()
        return self.db.get(Product, product_id)

    def delete(self, product_id: int) -> None:
        """
        Delete a product.

        Raises:
            ProductInUseError: If transaction details reference the product
            NotFoundError: If no row matched the ID
        """
        referenced = (
            self.db.query(TransactionDetail.id)
            .filter(TransactionDetail.product_id == product_id)
            .first()
        )
        if referenced:
            raise ProductInUseError(f"Product with ID {product_id} is referenced by transactions")

        try:
            result = self.db.execute(delete(Product).where(Product.id == product_id))
            if result.rowcount == 0:
                raise NotFoundError(f"Product with ID {product_id} not found")
            self.db.commit()
        except NotFoundError:
            self.db.rollback()
            raise
        except IntegrityError as e:
            # A checkout referencing the product committed in between
            self.db.rollback()
            logger.warning(f"Integrity error deleting product #{product_id}: {e}")
            raise ProductInUseError(f"Product with ID {product_id} is referenced by transactions")
