from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from typing import List, Sequence, Tuple
import math
import logging

from pos_api.models.product import Product
from pos_api.models.transaction import Transaction, TransactionDetail
from pos_api.schemas.transaction import CheckoutItem
from pos_api.services.errors import (
    InsufficientStockError,
    InvalidInputError,
    NotFoundError,
    ProductNotFoundError,
)

logger = logging.getLogger(__name__)


class TransactionService:
    """
    Service class for checkout and transaction queries.

    ATOMICITY:
    ==========
    A checkout runs inside a single database transaction on the request
    session. Product lookups, stock decrements, the transaction insert and
    the detail inserts either all commit together or are all rolled back.
    There is no partially committed state and no retry on conflict.

    CONCURRENT CHECKOUTS:
    =====================
    Each product row is read with SELECT FOR UPDATE, so concurrent checkouts
    touching the same product serialize on the row lock (PostgreSQL). The
    stock check happens inside the lock, and the `stock >= 0` check
    constraint is the last line against overselling.
    """

    def __init__(self, db: Session):
        self.db = db

    def checkout(self, items: Sequence[CheckoutItem]) -> Transaction:
        """
        Convert requested line items into a persisted transaction.

        Algorithm, per item in input order:
        1. SELECT product FOR UPDATE (locks the row)
        2. Check the remaining stock covers the quantity
        3. subtotal = price * quantity, added to the running total
        4. Deduct stock
        5. Build a detail carrying a snapshot of the product name
        Then insert the transaction and its details and commit.

        Lines referencing the same product are checked cumulatively, since
        the second lookup returns the already decremented instance.

        Args:
            items: Requested (product_id, quantity) lines

        Returns:
            Committed transaction with generated IDs and ordered details

        Raises:
            InvalidInputError: If items is empty or a quantity is not positive
            ProductNotFoundError: If a product doesn't exist
            InsufficientStockError: If not enough stock available
        """
        if not items:
            raise InvalidInputError("Checkout requires at least one item")
        for item in items:
            if item.quantity <= 0:
                raise InvalidInputError(f"Quantity for product {item.product_id} must be positive")

        try:
            total_amount = 0
            details = []

            for item in items:
                product = (
                    self.db.query(Product)
                    .filter(Product.id == item.product_id)
                    .with_for_update()  # Pessimistic locking
                    .first()
                )

                if not product:
                    raise ProductNotFoundError(item.product_id)

                if product.stock < item.quantity:
                    raise InsufficientStockError(item.product_id, product.stock, item.quantity)

                subtotal = product.price * item.quantity
                total_amount += subtotal

                product.stock -= item.quantity

                details.append(
                    TransactionDetail(
                        product_id=product.id,
                        product_name=product.name,
                        quantity=item.quantity,
                        subtotal=subtotal,
                    )
                )

            transaction = Transaction(total_amount=total_amount, details=details)

            self.db.add(transaction)
            self.db.commit()
            self.db.refresh(transaction)

            logger.info(
                f"Transaction #{transaction.id} committed: "
                f"{len(transaction.details)} line(s), total {transaction.total_amount}"
            )

            return transaction

        except (ProductNotFoundError, InsufficientStockError) as e:
            self.db.rollback()
            logger.info(f"Checkout rejected: {e}")
            raise
        except IntegrityError as e:
            # Handle constraint violations (e.g., stock going negative)
            self.db.rollback()
            logger.error(f"Integrity error during checkout: {e}")
            raise InsufficientStockError()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error during checkout: {e}")
            raise

    def get_transaction(self, transaction_id: int) -> Transaction:
        """
        Get a transaction by ID.

        Raises:
            NotFoundError: If the transaction doesn't exist
        """
        transaction = (
            self.db.query(Transaction)
            .filter(Transaction.id == transaction_id)
            .first()
        )
        if not transaction:
            raise NotFoundError(f"Transaction with ID {transaction_id} not found")
        return transaction

    def get_transactions(
        self,
        page: int = 1,
        page_size: int = 10
    ) -> Tuple[List[Transaction], int, int]:
        """
        Get paginated list of transactions, newest first.

        Args:
            page: Page number
            page_size: Items per page

        Returns:
            Tuple of (transactions list, total count, total pages)
        """
        query = self.db.query(Transaction)

        total = query.count()
        total_pages = math.ceil(total / page_size) if total > 0 else 1

        offset = (page - 1) * page_size
        transactions = (
            query.order_by(Transaction.id.desc())
            .offset(offset)
            .limit(page_size)
            .all()
        )

        return transactions, total, total_pages
