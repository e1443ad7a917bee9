from typing import Optional


class NotFoundError(Exception):
    """Exception raised when a category, product or transaction doesn't exist."""
    pass


class InvalidInputError(Exception):
    """Exception raised when a request is well-formed JSON but semantically invalid."""
    pass


class ProductNotFoundError(Exception):
    """Exception raised when a checkout references a product that doesn't exist."""

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product with ID {product_id} not found")


class InsufficientStockError(Exception):
    """Exception raised when there's not enough stock to fulfill a checkout."""

    def __init__(
        self,
        product_id: Optional[int] = None,
        available: Optional[int] = None,
        requested: Optional[int] = None,
    ):
        self.product_id = product_id
        if product_id is None:
            message = "Stock constraint violated - concurrent modification detected"
        else:
            message = (
                f"Insufficient stock for product {product_id}. "
                f"Available: {available}, Requested: {requested}"
            )
        super().__init__(message)


class ProductInUseError(Exception):
    """Exception raised when deleting a product that existing transactions reference."""
    pass
