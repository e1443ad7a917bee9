from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime


class CheckoutItem(BaseModel):
    """A single requested line: product and quantity."""
    product_id: int = Field(..., description="ID of the product to sell")
    quantity: int = Field(..., ge=1, description="Quantity to sell")


class CheckoutRequest(BaseModel):
    """Schema for the checkout request body."""
    items: list[CheckoutItem] = Field(..., min_length=1, description="Line items, in receipt order")


class TransactionDetailResponse(BaseModel):
    """Schema for a transaction line."""
    id: int
    transaction_id: int
    product_id: int
    product_name: str
    quantity: int
    subtotal: int

    model_config = ConfigDict(from_attributes=True)


class TransactionResponse(BaseModel):
    """Schema for transaction response including its details."""
    id: int
    total_amount: int
    created_at: datetime
    details: list[TransactionDetailResponse]

    model_config = ConfigDict(from_attributes=True)


class TransactionListResponse(BaseModel):
    """Schema for paginated transaction list response."""
    items: list[TransactionResponse]
    total: int
    page: int
    page_size: int
    total_pages: int
