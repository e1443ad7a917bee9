from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
from typing import Optional


class ProductBase(BaseModel):
    """Base schema for Product with common attributes."""
    name: str = Field(..., min_length=1, max_length=255, description="Product name")
    price: int = Field(..., gt=0, description="Unit price in the minor currency unit")
    stock: int = Field(..., ge=0, description="Available stock (must be non-negative)")


class ProductCreate(ProductBase):
    """Schema for creating a new product."""
    pass


class ProductUpdate(BaseModel):
    """
    Schema for updating an existing product. All fields are optional.

    Stock is not updatable here; it only changes through checkout.
    """
    name: Optional[str] = Field(None, min_length=1, max_length=255, description="Product name")
    price: Optional[int] = Field(None, gt=0, description="Unit price")


class ProductResponse(ProductBase):
    """Schema for product response including all fields."""
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
