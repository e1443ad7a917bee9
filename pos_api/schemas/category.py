from pydantic import BaseModel, Field, ConfigDict


class CategoryBase(BaseModel):
    """Base schema for Category with common attributes."""
    name: str = Field(..., min_length=1, max_length=255, description="Category name")
    description: str = Field(default="", description="Category description")


class CategoryCreate(CategoryBase):
    """Schema for creating a new category."""
    pass


class CategoryUpdate(CategoryBase):
    """Schema for replacing an existing category."""
    pass


class CategoryResponse(CategoryBase):
    """Schema for category response."""
    id: int

    model_config = ConfigDict(from_attributes=True)
