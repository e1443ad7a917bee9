from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from typing import Optional

from pos_api.database import get_db
from pos_api.services.product_service import ProductService
from pos_api.services.errors import NotFoundError, ProductInUseError
from pos_api.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse
)

router = APIRouter(prefix="/products", tags=["Products"])


@router.post(
    "/",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product",
    description="Create a new product with name, price, and initial stock."
)
def create_product(
    product_data: ProductCreate,
    db: Session = Depends(get_db)
):
    """
    Create a new product.

    - **name**: Product name (required)
    - **price**: Unit price in the minor currency unit, must be positive (required)
    - **stock**: Initial stock quantity, must be non-negative (required)
    """
    service = ProductService(db)
    return service.create(product_data)


@router.get(
    "/",
    response_model=list[ProductResponse],
    summary="List all products",
    description="Get every product with optional name search."
)
def list_products(
    search: Optional[str] = Query(None, description="Search by product name"),
    db: Session = Depends(get_db)
):
    """Get all products."""
    service = ProductService(db)
    return service.get_all(search)


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Get product by ID"
)
def get_product(
    product_id: int,
    db: Session = Depends(get_db)
):
    """Get a product by ID, including its current stock."""
    service = ProductService(db)

    try:
        return service.get_by_id(product_id)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Update a product",
    description="Update name and/or price. Stock only changes through checkout."
)
def update_product(
    product_id: int,
    product_data: ProductUpdate,
    db: Session = Depends(get_db)
):
    """
    Update a product.

    Partial updates are supported - only include fields you want to change.
    """
    service = ProductService(db)

    try:
        return service.update(product_id, product_data)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a product",
    description="Delete a product that no transaction references."
)
def delete_product(
    product_id: int,
    db: Session = Depends(get_db)
):
    """Delete a product."""
    service = ProductService(db)

    try:
        service.delete(product_id)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except ProductInUseError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )

    return None
