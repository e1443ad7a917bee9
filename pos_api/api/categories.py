from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from pos_api.database import get_db
from pos_api.services.category_service import CategoryService
from pos_api.services.errors import NotFoundError
from pos_api.schemas.category import (
    CategoryCreate,
    CategoryUpdate,
    CategoryResponse
)

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get(
    "/",
    response_model=list[CategoryResponse],
    summary="List all categories",
    description="Get every category, in the order they were created."
)
def list_categories(db: Session = Depends(get_db)):
    """Get all categories."""
    service = CategoryService(db)
    return service.get_all()


@router.post(
    "/",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new category"
)
def create_category(
    category_data: CategoryCreate,
    db: Session = Depends(get_db)
):
    """
    Create a new category.

    - **name**: Category name (required)
    - **description**: Free-form description (optional)
    """
    service = CategoryService(db)
    return service.create(category_data)


@router.get(
    "/{category_id}",
    response_model=CategoryResponse,
    summary="Get category by ID"
)
def get_category(
    category_id: int,
    db: Session = Depends(get_db)
):
    """Get a category by ID."""
    service = CategoryService(db)

    try:
        return service.get_by_id(category_id)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )


@router.put(
    "/{category_id}",
    response_model=CategoryResponse,
    summary="Update a category",
    description="Replace the name and description of a category."
)
def update_category(
    category_id: int,
    category_data: CategoryUpdate,
    db: Session = Depends(get_db)
):
    """Update a category."""
    service = CategoryService(db)

    try:
        return service.update(category_id, category_data)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )


@router.delete(
    "/{category_id}",
    summary="Delete a category"
)
def delete_category(
    category_id: int,
    db: Session = Depends(get_db)
):
    """Delete a category."""
    service = CategoryService(db)

    try:
        service.delete(category_id)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )

    return {"message": f"Category with ID {category_id} deleted"}


@router.api_route("/", methods=["PUT", "DELETE"], include_in_schema=False)
def category_id_required():
    """PUT and DELETE address a single category."""
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Category ID is required"
    )
