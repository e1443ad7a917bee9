from sqlalchemy.orm import Session
from sqlalchemy import update, delete
from typing import List

from pos_api.models.category import Category
from pos_api.schemas.category import CategoryCreate, CategoryUpdate
from pos_api.services.errors import NotFoundError


class CategoryService:
    """
    Service class for Category CRUD operations.

    Update and delete issue the write directly and report a missing
    category when no row was affected.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(self, category_data: CategoryCreate) -> Category:
        """Create a new category and return it with its assigned ID."""
        category = Category(
            name=category_data.name,
            description=category_data.description
        )
        self.db.add(category)
        self.db.commit()
        self.db.refresh(category)
        return category

    def get_all(self) -> List[Category]:
        """Get all categories in insertion (ID) order."""
        return self.db.query(Category).order_by(Category.id).all()

    def get_by_id(self, category_id: int) -> Category:
        """
        Get a category by ID.

        Raises:
            NotFoundError: If the category doesn't exist
        """
        category = self.db.query(Category).filter(Category.id == category_id).first()
        if not category:
            raise NotFoundError(f"Category with ID {category_id} not found")
        return category

    def update(self, category_id: int, category_data: CategoryUpdate) -> Category:
        """
        Replace name and description of an existing category.

        Raises:
            NotFoundError: If no row matched the ID
        """
        result = self.db.execute(
            update(Category)
            .where(Category.id == category_id)
            .values({
                Category.name: category_data.name,
                Category.description: category_data.description,
            })
        )
        if result.rowcount == 0:
            self.db.rollback()
            raise NotFoundError(f"Category with ID {category_id} not found")

        self.db.commit()
        return self.db.get(Category, category_id)

    def delete(self, category_id: int) -> None:
        """
        Delete a category.

        Raises:
            NotFoundError: If no row matched the ID
        """
        result = self.db.execute(delete(Category).where(Category.id == category_id))
        if result.rowcount == 0:
            self.db.rollback()
            raise NotFoundError(f"Category with ID {category_id} not found")

        self.db.commit()
