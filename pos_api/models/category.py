from sqlalchemy import Column, Integer, String, Text

from pos_api.database import Base


class Category(Base):
    """
    Category model grouping products in the catalog.

    Attributes:
        id: Unique identifier for the category
        name: Category name (stored in the `nama` column)
        description: Free-form description
    """
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column("nama", String(255), nullable=False)
    description = Column(Text, nullable=False, default="")

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}')>"
