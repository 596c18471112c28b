"""Table mappings for categories and products."""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Declarative base of the catalog tables."""


class CategoryModel(Base):
    """Row of the category table."""

    __tablename__ = "category"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    obj_id: Mapped[str] = mapped_column(String(36), unique=True, index=True)
    name: Mapped[Optional[str]] = mapped_column(String(20))

    def __repr__(self) -> str:
        return f"CategoryModel(id={self.id!r}, obj_id={self.obj_id!r}, name={self.name!r})"


class ProductModel(Base):
    """Row of the product table, joined to its category through the category's obj_id."""

    __tablename__ = "product"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    obj_id: Mapped[str] = mapped_column(String(36), unique=True, index=True)
    name: Mapped[Optional[str]] = mapped_column(String(30))
    price: Mapped[int] = mapped_column(Integer)
    category_id: Mapped[Optional[str]] = mapped_column(String(36), ForeignKey("category.obj_id"))
    category: Mapped[Optional[CategoryModel]] = relationship()

    def __repr__(self) -> str:
        return (
            f"ProductModel(id={self.id!r}, obj_id={self.obj_id!r}, name={self.name!r}, "
            f"price={self.price!r}, category_id={self.category_id!r})"
        )