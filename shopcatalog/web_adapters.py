"""Conversion between domain entities and the API's transfer objects."""

from __future__ import annotations

import re

from shopcatalog.categories import Category, CategoryId, CategoryName
from shopcatalog.dto import CategoryDTO, ProductDTO
from shopcatalog.errors import DomainError
from shopcatalog.ports import CategoryAdapter, ProductAdapter
from shopcatalog.products import Product, ProductId, ProductName, ProductPrice

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str) -> int:
    if not _INTEGER_PATTERN.fullmatch(text):
        raise DomainError("単価は整数でなければなりません。")
    return int(text)


class CategoryDTOAdapter(CategoryAdapter[CategoryDTO]):
    """Converts categories to and from CategoryDTO."""

    def convert(self, source: Category) -> CategoryDTO:
        return CategoryDTO(source.id.value, source.name.value)

    def restore(self, source: CategoryDTO | None) -> Category:
        if source is None:
            raise TypeError("a category is required")
        return Category(CategoryId(source.id), CategoryName(source.name))


class ProductDTOAdapter(ProductAdapter[ProductDTO]):
    """Converts products to and from ProductDTO."""

    def __init__(self, category_adapter: CategoryAdapter[CategoryDTO]) -> None:
        self._category_adapter = category_adapter

    def convert(self, source: Product) -> ProductDTO:
        category = self._category_adapter.convert(source.category)
        return ProductDTO(
            source.id.value,
            source.name.value,
            str(source.price.value),
            category,
        )

    def restore(self, source: ProductDTO) -> Product:
        """Rebuild a product; an empty id means a new product with a fresh id."""
        category = self._category_adapter.restore(source.category)
        product_id = ProductId.generate() if source.id == "" else ProductId(source.id)
        name = ProductName(source.name)
        price = ProductPrice(_parse_int(source.price))
        return Product(product_id, name, price, category)