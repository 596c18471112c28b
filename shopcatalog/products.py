"""Product entity and its value objects."""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass

from shopcatalog.categories import Category
from shopcatalog.errors import DomainError

_UUID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)
_MAX_NAME_LENGTH = 30
_MIN_PRICE = 50
_MAX_PRICE = 9999


@dataclass(frozen=True)
class ProductId:
    """Identifier of a product: a UUID in its 36-character form."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise DomainError("商品Idは、空文字列であってはなりません。")
        if len(self.value.encode("utf-8")) != 36:
            raise DomainError("商品Idは、36文字でなければなりません。")
        if not _UUID_PATTERN.fullmatch(self.value):
            raise DomainError("商品Idは、UUID形式でなければなりません。")

    @classmethod
    def generate(cls) -> ProductId:
        """Create an identifier from a freshly generated UUID."""
        return cls(str(uuid.uuid4()))


@dataclass(frozen=True)
class ProductName:
    """Name of a product: 1 to 30 characters."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise DomainError("商品名は、空文字列であってはなりません。")
        if len(self.value) > _MAX_NAME_LENGTH:
            raise DomainError("商品名は、30文字以内である必要があります。")


@dataclass(frozen=True)
class ProductPrice:
    """Unit price of a product: from 50 to 9999 inclusive."""

    value: int

    def __post_init__(self) -> None:
        if not _MIN_PRICE <= self.value <= _MAX_PRICE:
            raise DomainError("商品単価は、50以上10000未満でなければなりません。")


class Product:
    """A product, identified by its id."""

    def __init__(
        self,
        product_id: ProductId | None,
        name: ProductName | None,
        price: ProductPrice | None,
        category: Category | None,
    ) -> None:
        if product_id is None:
            raise DomainError("商品Idは、必須です。")
        self._id = product_id
        self._name = name
        self._price = price
        self._category = category

    @property
    def id(self) -> ProductId:
        return self._id

    @property
    def name(self) -> ProductName | None:
        return self._name

    @property
    def price(self) -> ProductPrice | None:
        return self._price

    @property
    def category(self) -> Category | None:
        return self._category

    def change_name(self, new_name: ProductName | None) -> None:
        """Rename the product; a name is required."""
        if new_name is None:
            raise DomainError("商品名は、必須です。")
        self._name = new_name

    def change_price(self, new_price: ProductPrice | None) -> None:
        """Change the unit price; a price is required."""
        if new_price is None:
            raise DomainError("商品単価は、必須です。")
        self._price = new_price

    def change_category(self, new_category: Category | None) -> None:
        """Move the product to another category; a category is required."""
        if new_category is None:
            raise DomainError("商品カテゴリは、必須です。")
        self._category = new_category

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        id_text = self._id.value if self._id is not None else "nil"
        name_text = self._name.value if self._name is not None else "nil"
        return f"Product: id={id_text},name={name_text},price={self._price.value},{self._category}"

    def __repr__(self) -> str:
        return (
            f"Product(product_id={self._id!r}, name={self._name!r}, "
            f"price={self._price!r}, category={self._category!r})"
        )