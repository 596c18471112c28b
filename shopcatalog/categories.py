"""Product category entity and its value objects."""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass

from shopcatalog.errors import DomainError

_UUID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)
_MAX_NAME_LENGTH = 20


@dataclass(frozen=True)
class CategoryId:
    """Identifier of a product category: a UUID in its 36-character form."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise DomainError("商品カテゴリIdは、空文字列であってはなりません。")
        if len(self.value.encode("utf-8")) != 36:
            raise DomainError("商品カテゴリIdは、36文字でなければなりません。")
        if not _UUID_PATTERN.fullmatch(self.value):
            raise DomainError("商品カテゴリIdは、UUID形式でなければなりません。")

    @classmethod
    def generate(cls) -> CategoryId:
        """Create an identifier from a freshly generated UUID."""
        return cls(str(uuid.uuid4()))


@dataclass(frozen=True)
class CategoryName:
    """Name of a product category: 1 to 20 characters."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise DomainError("商品カテゴリ名は、空文字列であってはなりません。")
        if len(self.value) > _MAX_NAME_LENGTH:
            raise DomainError("商品カテゴリ名は、20文字以内である必要があります。")


class Category:
    """A product category, identified by its id."""

    def __init__(self, category_id: CategoryId | None, name: CategoryName | None = None) -> None:
        if category_id is None:
            raise DomainError("カテゴリIdは、必須です。")
        self._id = category_id
        self._name = name

    @property
    def id(self) -> CategoryId:
        return self._id

    @property
    def name(self) -> CategoryName | None:
        return self._name

    def change_name(self, new_name: CategoryName | None) -> None:
        """Rename the category; a name is required."""
        if new_name is None:
            raise DomainError("カテゴリ名は、必須です。")
        self._name = new_name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Category):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        id_text = self._id.value if self._id is not None else "nil"
        name_text = self._name.value if self._name is not None else "nil"
        return f"Category: id={id_text},name={name_text}"

    def __repr__(self) -> str:
        return f"Category(category_id={self._id!r}, name={self._name!r})"