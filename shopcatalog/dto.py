"""Data transfer objects exchanged with API clients as JSON."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"json: cannot unmarshal {type(data).__name__} into {what}")
    return data


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(
            f"json: cannot unmarshal {type(value).__name__} into field {key} of type string"
        )
    return value


@dataclass
class CategoryDTO:
    """A product category as seen by API clients."""

    id: str = ""
    name: str = ""

    def to_dict(self) -> dict[str, str]:
        """The JSON object form."""
        return {"categoryId": self.id, "categoryName": self.name}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CategoryDTO:
        """Build from a decoded JSON object; missing fields are empty strings."""
        data = _require_mapping(data, "CategoryDTO")
        return cls(id=_text(data, "categoryId"), name=_text(data, "categoryName"))


@dataclass
class ProductDTO:
    """A product as seen by API clients; the price travels as a string."""

    id: str = ""
    name: str = ""
    price: str = ""
    category: CategoryDTO | None = None

    def to_dict(self) -> dict[str, Any]:
        """The JSON object form; the category is left out when absent."""
        result: dict[str, Any] = {
            "productId": self.id,
            "productName": self.name,
            "productPrice": self.price,
        }
        if self.category is not None:
            result["category"] = self.category.to_dict()
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ProductDTO:
        """Build from a decoded JSON object; missing fields are empty strings."""
        data = _require_mapping(data, "ProductDTO")
        raw_category = data.get("category")
        category = None if raw_category is None else CategoryDTO.from_dict(raw_category)
        return cls(
            id=_text(data, "productId"),
            name=_text(data, "productName"),
            price=_text(data, "productPrice"),
            category=category,
        )