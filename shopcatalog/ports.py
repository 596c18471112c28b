"""Abstract interfaces between the layers: adapters, repositories, connectors and use cases."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from shopcatalog.categories import Category
from shopcatalog.products import Product, ProductName

_Model = TypeVar("_Model")
_Session = TypeVar("_Session")
_Connection = TypeVar("_Connection")


class CategoryAdapter(ABC, Generic[_Model]):
    """Converts categories to and from another representation."""

    @abstractmethod
    def convert(self, source: Category | None) -> _Model:
        """Turn a category entity into the other representation."""

    @abstractmethod
    def restore(self, source: _Model | None) -> Category:
        """Rebuild a category entity from the other representation."""


class ProductAdapter(ABC, Generic[_Model]):
    """Converts products to and from another representation."""

    @abstractmethod
    def convert(self, source: Product | None) -> _Model:
        """Turn a product entity into the other representation."""

    @abstractmethod
    def restore(self, source: _Model | None) -> Product:
        """Rebuild a product entity from the other representation."""


class CategoryRepository(ABC, Generic[_Session]):
    """Storage of product categories."""

    @abstractmethod
    def find_all(self, session: _Session) -> list[Category]:
        """Return every stored category."""


class ProductRepository(ABC, Generic[_Session]):
    """Storage of products."""

    @abstractmethod
    def exists(self, session: _Session, name: ProductName) -> bool:
        """Tell whether a product with this name is stored."""

    @abstractmethod
    def create(self, session: _Session, product: Product) -> None:
        """Store a new product."""

    @abstractmethod
    def find_by_name_like(self, session: _Session, keyword: str) -> list[Product]:
        """Return the products whose name contains the keyword."""


class DatabaseConnector(ABC, Generic[_Connection]):
    """Opens a connection to a database."""

    @abstractmethod
    def connect(self) -> _Connection:
        """Connect and return the connection handle."""


class CategoryListUseCase(ABC):
    """Use case: browse the list of product categories."""

    @abstractmethod
    def execute(self) -> list[Category]:
        """Return all categories."""


class ProductKeywordUseCase(ABC):
    """Use case: search products by keyword."""

    @abstractmethod
    def execute(self, keyword: str) -> list[Product]:
        """Return the products matching the keyword."""


class ProductRegisterUseCase(ABC):
    """Use case: register a new product."""

    @abstractmethod
    def execute(self, new_product: Product) -> None:
        """Persist the product entered by the user."""