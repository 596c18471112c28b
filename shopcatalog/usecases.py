"""Use cases of the catalog, running the repositories inside database sessions."""

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.orm import Session

from shopcatalog.categories import Category
from shopcatalog.errors import ApplicationError
from shopcatalog.ports import (
    CategoryListUseCase,
    CategoryRepository,
    ProductKeywordUseCase,
    ProductRegisterUseCase,
    ProductRepository,
)
from shopcatalog.products import Product

SessionFactory = Callable[[], Session]


class CategoryList(CategoryListUseCase):
    """Browse the list of product categories."""

    def __init__(
        self, session_factory: SessionFactory, repository: CategoryRepository[Session]
    ) -> None:
        self._session_factory = session_factory
        self._repository = repository

    def execute(self) -> list[Category]:
        """Return every category."""
        with self._session_factory() as session:
            return self._repository.find_all(session)


class ProductKeyword(ProductKeywordUseCase):
    """Search products whose name contains a keyword."""

    def __init__(
        self, session_factory: SessionFactory, repository: ProductRepository[Session]
    ) -> None:
        self._session_factory = session_factory
        self._repository = repository

    def execute(self, keyword: str) -> list[Product]:
        """Return the matching products; raises NotFoundError when there are none."""
        with self._session_factory() as session:
            return self._repository.find_by_name_like(session, keyword)


class ProductRegister(ProductRegisterUseCase):
    """Register a new product in a single transaction."""

    def __init__(
        self, session_factory: SessionFactory, repository: ProductRepository[Session]
    ) -> None:
        self._session_factory = session_factory
        self._repository = repository

    def execute(self, new_product: Product) -> None:
        """Store the product unless one with the same name exists.

        The transaction is committed on success and rolled back on any error.
        """
        with self._session_factory() as session:
            with session.begin():
                if self._repository.exists(session, new_product.name):
                    raise ApplicationError(
                        f"商品:{new_product.name.value}は、既に登録済です。"
                    )
                self._repository.create(session, new_product)