"""Request handlers of the catalog API and the mapping of errors to HTTP replies.

Each handler returns a ``(status, body)`` pair; the body is a JSON-serialisable value.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

from shopcatalog.dto import CategoryDTO, ProductDTO
from shopcatalog.errors import ApplicationError, DomainError, InternalError, NotFoundError
from shopcatalog.ports import (
    CategoryAdapter,
    CategoryListUseCase,
    ProductAdapter,
    ProductKeywordUseCase,
    ProductRegisterUseCase,
)

_UNKNOWN_ERROR_MESSAGE = "不明なエラーが検出されました。"


def error_response(error: BaseException) -> tuple[int, str]:
    """Map an error to the status code and message sent to the client."""
    if isinstance(error, (DomainError, ApplicationError)):
        return int(HTTPStatus.BAD_REQUEST), str(error)
    if isinstance(error, NotFoundError):
        return int(HTTPStatus.NOT_FOUND), str(error)
    if isinstance(error, InternalError):
        return int(HTTPStatus.INTERNAL_SERVER_ERROR), str(error)
    return int(HTTPStatus.INTERNAL_SERVER_ERROR), _UNKNOWN_ERROR_MESSAGE


class CategoryListHandler:
    """Returns the list of product categories."""

    def __init__(
        self, usecase: CategoryListUseCase, adapter: CategoryAdapter[CategoryDTO]
    ) -> None:
        self._usecase = usecase
        self._adapter = adapter

    def handle(self) -> tuple[int, Any]:
        try:
            results = [self._adapter.convert(category).to_dict() for category in self._usecase.execute()]
        except Exception as exc:
            return error_response(exc)
        return int(HTTPStatus.OK), results


class ProductKeywordHandler:
    """Returns the products whose name contains a keyword."""

    def __init__(
        self, usecase: ProductKeywordUseCase, adapter: ProductAdapter[ProductDTO]
    ) -> None:
        self._usecase = usecase
        self._adapter = adapter

    def handle(self, keyword: str) -> tuple[int, Any]:
        try:
            results = [
                self._adapter.convert(product).to_dict()
                for product in self._usecase.execute(keyword)
            ]
        except Exception as exc:
            return error_response(exc)
        return int(HTTPStatus.OK), results


class ProductRegisterHandler:
    """Registers the product sent as a JSON request body."""

    def __init__(
        self, usecase: ProductRegisterUseCase, adapter: ProductAdapter[ProductDTO]
    ) -> None:
        self._usecase = usecase
        self._adapter = adapter

    def handle(self, payload: bytes | str) -> tuple[int, Any]:
        """Register the product; on success the received data is echoed back."""
        try:
            dto = ProductDTO.from_dict(json.loads(payload))
        except ValueError as exc:
            return int(HTTPStatus.BAD_REQUEST), {"error": str(exc)}
        try:
            product = self._adapter.restore(dto)
            self._usecase.execute(product)
        except Exception as exc:
            return error_response(exc)
        return int(HTTPStatus.OK), dto.to_dict()


@dataclass(frozen=True)
class Handlers:
    """The request handlers registered with the router."""

    category_list: CategoryListHandler
    product_register: ProductRegisterHandler
    product_keyword: ProductKeywordHandler