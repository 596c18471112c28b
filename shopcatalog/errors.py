"""Exception types raised by the domain, application and infrastructure layers."""

from __future__ import annotations


class _CatalogError(Exception):
    """Common base holding the human-readable message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DomainError(_CatalogError):
    """A business rule of the domain model was violated."""


class ApplicationError(_CatalogError):
    """A use case could not be carried out, e.g. a duplicate registration."""


class InternalError(_CatalogError):
    """An unexpected failure inside the infrastructure, such as a database error."""


class NotFoundError(_CatalogError):
    """The requested records do not exist."""