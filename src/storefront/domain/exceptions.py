"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CustomerNotFoundError(EntityNotFoundError):

    def __init__(self) -> None:
        super().__init__("Could not find any customer with the given id")


class NoProductsFoundError(EntityNotFoundError):

    def __init__(self) -> None:
        super().__init__("Could not find any products with the given ids")


class ProductsNotFoundError(EntityNotFoundError):
    """Some of the requested product ids are not in the catalog.

    ``product_ids`` keeps the unknown ids in the order they were requested.
    """

    def __init__(self, product_ids: list[str]) -> None:
        self.product_ids = list(product_ids)
        super().__init__(f"Could not find products: {', '.join(self.product_ids)}")


class InsufficientStockError(ValidationError):

    def __init__(self, product_ids: list[str]) -> None:
        self.product_ids = list(product_ids)
        super().__init__("There are one or more products with quantity unavailable")
