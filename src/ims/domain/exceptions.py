"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations

from uuid import UUID


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidClientDataError(ValidationError):
    """Client contact or identity data failed validation."""


# --- Not found ---------------------------------------------------------------


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):

    def __init__(self, product_id: UUID) -> None:
        super().__init__(f"Product with ID '{product_id}' was not found")
        self.product_id = product_id


class ClientNotFoundError(EntityNotFoundError):

    def __init__(self, client_id: str) -> None:
        super().__init__(f"Client with ID '{client_id}' was not found")
        self.client_id = client_id


class UserNotFoundError(EntityNotFoundError):

    def __init__(self, user_id: UUID | None = None, email: str | None = None) -> None:
        if email is not None:
            message = f"User with email '{email}' was not found"
        else:
            message = f"User with ID '{user_id}' was not found"
        super().__init__(message)
        self.user_id = user_id
        self.email = email


# --- Duplicates --------------------------------------------------------------


class DuplicateError(DomainException):
    """A uniqueness rule was violated."""


class DuplicateEmailError(DuplicateError):

    def __init__(self, email: str) -> None:
        super().__init__(f"A user with email '{email}' already exists")
        self.email = email


class DuplicateNiptError(DuplicateError):

    def __init__(self, nipt: str) -> None:
        super().__init__(f"A business client with NIPT '{nipt}' already exists")
        self.nipt = nipt


class DuplicateProductNameError(DuplicateError):

    def __init__(self, product_name: str, product_type: object) -> None:
        super().__init__(
            f"A product with name '{product_name}' already exists "
            f"in category '{product_type}'"
        )
        self.product_name = product_name
        self.product_type = product_type


# --- Stock -------------------------------------------------------------------


class InsufficientStockError(DomainException):
    """A removal asked for more units than the product has in stock."""

    def __init__(self, product_id: UUID, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient stock for product '{product_id}' "
            f"(requested {requested}, available {available})"
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


class CannotDeleteProductWithStockError(DomainException):

    def __init__(self, product_name: str, stock_quantity: int) -> None:
        super().__init__(
            f"Cannot delete product '{product_name}' with {stock_quantity} "
            f"units in stock. Remove all stock before deleting."
        )
        self.product_name = product_name
        self.stock_quantity = stock_quantity


# --- Authentication ----------------------------------------------------------


class UnauthorizedError(DomainException):
    """The operation needs an authenticated user and none was supplied."""


class InvalidCredentialsError(UnauthorizedError):

    def __init__(self) -> None:
        super().__init__("Invalid email or password")
