"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the HTTP and CLI layers can catch them uniformly and map them to status
codes or user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A request was malformed or a business rule was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class GroceryNotFoundError(EntityNotFoundError):
    """A booking referenced a grocery id that is not in the catalog."""

    def __init__(self, grocery_id: str) -> None:
        super().__init__(f"Grocery item not found: {grocery_id}")
        self.grocery_id = grocery_id


class InsufficientStockError(DomainException):
    """Available inventory was lower than the requested quantity."""

    def __init__(self, grocery_id: str, requested: int) -> None:
        super().__init__(f"Insufficient inventory for item: {grocery_id}")
        self.grocery_id = grocery_id
        self.requested = requested


class PersistenceError(DomainException):
    """The store was unavailable or a write failed."""


class TransientStoreError(PersistenceError):
    """A store failure that may succeed if the operation is retried."""
