"""Error conditions raised by the catalog.

None of these are server faults: each maps to a response the user can
recover from (a redirect to the login page, a 404, or a redirect back to
the submitting form with field errors).
"""
from typing import Dict, List


class CatalogError(Exception):
    """Base class for expected catalog conditions."""


class Unauthenticated(CatalogError):
    """Raised when a request has no authenticated session."""


class NotFound(CatalogError):
    """Raised when an entity keyed by identifier does not exist."""


class ProductNotFound(NotFound):
    """Raised when no product row has the requested id."""

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__("Product not found")


class ValidationFailed(CatalogError):
    """Raised when submitted fields break one or more rules.

    Args:
        errors: Mapping of field name to violation messages
    """

    def __init__(self, errors: Dict[str, List[str]]):
        self.errors = errors
        super().__init__(f"Validation failed for: {', '.join(sorted(errors))}")

    def first_messages(self) -> Dict[str, str]:
        """Return the first message per field, as shown beside form inputs."""
        return {field: messages[0] for field, messages in self.errors.items()}
