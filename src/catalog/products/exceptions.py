"""Product domain exceptions.

Raised by the repository and the Service Layer.  The API layer (Views)
catches these and translates them into HTTP responses; nothing above the
repository ever inspects a database driver error.
"""

from __future__ import annotations


class ProductError(Exception):
    """Base class for every product domain error."""


class ProductValidationError(ProductError):
    """Caller input violates a business rule (e.g. discount above 75).

    Raised before any persistence attempt.
    """


class ProductNotFound(ProductError):
    """The referenced product does not exist."""


class ProductStoreError(ProductError):
    """A query, connection or row-decoding failure in the product store."""
