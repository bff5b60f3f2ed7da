"""Product API errors.

Raised by the service and repository layers; the Flask app turns them into
``{"success": false, "error": message}`` responses with ``status_code``.
"""

from __future__ import annotations


class ProductError(Exception):
    """Base class for errors reported to API callers."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ProductError):
    """Missing, malformed or out-of-range input."""

    status_code = 400


class InvalidIdentifier(ProductError):
    """The product id is not a valid ObjectId string."""

    status_code = 400

    def __init__(self, message: str = 'Invalid product ID format'):
        super().__init__(message)


class NotFound(ProductError):
    status_code = 404

    def __init__(self, message: str = 'Product not found'):
        super().__init__(message)


class InternalError(ProductError):
    """Store or unexpected failure; carries the underlying message."""

    status_code = 500
