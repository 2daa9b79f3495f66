"""
Error classes for the shortener.

Each error carries the HTTP status code it is answered with, so the web
layer can turn any of them into a response without knowing which one it got.
"""

from typing import Optional


class ShortenerError(Exception):
    """
    Base shortener error class.

    Attributes:
        status_code: HTTP status code (default: 500)
        message: Error message (default: "Internal server error")
    """
    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        """
        Initialize shortener error.

        Args:
            message: Error message (overrides default)
        """
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(ShortenerError):
    """400 Bad or non-absolute URL."""
    status_code = 400
    message = "Invalid URL"


class NotFoundError(ShortenerError):
    """404 No mapping for the requested short code."""
    status_code = 404
    message = "404 page not found"


class StoreError(ShortenerError):
    """500 Failure reported by the mapping store."""
    status_code = 500
    message = "Store error"


class MethodNotAllowed(ShortenerError):
    """Wrong HTTP method for a route, answered as a plain 404."""
    status_code = 404
    message = "404 page not found"
