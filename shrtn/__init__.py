"""Core business logic for shrtn."""

from .shortcode import ShortCodeGenerator
from .service import ShortenerService

__all__ = ["ShortCodeGenerator", "ShortenerService"]
