"""Common utilities for shrtn."""

from .validators import normalize_strict, normalize_lenient, get_normalizer
from .headers import extract_forwarded_headers, get_forwarded_path_prefix
from .url_builder import build_redirect_location
from .logging_config import setup_logging, get_logger

__all__ = [
    "normalize_strict",
    "normalize_lenient",
    "get_normalizer",
    "extract_forwarded_headers",
    "get_forwarded_path_prefix",
    "build_redirect_location",
    "setup_logging",
    "get_logger",
]
