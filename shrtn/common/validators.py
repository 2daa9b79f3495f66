"""URL normalization policies for shrtn."""

from typing import Callable, Dict
from urllib.parse import urlsplit

from ..errors import ValidationError

LENIENT_PREFIX = "http://"


def normalize_strict(url: str, max_length: int = 2048) -> str:
    """Accept only absolute URLs (scheme and host), unchanged.

    Args:
        url: Raw user input
        max_length: Longest accepted URL

    Returns:
        The input URL

    Raises:
        ValidationError: If the input is not a valid absolute URL
    """
    if not url or not isinstance(url, str):
        raise ValidationError("Invalid URL: URL is required")

    if len(url) > max_length:
        raise ValidationError(f"Invalid URL: URL is too long (max {max_length} characters)")

    if any(c.isspace() or ord(c) < 0x20 or ord(c) == 0x7f for c in url):
        raise ValidationError("Invalid URL: URL must not contain whitespace or control characters")

    try:
        result = urlsplit(url)
        # Port parsing is lazy; force it so malformed ports are rejected here
        _ = result.port
    except ValueError as e:
        raise ValidationError(f"Invalid URL: {e}") from e

    if not result.scheme:
        raise ValidationError("Invalid URL structure: missing scheme")

    # A netloc such as ":80" or "user@" still has no host
    if not result.hostname:
        raise ValidationError("Invalid URL structure: missing host")

    return url


def normalize_lenient(url: str, max_length: int = 2048) -> str:
    """Prefix anything that does not start with http:// with it. Never rejects.

    Args:
        url: Raw user input
        max_length: Unused, accepted so both policies share a signature

    Returns:
        Possibly rewritten URL
    """
    url = url or ""
    if url.startswith(LENIENT_PREFIX):
        return url
    return LENIENT_PREFIX + url


POLICIES: Dict[str, Callable[..., str]] = {
    "strict": normalize_strict,
    "lenient": normalize_lenient,
}


def get_normalizer(policy: str) -> Callable[..., str]:
    """Return the normalizer for a policy name.

    Raises:
        ValueError: For an unknown policy
    """
    try:
        return POLICIES[policy]
    except KeyError:
        raise ValueError(f"Unknown URL policy: {policy!r}") from None
