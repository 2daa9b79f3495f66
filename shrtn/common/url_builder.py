"""URL building utilities for shrtn."""


def build_redirect_location(url: str) -> str:
    """Make a stored URL safe to send as a Location header.

    Printable ASCII is passed through untouched, so the client is sent to
    exactly the stored URL. Non-ASCII characters are percent-encoded as
    UTF-8 bytes, and control characters (only reachable through the lenient
    policy) are percent-encoded so they cannot break the header.

    Args:
        url: The stored long URL

    Returns:
        Header-safe redirect target
    """
    parts = []
    for c in url:
        if 0x20 <= ord(c) < 0x7f:
            parts.append(c)
        else:
            parts.append("".join(f"%{b:02X}" for b in c.encode("utf-8")))
    return "".join(parts)
