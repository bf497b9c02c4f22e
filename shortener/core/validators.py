"""
Input Validators

Validation helpers for the two values callers hand to the service:
original URLs and short URL tokens.
"""

import unicodedata
from typing import Optional
from urllib.parse import urlsplit

ALLOWED_SCHEMES = frozenset({"http", "https"})

# 16 random bytes -> 24 base64 chars, the last two always "=".
TOKEN_BYTES = 16
TOKEN_LENGTH = 22
TOKEN_PADDING = "="


def is_valid_url(url: Optional[str]) -> bool:
    """
    Check that url is an absolute http/https URL.

    Args:
        url: The URL string to validate

    Returns:
        True if the URL has an http/https scheme and a host, False otherwise
    """
    if not url or not isinstance(url, str):
        return False

    # Whitespace and control characters make a URL malformed, not just unusual
    if any(char.isspace() or unicodedata.category(char) == "Cc" for char in url):
        return False

    try:
        result = urlsplit(url)
        # Accessing port validates it (raises ValueError when out of range)
        result.port
    except ValueError:
        return False

    if result.scheme.lower() not in ALLOWED_SCHEMES:
        return False

    return bool(result.hostname)


def is_valid_short_url(short_url: Optional[str]) -> bool:
    """Return True if short_url has the length of a generated token."""
    return isinstance(short_url, str) and len(short_url) == TOKEN_LENGTH
