"""
Custom Exceptions

This module defines the exceptions raised by the shortening service.

Only argument errors are part of the taxonomy: anything else a repository
or the runtime raises is treated as unexpected and propagates untouched
until the endpoint boundary turns it into a 500.
"""

from typing import Optional


class URLShortenerException(Exception):
    """Base exception for URL shortener service."""
    pass


class InvalidArgumentError(URLShortenerException, ValueError):
    """Raised when a URL or short URL supplied by the caller is malformed or missing."""

    def __init__(self, value: Optional[str], reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"{reason}: {value!r}")


class InvalidURLError(InvalidArgumentError):
    """Raised when URL validation fails."""

    def __init__(self, url: Optional[str], reason: str = "Invalid URL format"):
        super().__init__(url, reason)

    @property
    def url(self) -> Optional[str]:
        return self.value


class InvalidShortURLError(InvalidArgumentError):
    """Raised when a short URL does not have the expected token format."""

    def __init__(self, short_url: Optional[str], reason: str = "Invalid short URL format"):
        super().__init__(short_url, reason)

    @property
    def short_url(self) -> Optional[str]:
        return self.value
