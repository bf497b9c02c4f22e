"""
URL Shortening Service

This service handles the core business logic for URL shortening:
- Validating original URLs (absolute http/https only)
- Generating random short URL tokens
- Validating and re-padding tokens for lookup
- Delegating storage to a UrlRepository

Design Decisions:
- Random tokens: 16 bytes from the secrets module, so repeated calls with the
  same URL never return the same token and nothing needs deduplicating
- URL-safe base64: '+' and '/' become '-' and '_', padding is stripped,
  which always leaves 22 characters for 16 bytes
- No collision detection: the 128-bit space makes a retry loop pointless
- Repository errors are not caught here; the API layer decides what the
  caller sees
"""

import base64
import logging
import secrets
from abc import ABC, abstractmethod
from typing import Optional

from shortener.core.exceptions import InvalidShortURLError, InvalidURLError
from shortener.core.validators import (
    TOKEN_BYTES,
    TOKEN_LENGTH,
    TOKEN_PADDING,
    is_valid_short_url,
    is_valid_url,
)
from shortener.db.interface import UrlRepository

logger = logging.getLogger(__name__)


def generate_short_url() -> str:
    """
    Generate a new short URL token.

    Returns:
        22-character token over [A-Za-z0-9_-]

    Example:
        generate_short_url() -> "YHqCyIBHN0a7L8jYJif3Bw"
    """
    raw = secrets.token_bytes(TOKEN_BYTES)
    encoded = base64.urlsafe_b64encode(raw).decode("ascii")
    return encoded.rstrip(TOKEN_PADDING)


def pad_short_url(short_url: str) -> str:
    """Re-append '=' padding up to the stored key width."""
    return short_url.ljust(TOKEN_LENGTH, TOKEN_PADDING)


class UrlShortenerService(ABC):
    """Operations the API layer needs from a shortening service."""

    @abstractmethod
    def shorten(self, original_url: Optional[str]) -> str:
        """Store original_url under a new token and return the token."""
        pass

    @abstractmethod
    def get_original_url(self, short_url: Optional[str]) -> Optional[str]:
        """Return the URL stored under short_url, or None if there is none."""
        pass


class URLShorteningService(UrlShortenerService):
    """
    Core business logic for URL shortening.

    Handles URL validation, token generation and lookups.
    Separated from API layer for testability and maintainability.
    """

    def __init__(self, repository: UrlRepository):
        """
        Initialize the URL shortening service.

        Args:
            repository: Store that holds token -> URL mappings
        """
        self.repository = repository

    def shorten(self, original_url: Optional[str]) -> str:
        """
        Create a new short URL for original_url.

        Args:
            original_url: The long URL to shorten

        Returns:
            The generated token

        Raises:
            InvalidURLError: If the URL is missing or not an absolute http/https URL
        """
        if not is_valid_url(original_url):
            raise InvalidURLError(original_url)

        short_url = generate_short_url()
        self.repository.save_url(short_url, original_url)
        logger.debug(f"Shortened {original_url} -> {short_url}")

        return short_url

    def get_original_url(self, short_url: Optional[str]) -> Optional[str]:
        """
        Retrieve the original URL for a given short URL.

        Args:
            short_url: The token to look up

        Returns:
            The stored URL, or None if the token is unknown

        Raises:
            InvalidShortURLError: If the token is missing or not 22 characters long
        """
        if not is_valid_short_url(short_url):
            raise InvalidShortURLError(short_url)

        return self.repository.get_url(pad_short_url(short_url))
