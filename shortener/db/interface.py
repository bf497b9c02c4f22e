"""
URL Repository Interface

This module defines the storage abstraction the shortening service talks to.
The service only needs two operations, save and lookup by exact token, so
any key-value backend can sit behind it by implementing this interface.
"""

from abc import ABC, abstractmethod
from typing import Optional


class UrlRepository(ABC):
    """
    Abstract base class for short URL stores.

    Implementations map a short URL token to the original URL with
    last-write-wins semantics and no expiry.
    """

    @abstractmethod
    def save_url(self, short_url: str, original_url: str) -> None:
        """
        Insert or overwrite the mapping for short_url.

        Args:
            short_url: Token key
            original_url: URL to store under the token
        """
        pass

    @abstractmethod
    def get_url(self, short_url: str) -> Optional[str]:
        """
        Look up the original URL for an exact-match token.

        Args:
            short_url: Token key

        Returns:
            The stored URL, or None when nothing is stored under the token
        """
        pass
