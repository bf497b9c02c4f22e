"""
In-Memory Repository

This module implements the UrlRepository interface on top of a dict.

Characteristics:
- Mappings live for the lifetime of the process (nothing is persisted)
- No capacity bound, eviction or TTL
- Safe to share between threads: one lock guards every read and write
"""

import threading
from typing import Dict, Optional

from shortener.db.interface import UrlRepository


class InMemoryUrlRepository(UrlRepository):
    """
    Dictionary-backed repository guarded by a mutex.

    Requests served from the ASGI threadpool can hit save_url and get_url
    at the same time, so the mapping is never touched without holding _lock.
    """

    def __init__(self):
        self._urls: Dict[str, str] = {}
        self._lock = threading.Lock()

    def save_url(self, short_url: str, original_url: str) -> None:
        with self._lock:
            self._urls[short_url] = original_url

    def get_url(self, short_url: str) -> Optional[str]:
        with self._lock:
            return self._urls.get(short_url)

    def __len__(self) -> int:
        with self._lock:
            return len(self._urls)

    def __contains__(self, short_url: object) -> bool:
        with self._lock:
            return short_url in self._urls


def get_repository() -> UrlRepository:
    """
    Factory function for the repository used by the application.

    Returns:
        A new, empty InMemoryUrlRepository
    """
    return InMemoryUrlRepository()
