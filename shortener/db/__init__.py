"""
Storage module with abstraction layer.

This module provides:
- UrlRepository interface: Abstract base class for token -> URL stores
- InMemoryUrlRepository: Dict-backed, lock-guarded implementation (default)

To add a new storage backend:
1. Create a new class inheriting from UrlRepository
2. Implement save_url and get_url
3. Update get_repository() in memory_adapter.py to return the new repository
"""

from shortener.db.interface import UrlRepository
from shortener.db.memory_adapter import InMemoryUrlRepository, get_repository

__all__ = [
    "UrlRepository",
    "InMemoryUrlRepository",
    "get_repository",
]
