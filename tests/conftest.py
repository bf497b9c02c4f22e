"""Pytest configuration and fixtures."""

from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from shortener.core.setting import settings
from shortener.db import InMemoryUrlRepository
from shortener.db.interface import UrlRepository
from shortener.main import create_app
from shortener.services.url_service import URLShorteningService, UrlShortenerService


@pytest.fixture
def service_root():
    """Path prefix the API router is mounted under."""
    return settings.SERVICE_ROOT


@pytest.fixture
def repository():
    """Fresh in-memory repository."""
    return InMemoryUrlRepository()


@pytest.fixture
def repository_mock():
    """Repository test double that records calls."""
    return Mock(spec=UrlRepository)


@pytest.fixture
def service(repository):
    """Service backed by a real in-memory repository."""
    return URLShorteningService(repository)


@pytest.fixture
def service_mock():
    """Service test double for endpoint tests."""
    return Mock(spec=UrlShortenerService)


@pytest.fixture
def app(service):
    """Application wired to the real service."""
    return create_app(service=service)


@pytest.fixture
def client(app):
    """Synchronous test client for the real application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def mocked_client(service_mock):
    """Test client for an application whose service is a Mock."""
    with TestClient(create_app(service=service_mock)) as test_client:
        yield test_client
