"""Tests for the in-memory URL repository."""

from concurrent.futures import ThreadPoolExecutor

from shortener.db import InMemoryUrlRepository, UrlRepository, get_repository


SHORT_URL = "testShortUrl"
ORIGINAL_URL = "https://test.com"


class TestInMemoryUrlRepository:
    """Save/get semantics of the dict-backed repository."""

    def test_save_url_then_get_url(self, repository):
        repository.save_url(SHORT_URL, ORIGINAL_URL)

        assert repository.get_url(SHORT_URL) == ORIGINAL_URL

    def test_get_url_unknown_key_returns_none(self, repository):
        assert repository.get_url("xyz789") is None

    def test_get_url_empty_key_returns_none(self, repository):
        assert repository.get_url("") is None

    def test_duplicate_key_overwrites(self, repository):
        """Last write wins for the same token."""
        repository.save_url(SHORT_URL, ORIGINAL_URL)
        repository.save_url(SHORT_URL, "http://test.lt")

        assert repository.get_url(SHORT_URL) == "http://test.lt"
        assert len(repository) == 1

    def test_empty_key_is_stored(self, repository):
        repository.save_url("", ORIGINAL_URL)

        assert repository.get_url("") == ORIGINAL_URL

    def test_empty_value_is_stored(self, repository):
        repository.save_url(SHORT_URL, "")

        assert repository.get_url(SHORT_URL) == ""
        assert SHORT_URL in repository

    def test_special_characters_round_trip(self, repository):
        original_url = "http://test.com/?param=value&key=123#section"
        repository.save_url(SHORT_URL, original_url)

        assert repository.get_url(SHORT_URL) == original_url

    def test_lookup_is_exact_match(self, repository):
        repository.save_url(SHORT_URL, ORIGINAL_URL)

        assert repository.get_url(SHORT_URL.lower()) is None
        assert repository.get_url(SHORT_URL + "=") is None

    def test_len_and_contains(self, repository):
        assert len(repository) == 0
        assert SHORT_URL not in repository

        repository.save_url(SHORT_URL, ORIGINAL_URL)

        assert len(repository) == 1
        assert SHORT_URL in repository

    def test_get_repository_returns_fresh_in_memory_repository(self):
        first = get_repository()
        second = get_repository()

        assert isinstance(first, InMemoryUrlRepository)
        assert isinstance(first, UrlRepository)
        first.save_url(SHORT_URL, ORIGINAL_URL)
        assert second.get_url(SHORT_URL) is None


class TestConcurrentAccess:
    """The repository is shared by requests served from many threads."""

    def test_concurrent_writers_keep_every_entry(self, repository):
        count = 2000

        def save(i):
            repository.save_url(f"key-{i}", f"https://example.com/{i}")

        with ThreadPoolExecutor(max_workers=16) as executor:
            list(executor.map(save, range(count)))

        assert len(repository) == count
        for i in range(count):
            assert repository.get_url(f"key-{i}") == f"https://example.com/{i}"

    def test_concurrent_readers_and_writers(self, repository):
        repository.save_url(SHORT_URL, ORIGINAL_URL)

        def work(i):
            repository.save_url(f"key-{i}", ORIGINAL_URL)
            return repository.get_url(SHORT_URL)

        with ThreadPoolExecutor(max_workers=16) as executor:
            results = list(executor.map(work, range(500)))

        assert results == [ORIGINAL_URL] * 500
        assert len(repository) == 501
