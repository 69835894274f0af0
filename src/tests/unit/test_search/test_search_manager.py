"""Unit tests for loading and indexing coordination."""

from unittest.mock import Mock

from discovery_search.search.search_manager import SearchManager
from discovery_search.search.search_result import SearchResultKind
from discovery_search.search.search_result_index import SearchResultIndex


class TestSearchManager:
    """Test cases for SearchManager."""

    def setup_method(self):
        """Set up test fixtures."""
        self.index = SearchResultIndex()
        self.ready = Mock()
        self.manager = SearchManager(self.index, ready_callbacks=[self.ready])

    def test_directory_makes_services_searchable(self, sample_directory):
        """Test directory entries are indexed before documents load."""
        self.manager.directory_loaded(sample_directory)

        results = self.index.search("calendar")
        assert len(results) == 1
        result = results.pop()
        assert result.kind is SearchResultKind.SERVICE
        assert result.service.name == "calendar"
        assert self.manager.pending_services == {("urlshortener", "v1"), ("calendar", "v3")}

    def test_ready_after_all_services_load(
        self, sample_directory, sample_service, second_service
    ):
        """Test listeners hear once every listed service has been indexed."""
        self.manager.directory_loaded(sample_directory)
        self.manager.service_loaded(sample_service)
        self.ready.search_ready.assert_not_called()
        assert not self.manager.is_ready

        self.manager.service_loaded(second_service)

        self.ready.search_ready.assert_called_once_with()
        assert self.manager.is_ready
        assert self.manager.pending_services == set()

    def test_failed_service_counts_as_processed(self, sample_directory, sample_service):
        """Test failures do not block readiness."""
        self.manager.directory_loaded(sample_directory)
        self.manager.service_loaded(sample_service)
        self.manager.service_failed("calendar", "v3")

        self.ready.search_ready.assert_called_once_with()
        assert self.index.search("events") == set()

    def test_ready_fires_once(self, sample_directory, sample_service, second_service):
        """Test later loads do not notify listeners again."""
        self.manager.directory_loaded(sample_directory)
        self.manager.service_loaded(sample_service)
        self.manager.service_loaded(second_service)
        self.manager.service_failed("other", "v1")

        self.ready.search_ready.assert_called_once_with()

    def test_service_indexed_once(self, sample_service):
        """Test reloading an indexed service is ignored."""
        assert self.manager.service_loaded(sample_service) is True
        assert self.manager.service_loaded(sample_service) is False

        assert len(self.index.search("urlshortener.url.get")) == 1

    def test_services_before_directory(
        self, sample_directory, sample_service, second_service
    ):
        """Test services loaded ahead of the directory are not awaited."""
        self.manager.service_loaded(sample_service)
        self.manager.service_loaded(second_service)
        self.ready.search_ready.assert_not_called()

        self.manager.directory_loaded(sample_directory)

        self.ready.search_ready.assert_called_once_with()

    def test_directory_reload_ignored(self, sample_directory):
        """Test the directory is indexed only once."""
        self.manager.directory_loaded(sample_directory)
        self.manager.directory_loaded(sample_directory)

        assert len(self.index.search("calendar")) == 1

    def test_loaded_methods_are_searchable(self, sample_service):
        """Test method entries of a loaded service answer queries."""
        self.manager.service_loaded(sample_service)

        results = self.index.search("short url")
        assert {r.result_id for r in results} == {
            "urlshortener:v1:urlshortener.url.get",
            "urlshortener:v1:urlshortener.url.insert",
        }
