"""Unit tests for loading discovery documents."""

import pytest
import yaml

from discovery_search.discovery.loader import (
    load_directory,
    load_service,
    parse_directory,
    parse_service,
)
from discovery_search.exceptions import DiscoveryDocumentError, DiscoverySearchError


class TestLoadService:
    """Test cases for loading services from disk."""

    def test_load_json(self, discovery_file):
        """Test loading a JSON discovery document."""
        service = load_service(discovery_file)

        assert service.name == "urlshortener"
        assert len(service.all_methods()) == 3

    def test_load_yaml(self, tmp_path, sample_discovery_document):
        """Test loading a YAML discovery document."""
        path = tmp_path / "urlshortener.yaml"
        path.write_text(yaml.safe_dump(sample_discovery_document), encoding="utf-8")

        service = load_service(str(path))

        assert service.id == "urlshortener:v1"

    def test_missing_file(self, tmp_path):
        """Test unreadable files raise a document error."""
        missing = tmp_path / "missing.json"

        with pytest.raises(DiscoveryDocumentError) as exc_info:
            load_service(missing)

        assert exc_info.value.path == str(missing)
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_malformed_file(self, tmp_path):
        """Test syntactically broken documents raise a document error."""
        path = tmp_path / "broken.json"
        path.write_text('{"name": "x", "version": [', encoding="utf-8")

        with pytest.raises(DiscoveryDocumentError, match="neither valid JSON nor YAML"):
            load_service(path)

    def test_non_object_root(self, tmp_path):
        """Test documents must be objects."""
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")

        with pytest.raises(DiscoveryDocumentError, match="must be an object"):
            load_service(path)

    def test_invalid_document(self, tmp_path):
        """Test schema violations carry the path and field errors."""
        path = tmp_path / "invalid.json"
        path.write_text('{"name": "x"}', encoding="utf-8")

        with pytest.raises(DiscoveryDocumentError) as exc_info:
            load_service(path)

        error = exc_info.value
        assert isinstance(error, DiscoverySearchError)
        assert error.path == str(path)
        assert error.details["path"] == str(path)
        assert any(msg.startswith("version") for msg in error.details["errors"])
        assert "Invalid discovery document" in str(error)


class TestParse:
    """Test cases for parsing decoded documents."""

    def test_parse_service(self, sample_discovery_document):
        """Test parsing a decoded discovery document."""
        assert parse_service(sample_discovery_document).name == "urlshortener"

    def test_parse_service_invalid(self):
        """Test invalid decoded documents raise a document error."""
        with pytest.raises(DiscoveryDocumentError):
            parse_service({"version": "v1"})

    def test_parse_directory(self, sample_directory_document):
        """Test parsing a decoded directory listing."""
        directory = parse_directory(sample_directory_document)
        assert [item.name for item in directory.items] == ["urlshortener", "calendar"]

    def test_parse_directory_invalid(self):
        """Test directory items must have a name and version."""
        with pytest.raises(DiscoveryDocumentError):
            parse_directory({"items": [{"title": "nameless"}]})

    def test_load_directory(self, directory_file):
        """Test loading a directory listing from disk."""
        directory = load_directory(directory_file)
        assert len(directory.items) == 2
