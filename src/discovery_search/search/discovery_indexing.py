"""Indexing strategies for discovery documents and the API directory."""

from typing import Iterator, Optional, Set

from ..discovery.models import ApiDirectory, ApiMethod, ApiService
from .indexing_strategy import IndexingStrategy
from .keyword_extractor import KeywordExtractor
from .search_entry import SearchEntry
from .search_result import SearchResult


def _identity_keywords(name: str, version: str) -> Set[str]:
    # Name and version are atomic tokens, never re-tokenized.
    return {name.lower(), version.lower()}


class DiscoveryFullTextIndexingStrategy(IndexingStrategy[ApiService]):
    """Indexes a service and each of its methods by their full text.

    The service entry carries the service name, version and description
    keywords. Every method entry carries the owning service's name and
    version, the segments of its dotted identifier together with the whole
    identifier, its description keywords, and the name and description
    keywords of each parameter.
    """

    def __init__(self, extractor: Optional[KeywordExtractor] = None):
        self.extractor = extractor or KeywordExtractor()

    def index(self, source: ApiService) -> Iterator[SearchEntry]:
        service_keywords = _identity_keywords(source.name, source.version)

        yield SearchEntry(
            SearchResult.create_service_result(source),
            service_keywords | self.extractor.as_set(source.description),
        )

        for method in source.all_methods().values():
            yield SearchEntry(
                SearchResult.create_method_result(source, method),
                service_keywords | self.method_keywords(method),
            )

    def method_keywords(self, method: ApiMethod) -> Set[str]:
        """Collect the keywords a method is found under, excluding its service."""
        method_id = method.id.lower()
        keywords = {segment for segment in method_id.split(".") if segment}
        keywords.add(method_id)
        keywords |= self.extractor.as_set(method.description)

        for name, parameter in (method.parameters or {}).items():
            keywords.add(name.lower())
            if parameter.description is not None:
                keywords |= self.extractor.as_set(parameter.description)

        return keywords


class DirectoryIndexingStrategy(IndexingStrategy[ApiDirectory]):
    """Indexes directory entries so services are found before they load."""

    def __init__(self, extractor: Optional[KeywordExtractor] = None):
        self.extractor = extractor or KeywordExtractor()

    def index(self, source: ApiDirectory) -> Iterator[SearchEntry]:
        for definition in source.items:
            keywords = _identity_keywords(definition.name, definition.version)
            keywords |= self.extractor.as_set(definition.title)
            keywords |= self.extractor.as_set(definition.description)
            yield SearchEntry(SearchResult.create_service_result(definition), keywords)
