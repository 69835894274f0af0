"""Full-text search over API discovery documents.

Main components:
- KeywordExtractor: text to normalized keywords
- SearchResult / SearchEntry: what matched and under which keywords
- IndexingStrategy: document to search entries
- DiscoveryFullTextIndexingStrategy: entries for services and their methods
- SearchResultIndex: inverted index with AND queries and vocabulary deltas
- KeywordCompletionSuggestOracle: completion of partially typed queries
- SearchManager: loading and indexing coordination
"""

from .discovery_indexing import (
    DirectoryIndexingStrategy,
    DiscoveryFullTextIndexingStrategy,
)
from .indexing_strategy import IndexingStrategy
from .keyword_extractor import KeywordExtractor
from .search_entry import SearchEntry
from .search_manager import SearchManager, SearchReadyCallback
from .search_result import SearchResult, SearchResultKind
from .search_result_index import KeywordCallback, SearchResultIndex
from .suggestions import KeywordCompletionSuggestOracle, Suggestion

__all__ = [
    "DirectoryIndexingStrategy",
    "DiscoveryFullTextIndexingStrategy",
    "IndexingStrategy",
    "KeywordCallback",
    "KeywordCompletionSuggestOracle",
    "KeywordExtractor",
    "SearchEntry",
    "SearchManager",
    "SearchReadyCallback",
    "SearchResult",
    "SearchResultIndex",
    "SearchResultKind",
    "Suggestion",
]
