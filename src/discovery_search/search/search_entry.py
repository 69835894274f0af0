"""Association of one search result with its keywords."""

from dataclasses import dataclass
from typing import FrozenSet, Iterable

from .search_result import SearchResult


@dataclass(frozen=True)
class SearchEntry:
    """A search result and the keywords under which it should be found."""

    result: SearchResult
    keywords: FrozenSet[str]

    def __post_init__(self) -> None:
        if not isinstance(self.keywords, frozenset):
            object.__setattr__(self, "keywords", frozenset(self.keywords))

    def with_additional_keywords(self, keywords: Iterable[str]) -> "SearchEntry":
        """Return a new entry with ``keywords`` merged into this entry's set."""
        return SearchEntry(self.result, self.keywords.union(keywords))
