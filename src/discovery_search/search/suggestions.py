"""Keyword completion for queries being typed."""

import bisect
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional

from .keyword_extractor import KeywordExtractor


@dataclass(frozen=True)
class Suggestion:
    """A completion offered for a partially typed query."""

    display: str
    replacement: str


class KeywordCompletionSuggestOracle:
    """Completes the last word of a query from the indexed vocabulary.

    Register an oracle as the keyword callback of a
    :class:`SearchResultIndex` and it learns every keyword as documents are
    indexed. Completion is a typing aid only; index lookups stay exact.
    """

    def __init__(
        self,
        keywords: Iterable[str] = (),
        extractor: Optional[KeywordExtractor] = None,
    ):
        self._extractor = extractor or KeywordExtractor()
        self._keywords: List[str] = sorted(set(keywords))

    def new_keywords_added(self, keywords: FrozenSet[str]) -> None:
        """Learn keywords newly added to the index."""
        fresh = set(keywords).difference(self._keywords)
        if fresh:
            self._keywords = sorted(fresh.union(self._keywords))

    @property
    def keywords(self) -> List[str]:
        return list(self._keywords)

    def complete(self, prefix: str, limit: int = 10) -> List[str]:
        """Return up to ``limit`` known keywords starting with ``prefix``."""
        prefix = prefix.lower()
        start = bisect.bisect_left(self._keywords, prefix)

        matches = []
        for keyword in self._keywords[start:]:
            if not keyword.startswith(prefix) or len(matches) >= limit:
                break
            matches.append(keyword)
        return matches

    def suggest(self, query: str, limit: int = 10) -> List[Suggestion]:
        """Suggest completions for the last word of ``query``.

        A query ending in whitespace has no word in progress and gets no
        suggestions. Earlier words are kept exactly as typed.
        """
        fragments = self._extractor.split(query, strip_punctuation=False)
        if not fragments:
            return []

        last = self._extractor.strip_punctuation(fragments[-1])
        if not last:
            return []

        head = " ".join(fragment for fragment in fragments[:-1] if fragment)
        suggestions = []
        for keyword in self.complete(last, limit):
            replacement = f"{head} {keyword}" if head else keyword
            suggestions.append(Suggestion(display=keyword, replacement=replacement))
        return suggestions
