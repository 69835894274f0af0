"""In-memory inverted index of search results.

The index maps each keyword to the set of results carrying it. Documents are
merged in through an :class:`IndexingStrategy` and the index only ever grows.
Queries are strict AND: a result matches when it carries every query term.
"""

from collections import deque
from typing import (
    Any,
    Callable,
    Deque,
    Dict,
    FrozenSet,
    Optional,
    Protocol,
    Set,
    Tuple,
    Union,
    runtime_checkable,
)

from ..config.logging import get_logger
from .indexing_strategy import IndexingStrategy
from .keyword_extractor import KeywordExtractor
from .search_result import SearchResult

logger = get_logger(__name__)


@runtime_checkable
class KeywordCallback(Protocol):
    """Observer notified of keywords new to the index."""

    def new_keywords_added(self, keywords: FrozenSet[str]) -> None:
        ...


KeywordObserver = Union[KeywordCallback, Callable[[FrozenSet[str]], None]]


class SearchResultIndex:
    """Inverted index answering multi-term AND queries.

    Not thread safe: documents are added and queries run from one execution
    context. Adding a document from inside the keyword callback is queued
    and processed once the current notification returns.
    """

    def __init__(
        self,
        keyword_callback: Optional[KeywordObserver] = None,
        extractor: Optional[KeywordExtractor] = None,
    ):
        """Initialize an empty index.

        Args:
            keyword_callback: Observer told about new keywords after every
                ``add_document`` call
            extractor: Keyword extractor used to normalize query terms
        """
        self._postings: Dict[str, Set[SearchResult]] = {}
        self._keyword_callback: Optional[KeywordObserver] = None
        self._extractor = extractor or KeywordExtractor()
        self._notifying = False
        self._pending: Deque[Tuple[Any, IndexingStrategy]] = deque()
        self.set_keyword_callback(keyword_callback)

    def set_keyword_callback(self, callback: Optional[KeywordObserver]) -> None:
        """Register the observer for vocabulary deltas, replacing any previous one.

        ``callback`` is either an object with ``new_keywords_added`` or a plain
        callable taking the set of new keywords. ``None`` unregisters.
        """
        if callback is not None and not (
            isinstance(callback, KeywordCallback) or callable(callback)
        ):
            raise TypeError(
                "keyword callback must be callable or implement new_keywords_added"
            )
        self._keyword_callback = callback

    @property
    def vocabulary(self) -> FrozenSet[str]:
        """Every keyword present in the index."""
        return frozenset(self._postings)

    def __len__(self) -> int:
        return len(self._postings)

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._postings

    def add_document(self, source: Any, strategy: IndexingStrategy) -> None:
        """Merge every entry ``strategy`` produces for ``source`` into the index.

        The keyword callback is invoked exactly once per call with the
        keywords that were absent before the call, possibly an empty set.
        Exceptions raised by the strategy propagate to the caller.
        """
        if self._notifying:
            logger.debug("Deferring document added during keyword notification")
            self._pending.append((source, strategy))
            return

        try:
            self._merge(source, strategy)
            while self._pending:
                self._merge(*self._pending.popleft())
        finally:
            # A failing strategy drops the documents still queued behind it.
            self._pending.clear()

    def _merge(self, source: Any, strategy: IndexingStrategy) -> None:
        entries = list(strategy.index(source))
        known = frozenset(self._postings)

        touched: Set[str] = set()
        for entry in entries:
            for keyword in entry.keywords:
                self._postings.setdefault(keyword, set()).add(entry.result)
                touched.add(keyword)

        new_keywords = frozenset(touched - known)
        logger.debug(
            "Document indexed",
            strategy=type(strategy).__name__,
            entries=len(entries),
            new_keywords=len(new_keywords),
            vocabulary_size=len(self._postings),
        )
        self._notify(new_keywords)

    def _notify(self, new_keywords: FrozenSet[str]) -> None:
        callback = self._keyword_callback
        if callback is None:
            return

        self._notifying = True
        try:
            if isinstance(callback, KeywordCallback):
                callback.new_keywords_added(new_keywords)
            else:
                callback(new_keywords)
        finally:
            self._notifying = False

    def search(self, query: str) -> Set[SearchResult]:
        """Return the results carrying every term of ``query``.

        Terms are split on whitespace, trimmed of surrounding punctuation and
        lowercased. A term that is not itself a keyword is tokenized like
        indexed text and matches results carrying all of its tokens. An empty
        query, or any unknown term, yields no results.
        """
        terms = [
            fragment.lower()
            for fragment in self._extractor.split(query, strip_punctuation=True)
            if fragment
        ]
        if not terms:
            return set()

        results = self._matching(terms[0])
        for term in terms[1:]:
            if not results:
                break
            results &= self._matching(term)

        logger.debug("Search executed", terms=len(terms), results=len(results))
        return results

    def _matching(self, term: str) -> Set[SearchResult]:
        if term in self._postings:
            return set(self._postings[term])

        tokens = self._extractor.as_set(term)
        if not tokens:
            return set()

        results: Optional[Set[SearchResult]] = None
        for token in tokens:
            postings = self._postings.get(token, set())
            results = set(postings) if results is None else results & postings
        return results
