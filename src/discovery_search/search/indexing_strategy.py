"""Pluggable extraction of search entries from domain documents."""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, TypeVar

from .search_entry import SearchEntry

T = TypeVar("T")


class IndexingStrategy(ABC, Generic[T]):
    """Turns a source document into the entries that make it searchable.

    Implementations must not mutate the source and must enumerate the same
    logical entries for the same content every time. The returned iterable is
    consumed once per :meth:`SearchResultIndex.add_document` call.
    """

    @abstractmethod
    def index(self, source: T) -> Iterable[SearchEntry]:
        """Enumerate search entries for ``source``."""
