"""Search results: references to the entities a query can match."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class SearchResultKind(str, Enum):
    """What a search result refers to."""

    SERVICE = "service"
    METHOD = "method"


@dataclass(frozen=True, eq=False)
class SearchResult:
    """An immutable reference to a matched service or method.

    Results compare by identity: extracting the same service twice yields
    two distinct results. ``service`` is any object exposing ``name`` and
    ``version`` (a loaded discovery document or a directory entry); ``method``
    is set only for METHOD results.
    """

    kind: SearchResultKind
    service: Any
    method: Optional[Any] = None

    @classmethod
    def create_service_result(cls, service: Any) -> "SearchResult":
        return cls(kind=SearchResultKind.SERVICE, service=service)

    @classmethod
    def create_method_result(cls, service: Any, method: Any) -> "SearchResult":
        if service is None:
            raise ValueError("A method result requires its owning service")
        return cls(kind=SearchResultKind.METHOD, service=service, method=method)

    @property
    def result_id(self) -> str:
        """Stable identifier, ``name:version`` with ``:methodId`` for methods."""
        base = f"{self.service.name}:{self.service.version}"
        if self.kind is SearchResultKind.METHOD:
            return f"{base}:{self.method.id}"
        return base

    @property
    def label(self) -> str:
        """Short human readable label for rendering."""
        if self.kind is SearchResultKind.METHOD:
            return self.method.id
        return f"{self.service.name} {self.service.version}"

    def __repr__(self) -> str:
        return f"SearchResult({self.kind.value}, {self.result_id!r})"
