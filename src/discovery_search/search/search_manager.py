"""Coordinates document loading with search indexing.

The loader reports the directory listing and each discovery document as they
arrive. Every document is indexed once, and registered listeners learn when
all services named by the directory have either loaded or failed.
"""

from typing import Iterable, List, Optional, Protocol, Set, Tuple

from ..config.logging import get_logger
from ..discovery.models import ApiDirectory, ApiService
from .discovery_indexing import (
    DirectoryIndexingStrategy,
    DiscoveryFullTextIndexingStrategy,
)
from .indexing_strategy import IndexingStrategy
from .search_result_index import SearchResultIndex

logger = get_logger(__name__)

ServiceKey = Tuple[str, str]


class SearchReadyCallback(Protocol):
    """Listener told that every expected service has been processed."""

    def search_ready(self) -> None:
        ...


class SearchManager:
    """Feeds loaded documents into a :class:`SearchResultIndex`."""

    def __init__(
        self,
        index: SearchResultIndex,
        service_strategy: Optional[IndexingStrategy[ApiService]] = None,
        directory_strategy: Optional[IndexingStrategy[ApiDirectory]] = None,
        ready_callbacks: Iterable[SearchReadyCallback] = (),
    ):
        self.index = index
        self.service_strategy = service_strategy or DiscoveryFullTextIndexingStrategy()
        self.directory_strategy = directory_strategy or DirectoryIndexingStrategy()
        self.ready_callbacks: List[SearchReadyCallback] = list(ready_callbacks)

        self._expected: Set[ServiceKey] = set()
        self._indexed: Set[ServiceKey] = set()
        self._directory_loaded = False
        self._ready = False

    @property
    def is_ready(self) -> bool:
        return self._ready

    @property
    def pending_services(self) -> Set[ServiceKey]:
        """Services listed by the directory and not yet processed."""
        return set(self._expected)

    def directory_loaded(self, directory: ApiDirectory) -> None:
        """Index the directory and start waiting for the services it lists."""
        if self._directory_loaded:
            logger.warning("Directory already indexed, ignoring reload")
            return

        self._directory_loaded = True
        self.index.add_document(directory, self.directory_strategy)
        self._expected = set(directory.service_keys()) - self._indexed
        logger.info(
            "Directory indexed",
            services=len(directory.items),
            pending=len(self._expected),
        )
        self._check_ready()

    def service_loaded(self, service: ApiService) -> bool:
        """Index a loaded service; returns False if it was already indexed."""
        key = (service.name, service.version)
        if key in self._indexed:
            logger.debug("Service already indexed", service=service.id)
            return False

        self.index.add_document(service, self.service_strategy)
        self._indexed.add(key)
        self._expected.discard(key)
        logger.info("Service indexed", service=service.id, pending=len(self._expected))
        self._check_ready()
        return True

    def service_failed(self, name: str, version: str) -> None:
        """Stop waiting for a service whose document could not be loaded."""
        self._expected.discard((name, version))
        logger.warning("Service not indexed", service=f"{name}:{version}")
        self._check_ready()

    def _check_ready(self) -> None:
        if self._ready or not self._directory_loaded or self._expected:
            return

        self._ready = True
        logger.info("Search ready", services=len(self._indexed))
        for callback in self.ready_callbacks:
            callback.search_ready()
