"""Loading discovery and directory documents from disk.

Documents may be JSON or YAML; both are read with ``yaml.safe_load``. Every
failure surfaces as :class:`DiscoveryDocumentError` so callers only skip the
failed document and never hand a partial one to the search index.
"""

from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import ValidationError

from ..config.logging import get_logger
from ..exceptions import DiscoveryDocumentError
from .models import ApiDirectory, ApiService

logger = get_logger(__name__)


def _read_document(path: Union[str, Path]) -> Dict[str, Any]:
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        logger.error("Discovery document unreadable", path=str(path), error=str(e))
        raise DiscoveryDocumentError(
            f"Cannot read document: {e.strerror or e}", path=str(path)
        ) from e
    except yaml.YAMLError as e:
        logger.error("Discovery document malformed", path=str(path), error=str(e))
        raise DiscoveryDocumentError(
            "Document is neither valid JSON nor YAML",
            path=str(path),
            details={"error": str(e)},
        ) from e

    if not isinstance(data, dict):
        raise DiscoveryDocumentError(
            "Document root must be an object", path=str(path)
        )
    return data


def _validation_details(error: ValidationError) -> Dict[str, Any]:
    return {
        "errors": [
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in error.errors()
        ]
    }


def parse_service(data: Dict[str, Any]) -> ApiService:
    """Build an :class:`ApiService` from a decoded discovery document."""
    try:
        return ApiService.model_validate(data)
    except ValidationError as e:
        raise DiscoveryDocumentError(
            "Invalid discovery document", details=_validation_details(e)
        ) from e


def parse_directory(data: Dict[str, Any]) -> ApiDirectory:
    """Build an :class:`ApiDirectory` from a decoded directory listing."""
    try:
        return ApiDirectory.model_validate(data)
    except ValidationError as e:
        raise DiscoveryDocumentError(
            "Invalid directory document", details=_validation_details(e)
        ) from e


def load_service(path: Union[str, Path]) -> ApiService:
    """Load one discovery document from ``path``."""
    data = _read_document(path)
    try:
        service = parse_service(data)
    except DiscoveryDocumentError as e:
        e.path = str(path)
        e.details["path"] = str(path)
        raise

    logger.info(
        "Discovery document loaded",
        path=str(path),
        service=service.id,
        methods=len(service.all_methods()),
    )
    return service


def load_directory(path: Union[str, Path]) -> ApiDirectory:
    """Load an API directory listing from ``path``."""
    data = _read_document(path)
    try:
        directory = parse_directory(data)
    except DiscoveryDocumentError as e:
        e.path = str(path)
        e.details["path"] = str(path)
        raise

    logger.info("Directory loaded", path=str(path), services=len(directory.items))
    return directory
