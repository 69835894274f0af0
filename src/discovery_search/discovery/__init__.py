"""Discovery document model and loading."""

from .loader import load_directory, load_service, parse_directory, parse_service
from .models import (
    ApiDirectory,
    ApiMethod,
    ApiParameter,
    ApiResource,
    ApiService,
    ServiceDefinition,
)

__all__ = [
    "ApiDirectory",
    "ApiMethod",
    "ApiParameter",
    "ApiResource",
    "ApiService",
    "ServiceDefinition",
    "load_directory",
    "load_service",
    "parse_directory",
    "parse_service",
]
