"""Configuration-related exceptions."""

from typing import Any, Dict, Optional

from ..exceptions import DiscoverySearchError


class ConfigurationError(DiscoverySearchError):
    """Configuration-related error with user-friendly messages."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize configuration error with message and optional details."""
        super().__init__(message, details)
