"""Package-wide exception hierarchy."""

from typing import Any, Dict, Optional


class DiscoverySearchError(Exception):
    """Base exception for discovery search errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with message and optional details."""
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return formatted error message with details if available."""
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class DiscoveryDocumentError(DiscoverySearchError):
    """Raised when a discovery or directory document cannot be loaded."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize document error.

        Args:
            message: Human-readable error message
            path: Path of the document that failed, if read from disk
            details: Additional error context
        """
        details = dict(details or {})
        if path is not None:
            details["path"] = path
        self.path = path
        super().__init__(message, details)
