"""Embedded full-text search over API discovery documents.

Discovery documents are indexed in memory as they load, and free-text
queries return matching services and methods without a server round trip.
"""

__version__ = "0.1.0"
