"""Pytest configuration and shared fixtures."""

import json
from pathlib import Path
from typing import Any, Dict

import pytest
from faker import Faker

from discovery_search.discovery.models import ApiDirectory, ApiService


@pytest.fixture
def faker_instance() -> Faker:
    """Provide a seeded Faker so generated text is reproducible."""
    generator = Faker()
    generator.seed_instance(1234)
    return generator


@pytest.fixture
def sample_discovery_document() -> Dict[str, Any]:
    """Provide a small REST discovery document with nested resources."""
    return {
        "kind": "discovery#restDescription",
        "name": "urlshortener",
        "version": "v1",
        "title": "URL Shortener API",
        "description": "Lets you create, inspect, and manage goo.gl short URLs",
        "documentationLink": "https://developers.google.com/url-shortener/v1/",
        "protocol": "rest",
        "basePath": "/urlshortener/v1/",
        "parameters": {
            "fields": {
                "type": "string",
                "description": "Selector specifying which fields to include",
                "location": "query",
            }
        },
        "resources": {
            "url": {
                "methods": {
                    "get": {
                        "id": "urlshortener.url.get",
                        "path": "url",
                        "httpMethod": "GET",
                        "description": "Expands a short URL or gets creation time and analytics.",
                        "parameters": {
                            "shortUrl": {
                                "type": "string",
                                "description": "The short URL, including the protocol.",
                                "required": True,
                                "location": "query",
                            },
                            "projection": {
                                "type": "string",
                                "enum": ["ANALYTICS_CLICKS", "FULL"],
                                "location": "query",
                            },
                        },
                        "parameterOrder": ["shortUrl"],
                    },
                    "insert": {
                        "id": "urlshortener.url.insert",
                        "path": "url",
                        "httpMethod": "POST",
                        "description": "Creates a new short URL.",
                    },
                    "list": {
                        "id": "urlshortener.url.list",
                        "path": "url/history",
                        "httpMethod": "GET",
                        "description": "Retrieves a list of URLs shortened by a user.",
                        "parameters": {
                            "start-token": {
                                "type": "string",
                                "description": "Token for requesting successive pages of results.",
                                "location": "query",
                            }
                        },
                    },
                }
            }
        },
    }


@pytest.fixture
def sample_service(sample_discovery_document) -> ApiService:
    """Provide the sample discovery document as a parsed service."""
    return ApiService.model_validate(sample_discovery_document)


@pytest.fixture
def second_service() -> ApiService:
    """Provide a second, unrelated service."""
    document = {
        "name": "calendar",
        "version": "v3",
        "title": "Calendar API",
        "description": "Lets you manipulate events and other calendar data.",
        "resources": {
            "events": {
                "methods": {
                    "insert": {
                        "id": "calendar.events.insert",
                        "httpMethod": "POST",
                        "description": "Creates an event.",
                        "parameters": {
                            "calendarId": {
                                "type": "string",
                                "description": "Calendar identifier.",
                                "required": True,
                                "location": "path",
                            },
                            "sendNotifications": {
                                "type": "boolean",
                                "location": "query",
                            },
                        },
                    },
                },
                "resources": {
                    "reminders": {
                        "methods": {
                            "list": {
                                "id": "calendar.events.reminders.list",
                                "httpMethod": "GET",
                                "description": "Lists reminders of an event.",
                            }
                        }
                    }
                },
            }
        },
    }
    return ApiService.model_validate(document)


@pytest.fixture
def sample_directory_document() -> Dict[str, Any]:
    """Provide a directory listing naming the two sample services."""
    return {
        "kind": "discovery#directoryList",
        "items": [
            {
                "id": "urlshortener:v1",
                "name": "urlshortener",
                "version": "v1",
                "title": "URL Shortener API",
                "description": "Lets you create, inspect, and manage goo.gl short URLs",
                "discoveryRestUrl": "https://www.googleapis.com/discovery/v1/apis/urlshortener/v1/rest",
                "labels": ["labs"],
                "preferred": True,
            },
            {
                "id": "calendar:v3",
                "name": "calendar",
                "version": "v3",
                "title": "Calendar API",
                "description": None,
                "preferred": True,
            },
        ],
    }


@pytest.fixture
def sample_directory(sample_directory_document) -> ApiDirectory:
    return ApiDirectory.model_validate(sample_directory_document)


@pytest.fixture
def discovery_file(tmp_path, sample_discovery_document) -> Path:
    """Write the sample discovery document to a JSON file."""
    path = tmp_path / "urlshortener.json"
    path.write_text(json.dumps(sample_discovery_document), encoding="utf-8")
    return path


@pytest.fixture
def directory_file(tmp_path, sample_directory_document) -> Path:
    """Write the sample directory listing to a JSON file."""
    path = tmp_path / "directory.json"
    path.write_text(json.dumps(sample_directory_document), encoding="utf-8")
    return path
