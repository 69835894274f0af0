"""Models for API discovery documents and the API directory listing.

Discovery documents describe one version of one API service: its methods,
grouped into (possibly nested) resources, and each method's parameters.
Field names follow the discovery format (camelCase) through aliases.
"""

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class DiscoveryModel(BaseModel):
    """Base model: camelCase aliases, unknown keys ignored, immutable."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class ApiParameter(DiscoveryModel):
    """A method or service level parameter."""

    type: Optional[str] = Field(None, description="Parameter type")
    description: Optional[str] = Field(None, description="Parameter description")
    location: Optional[str] = Field(
        None, description="Where the parameter is sent (path, query)"
    )
    required: bool = Field(default=False, description="Whether parameter is required")
    repeated: bool = Field(default=False, description="Whether parameter repeats")
    default: Optional[str] = Field(None, description="Default value")
    enum: Optional[List[str]] = Field(None, description="Allowed values")
    format: Optional[str] = Field(None, description="Value format")
    pattern: Optional[str] = Field(None, description="Regex pattern")


class ApiMethod(DiscoveryModel):
    """A single callable method of an API service."""

    id: str = Field(..., description="Dotted method identifier")
    path: Optional[str] = Field(None, description="REST path template")
    http_method: Optional[str] = Field(
        None, alias="httpMethod", description="HTTP verb"
    )
    description: Optional[str] = Field(None, description="Method description")
    parameters: Optional[Dict[str, ApiParameter]] = Field(
        None, description="Parameters keyed by name"
    )
    parameter_order: List[str] = Field(
        default_factory=list, alias="parameterOrder", description="Positional order"
    )
    scopes: List[str] = Field(default_factory=list, description="OAuth scopes")

    # Compared by identity, two methods with identical content stay distinct.
    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)


class ApiResource(DiscoveryModel):
    """A named group of methods, possibly containing nested resources."""

    methods: Dict[str, ApiMethod] = Field(default_factory=dict)
    resources: Dict[str, "ApiResource"] = Field(default_factory=dict)

    def collect_methods(self, into: Dict[str, ApiMethod]) -> None:
        """Add every method of this resource and its sub-resources to ``into``."""
        for method in self.methods.values():
            into[method.id] = method
        for resource in self.resources.values():
            resource.collect_methods(into)


class ApiService(ApiResource):
    """A loaded discovery document for one version of one service."""

    name: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    title: Optional[str] = Field(None, description="Human readable title")
    description: Optional[str] = Field(None, description="Service description")
    documentation_link: Optional[str] = Field(None, alias="documentationLink")
    protocol: str = Field(default="rest", description="Discovery protocol")
    root_url: Optional[str] = Field(None, alias="rootUrl")
    base_path: Optional[str] = Field(None, alias="basePath")
    service_path: Optional[str] = Field(None, alias="servicePath")
    parameters: Dict[str, ApiParameter] = Field(
        default_factory=dict, description="Parameters common to every method"
    )
    labels: List[str] = Field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    @property
    def id(self) -> str:
        """Name and version joined into a unique identifier."""
        return f"{self.name}:{self.version}"

    def display_title(self) -> str:
        return self.title or self.name

    def all_methods(self) -> Dict[str, ApiMethod]:
        """Return every method in the service keyed by its dotted identifier."""
        methods: Dict[str, ApiMethod] = {}
        self.collect_methods(methods)
        return methods


class ServiceDefinition(DiscoveryModel):
    """One version of a service as listed by the API directory."""

    id: Optional[str] = Field(None, description="Name and version as one id")
    name: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    title: Optional[str] = Field(None, description="Formatted title")
    description: Optional[str] = Field(None, description="Service description")
    discovery_link: Optional[str] = Field(None, alias="discoveryRestUrl")
    documentation_link: Optional[str] = Field(None, alias="documentationLink")
    labels: List[str] = Field(default_factory=list, description="Status labels")
    preferred: bool = Field(default=False)

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def display_title(self) -> str:
        return self.title or self.name


class ApiDirectory(DiscoveryModel):
    """The directory listing of available services."""

    items: List[ServiceDefinition] = Field(default_factory=list)

    def service_keys(self) -> List[Tuple[str, str]]:
        """Return ``(name, version)`` for every listed service."""
        return [(item.name, item.version) for item in self.items]
