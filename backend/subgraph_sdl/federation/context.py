"""
Federation version and link namespace of a schema
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from graphql import GraphQLSchema

from ..core.config import DEFAULT_LINK_NAMESPACE, get_settings, parse_major_version


# Key under which a schema's ``extensions`` may hold its FederationContext
FEDERATION_CONTEXT_EXTENSION = "federation"


@dataclass(frozen=True)
class FederationContext:
    """Federation settings a print pass runs under"""

    version: str = "1"
    link_namespace: str = DEFAULT_LINK_NAMESPACE

    def __post_init__(self):
        object.__setattr__(self, "version", str(self.version))
        # raises InvalidFederationVersionError
        parse_major_version(self.version)

    @property
    def major_version(self) -> int:
        return parse_major_version(self.version)

    @property
    def is_federation_v2(self) -> bool:
        return self.major_version == 2

    @property
    def spec_version(self) -> str:
        """Version as it appears in the federation spec URL, e.g. ``2.0``"""
        if "." in self.version:
            return self.version
        return f"{self.version}.0"

    @classmethod
    def from_settings(cls) -> "FederationContext":
        settings = get_settings()
        return cls(version=settings.federation_version, link_namespace=settings.link_namespace)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FederationContext":
        return cls(
            version=str(data.get("version", "1")),
            link_namespace=data.get("link_namespace", DEFAULT_LINK_NAMESPACE),
        )

    @classmethod
    def of(cls, schema: GraphQLSchema) -> "FederationContext":
        """Context stored on the schema, falling back to settings"""
        stored: Optional[Any] = (schema.extensions or {}).get(FEDERATION_CONTEXT_EXTENSION)
        if isinstance(stored, FederationContext):
            return stored
        if isinstance(stored, Mapping):
            return cls.from_mapping(stored)
        return cls.from_settings()
