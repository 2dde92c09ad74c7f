"""
Pytest configuration and shared schema fixtures for subgraph SDL tests.
"""

import pytest
from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLID,
    GraphQLInt,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLSchema,
    GraphQLString,
    GraphQLUnionType,
)

from subgraph_sdl.core.config import get_settings
from subgraph_sdl.federation import FederationContext, directive, federation_extensions


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Settings are read from a clean environment for every test."""
    for name in ("FEDERATION_VERSION", "LINK_NAMESPACE", "LOG_LEVEL"):
        monkeypatch.delenv(f"SUBGRAPH_SDL_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def v1_context():
    return FederationContext(version="1")


@pytest.fixture
def v2_context():
    return FederationContext(version="2")


@pytest.fixture
def federation_scaffolding():
    """The types a federation-capable schema adds for the gateway."""
    any_scalar = GraphQLScalarType("_Any")
    service_type = GraphQLObjectType("_Service", {"sdl": GraphQLField(GraphQLString)})
    return {"_Any": any_scalar, "_Service": service_type}


@pytest.fixture
def product_type():
    node = GraphQLInterfaceType(
        "Node",
        {"id": GraphQLField(GraphQLNonNull(GraphQLID))},
        extensions=federation_extensions(directive("key", fields="id")),
    )
    return GraphQLObjectType(
        "Product",
        {
            "id": GraphQLField(GraphQLNonNull(GraphQLID)),
            "name": GraphQLField(
                GraphQLString,
                extensions=federation_extensions(directive("shareable")),
            ),
            "price": GraphQLField(
                GraphQLInt,
                extensions=federation_extensions(
                    directive("inaccessible"),
                    directive("tag", name="v1"),
                ),
            ),
        },
        interfaces=[node],
        description="A product",
        extensions=federation_extensions(directive("key", fields="id")),
    )


@pytest.fixture
def product_schema(product_type, federation_scaffolding):
    """Subgraph schema: one entity, a real query field and federation scaffolding."""
    entity_union = GraphQLUnionType("_Entity", [product_type])
    query = GraphQLObjectType(
        "Query",
        {
            "product": GraphQLField(
                product_type, args={"id": GraphQLArgument(GraphQLNonNull(GraphQLID))}
            ),
            "_entities": GraphQLField(
                GraphQLNonNull(GraphQLList(entity_union)),
                args={
                    "representations": GraphQLArgument(
                        GraphQLNonNull(
                            GraphQLList(GraphQLNonNull(federation_scaffolding["_Any"]))
                        )
                    )
                },
            ),
            "_service": GraphQLField(GraphQLNonNull(federation_scaffolding["_Service"])),
        },
    )
    return GraphQLSchema(
        query=query,
        types=[product_type, entity_union, *federation_scaffolding.values()],
    )


@pytest.fixture
def scaffolding_only_schema(product_type, federation_scaffolding):
    """Schema whose query root exposes nothing but federation fields."""
    query = GraphQLObjectType(
        "Query",
        {"_service": GraphQLField(GraphQLNonNull(federation_scaffolding["_Service"]))},
    )
    return GraphQLSchema(
        query=query,
        types=[product_type, *federation_scaffolding.values()],
    )
