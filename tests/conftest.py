"""Shared pytest fixtures for vtl-validator tests.

This module provides the structlog test configuration and the schema and
resource fixtures used across unit and contract tests.
"""

from __future__ import annotations

import sys

import pytest
import structlog
from directive_builders import enum_arg, list_arg, scalar_arg, validator

from vtl_validator.compiler.augmenter import InMemoryResourceStore
from vtl_validator.schemas.directive import DirectiveNode, FieldDefinition, TypeDefinition

CREATE_TEMPLATE = '{\n  "version": "2017-02-28",\n  "operation": "PutItem"\n}'
UPDATE_TEMPLATE = '{\n  "version": "2017-02-28",\n  "operation": "UpdateItem"\n}'


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Configure structlog to output to stdout for test capture."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,  # Important for test isolation
    )


@pytest.fixture
def model_directive() -> DirectiveNode:
    """Return the @model marker directive."""
    return DirectiveNode(name="model")


@pytest.fixture
def post_type(model_directive: DirectiveNode) -> TypeDefinition:
    """Return ``type Post @model`` with validated title and views fields.

    Mirrors:
        type Post @model {
            id: ID!
            title: String! @validator(type: in, arrayString: ["asd", "123"])
            views: Int @validator(type: filter, filter: default, valueInt: 0)
        }
    """
    return TypeDefinition(
        name="Post",
        directives=[model_directive],
        fields=[
            FieldDefinition(name="id", type_name="ID"),
            FieldDefinition(
                name="title",
                type_name="String",
                directives=[
                    validator(
                        enum_arg("type", "in"),
                        list_arg("arrayString", "StringValue", ["asd", "123"]),
                    )
                ],
            ),
            FieldDefinition(
                name="views",
                type_name="Int",
                directives=[
                    validator(
                        enum_arg("type", "filter"),
                        enum_arg("filter", "default"),
                        scalar_arg("valueInt", "IntValue", "0"),
                    )
                ],
            ),
        ],
    )


@pytest.fixture
def resource_store() -> InMemoryResourceStore:
    """Return a store holding create and update resolvers for Post."""
    store = InMemoryResourceStore()
    store.add_resolver("CreatePostResolver", CREATE_TEMPLATE)
    store.add_resolver("UpdatePostResolver", UPDATE_TEMPLATE)
    return store
