"""@validator directive grammar and inbound schema context.

This module declares the process-wide grammar of the @validator directive
(the SDL handed to the host pipeline, its argument types and its two
enumerations) and the frozen models the host uses to describe the type,
field and directive occurrence being compiled.
"""

from __future__ import annotations

import re
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

GRAPHQL_NAME_PATTERN = re.compile(r"^[_A-Za-z][_0-9A-Za-z]*$")


class ValidatorName(str, Enum):
    """Validator types accepted by the ``type`` argument."""

    filter = "filter"
    required = "required"
    regex = "regex"
    number = "number"
    string = "string"
    boolean = "boolean"
    url = "url"
    email = "email"
    in_ = "in"


class FilterName(str, Enum):
    """Filters accepted by the ``filter`` argument when ``type: filter``."""

    default = "default"
    lowercase = "lowercase"
    uppercase = "uppercase"
    lc_first = "lcFirst"
    uc_first = "ucFirst"
    trim = "trim"


DIRECTIVE_ARGUMENT_TYPES: MappingProxyType[str, str] = MappingProxyType(
    {
        "type": "ValidatorName!",
        "filter": "FilterName",
        "expression": "String",
        "arrayString": "[String]",
        "arrayInt": "[Int]",
        "arrayFloat": "[Float]",
        "valueString": "String",
        "valueInt": "Int",
        "valueFloat": "Float",
        "valueBoolean": "Boolean",
        "min": "Int",
        "max": "Int",
    }
)


def _build_directive_sdl() -> str:
    arguments = ",\n".join(f"  {name}: {type_}" for name, type_ in DIRECTIVE_ARGUMENT_TYPES.items())
    validators = " ".join(member.value for member in ValidatorName)
    filters = " ".join(member.value for member in FilterName)
    return (
        f"directive @validator(\n{arguments}\n) on FIELD_DEFINITION\n"
        f"enum FilterName {{ {filters} }}\n"
        f"enum ValidatorName {{ {validators} }}\n"
    )


VALIDATOR_DIRECTIVE_SDL: str = _build_directive_sdl()
"""SDL declaring @validator and its enums, registered once with the host schema."""


class ValueKind(str, Enum):
    """GraphQL AST value node kinds as reported by the host parser."""

    STRING = "StringValue"
    INT = "IntValue"
    FLOAT = "FloatValue"
    BOOLEAN = "BooleanValue"
    ENUM = "EnumValue"
    LIST = "ListValue"
    NULL = "NullValue"
    OBJECT = "ObjectValue"
    VARIABLE = "Variable"


SCALAR_VALUE_KINDS: frozenset[ValueKind] = frozenset(
    {ValueKind.STRING, ValueKind.INT, ValueKind.FLOAT, ValueKind.BOOLEAN, ValueKind.ENUM}
)


class ArgumentValue(BaseModel):
    """A directive argument value as written in the schema.

    Attributes:
        kind: AST node kind of the value.
        value: Literal text for scalar kinds (``"true"`` for a boolean,
            ``"42"`` for an int, the unquoted content for a string).
        values: Member values for ``ListValue``.

    Example:
        >>> ArgumentValue(kind="ListValue", values=[
        ...     ArgumentValue(kind="StringValue", value="asd"),
        ... ])
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: ValueKind
    value: str | None = None
    values: list[ArgumentValue] = Field(default_factory=list)


class DirectiveArgument(BaseModel):
    """A named directive argument."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    value: ArgumentValue


class DirectiveNode(BaseModel):
    """A directive occurrence on a type or field definition."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    arguments: list[DirectiveArgument] = Field(default_factory=list)


class FieldDefinition(BaseModel):
    """A field definition with its declared named type.

    Attributes:
        name: Field name.
        type_name: Named type with list and non-null wrappers removed
            (``String!`` is reported as ``String``).
        directives: Directives attached to the field.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    type_name: str
    directives: list[DirectiveNode] = Field(default_factory=list)


class TypeDefinition(BaseModel):
    """An object or interface type definition."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    directives: list[DirectiveNode] = Field(default_factory=list)
    fields: list[FieldDefinition] = Field(default_factory=list)

    def has_directive(self, name: str) -> bool:
        """Return True if a directive called ``name`` is attached to this type."""
        return any(directive.name == name for directive in self.directives)
