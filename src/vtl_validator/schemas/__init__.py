"""Schema models for vtl-validator.

- directive: @validator grammar, enums and inbound host context
- arguments: ValidatorArguments, the permissive parameter record
- rules: ValidatorRule tagged union consumed by the generator
"""

from __future__ import annotations

from vtl_validator.schemas.arguments import ValidatorArguments
from vtl_validator.schemas.directive import (
    DIRECTIVE_ARGUMENT_TYPES,
    VALIDATOR_DIRECTIVE_SDL,
    ArgumentValue,
    DirectiveArgument,
    DirectiveNode,
    FieldDefinition,
    FilterName,
    TypeDefinition,
    ValidatorName,
    ValueKind,
)
from vtl_validator.schemas.rules import ValidatorRule

__all__: list[str] = [
    # Directive grammar
    "DIRECTIVE_ARGUMENT_TYPES",
    "VALIDATOR_DIRECTIVE_SDL",
    "FilterName",
    "ValidatorName",
    # Host context
    "ArgumentValue",
    "DirectiveArgument",
    "DirectiveNode",
    "FieldDefinition",
    "TypeDefinition",
    "ValueKind",
    # Records
    "ValidatorArguments",
    "ValidatorRule",
]
