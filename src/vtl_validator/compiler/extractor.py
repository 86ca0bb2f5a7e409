"""Argument extraction for @validator directives.

Collapses the directive's AST arguments into a ValidatorArguments record
by direct name-to-field correspondence. Extraction is total: value shapes
that carry no literal (null, object, variable) and shapes that do not fit
the argument (a list for a scalar argument, or the reverse) are dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from vtl_validator.schemas.arguments import ValidatorArguments
from vtl_validator.schemas.directive import (
    DIRECTIVE_ARGUMENT_TYPES,
    SCALAR_VALUE_KINDS,
    ArgumentValue,
    DirectiveArgument,
    ValueKind,
)

logger = logging.getLogger(__name__)


def _is_list_argument(name: str) -> bool:
    return DIRECTIVE_ARGUMENT_TYPES.get(name, "").startswith("[")


def _literal(value: ArgumentValue) -> str | list[str] | None:
    if value.kind == ValueKind.LIST:
        return [
            member.value
            for member in value.values
            if member.kind in SCALAR_VALUE_KINDS and member.value is not None
        ]
    if value.kind in SCALAR_VALUE_KINDS:
        return value.value
    return None


def parse_arguments(arguments: Iterable[DirectiveArgument]) -> ValidatorArguments:
    """Extract a ValidatorArguments record from directive arguments.

    Args:
        arguments: Directive arguments in declaration order. A later
            argument with the same name replaces an earlier one.

    Returns:
        ValidatorArguments with the literal text of every usable argument.

    Example:
        >>> args = parse_arguments([
        ...     DirectiveArgument(name="type", value=ArgumentValue(kind="EnumValue", value="in")),
        ...     DirectiveArgument(name="arrayInt", value=ArgumentValue(
        ...         kind="ListValue",
        ...         values=[ArgumentValue(kind="IntValue", value="1")],
        ...     )),
        ... ])
        >>> args.kind, args.array_int
        ('in', ['1'])
    """
    raw: dict[str, Any] = {}

    for argument in arguments:
        literal = _literal(argument.value)
        if literal is None:
            logger.debug(
                "Dropped argument without literal value",
                extra={"argument": argument.name, "kind": argument.value.kind.value},
            )
            continue

        if isinstance(literal, list) != _is_list_argument(argument.name):
            logger.debug(
                "Dropped argument with mismatched shape",
                extra={"argument": argument.name, "kind": argument.value.kind.value},
            )
            continue

        raw[argument.name] = literal

    return ValidatorArguments.model_validate(raw)
