"""Permissive parameter record produced by argument extraction.

ValidatorArguments holds the literal text of every recognised @validator
argument. Nothing is checked here beyond shape; which arguments a validator
type needs, and whether their literals parse, is decided by the generator.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ValidatorArguments(BaseModel):
    """Literal @validator arguments keyed by their directive names.

    Attributes:
        kind: ``type`` argument (validator name literal).
        filter_kind: ``filter`` argument (filter name literal).
        expression: Regular expression for ``type: regex``.
        array_string: ``arrayString`` member literals, in order.
        array_int: ``arrayInt`` member literals, in order.
        array_float: ``arrayFloat`` member literals, in order.
        value_string: ``valueString`` default.
        value_int: ``valueInt`` default literal.
        value_float: ``valueFloat`` default literal.
        value_boolean: ``valueBoolean`` default literal.
        min: Reserved lower bound literal.
        max: Reserved upper bound literal.

    Example:
        >>> args = ValidatorArguments.model_validate(
        ...     {"type": "in", "arrayString": ["asd", "123"]}
        ... )
        >>> args.array_string
        ['asd', '123']
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    kind: str | None = Field(default=None, alias="type")
    filter_kind: str | None = Field(default=None, alias="filter")
    expression: str | None = None
    array_string: list[str] | None = Field(default=None, alias="arrayString")
    array_int: list[str] | None = Field(default=None, alias="arrayInt")
    array_float: list[str] | None = Field(default=None, alias="arrayFloat")
    value_string: str | None = Field(default=None, alias="valueString")
    value_int: str | None = Field(default=None, alias="valueInt")
    value_float: str | None = Field(default=None, alias="valueFloat")
    value_boolean: str | None = Field(default=None, alias="valueBoolean")
    min: str | None = None
    max: str | None = None
