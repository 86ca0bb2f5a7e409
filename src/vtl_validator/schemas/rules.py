"""Validation and filter rules compiled from @validator directives.

Each rule model is one variant of the ValidatorRule tagged union and
carries exactly the parameters its snippet needs, already typed. The
generator builds a rule from a ValidatorArguments record and renders it
to VTL; a rule that exists is always renderable.

Variants:
    Validation (raise $util.error):
        required, number, string, boolean, email, url, regex,
        in_string, in_int, in_float
    Filters (rewrite the input field):
        default_string, default_int, default_float, default_boolean,
        lowercase, uppercase, lc_first, uc_first, trim
"""

from __future__ import annotations

import math
from typing import Annotated, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    StrictBool,
    StrictInt,
    field_validator,
)


class _Rule(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


def _require_finite(v: float) -> float:
    if not math.isfinite(v):
        raise ValueError("Float literals must be finite")
    return v


class RequiredRule(_Rule):
    """Reject a falsy input value."""

    rule: Literal["required"] = "required"


class NumberRule(_Rule):
    """Reject a non-numeric input value."""

    rule: Literal["number"] = "number"


class StringRule(_Rule):
    """Reject a non-string input value."""

    rule: Literal["string"] = "string"


class BooleanRule(_Rule):
    """Reject a non-boolean input value."""

    rule: Literal["boolean"] = "boolean"


class EmailRule(_Rule):
    """Reject an input value that is not an email address."""

    rule: Literal["email"] = "email"


class UrlRule(_Rule):
    """Reject an input value that is not an http, https, ftp or file URL."""

    rule: Literal["url"] = "url"


class RegexRule(_Rule):
    """Reject an input value that does not match ``expression``."""

    rule: Literal["regex"] = "regex"
    expression: str = Field(..., min_length=1)


class InStringRule(_Rule):
    """Reject a String input value not contained in ``values``."""

    rule: Literal["in_string"] = "in_string"
    values: list[str]


class InIntRule(_Rule):
    """Reject an Int input value not contained in ``values``."""

    rule: Literal["in_int"] = "in_int"
    values: list[StrictInt]


class InFloatRule(_Rule):
    """Reject a Float input value not contained in ``values``."""

    rule: Literal["in_float"] = "in_float"
    values: list[float]

    @field_validator("values")
    @classmethod
    def validate_finite(cls, v: list[float]) -> list[float]:
        return [_require_finite(item) for item in v]


class DefaultStringFilter(_Rule):
    """Set a String field to ``value`` when it is absent."""

    rule: Literal["default_string"] = "default_string"
    value: str


class DefaultIntFilter(_Rule):
    """Set an Int field to ``value`` when it is absent."""

    rule: Literal["default_int"] = "default_int"
    value: StrictInt


class DefaultFloatFilter(_Rule):
    """Set a Float field to ``value`` when it is absent."""

    rule: Literal["default_float"] = "default_float"
    value: float

    @field_validator("value")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        return _require_finite(v)


class DefaultBooleanFilter(_Rule):
    """Set a Boolean field to ``value`` when it is absent."""

    rule: Literal["default_boolean"] = "default_boolean"
    value: StrictBool


class LowercaseFilter(_Rule):
    """Lower-case a present field."""

    rule: Literal["lowercase"] = "lowercase"


class UppercaseFilter(_Rule):
    """Upper-case a present field."""

    rule: Literal["uppercase"] = "uppercase"


class LcFirstFilter(_Rule):
    """Lower-case the first character of a present field."""

    rule: Literal["lc_first"] = "lc_first"


class UcFirstFilter(_Rule):
    """Upper-case the first character of a present field."""

    rule: Literal["uc_first"] = "uc_first"


class TrimFilter(_Rule):
    """Strip leading and trailing whitespace from a present field."""

    rule: Literal["trim"] = "trim"


# Union type with discriminator on "rule" field
ValidatorRule = Annotated[
    RequiredRule
    | NumberRule
    | StringRule
    | BooleanRule
    | EmailRule
    | UrlRule
    | RegexRule
    | InStringRule
    | InIntRule
    | InFloatRule
    | DefaultStringFilter
    | DefaultIntFilter
    | DefaultFloatFilter
    | DefaultBooleanFilter
    | LowercaseFilter
    | UppercaseFilter
    | LcFirstFilter
    | UcFirstFilter
    | TrimFilter,
    Discriminator("rule"),
]
"""Tagged union of every compiled @validator rule."""

FILTER_RULES: tuple[type[_Rule], ...] = (
    DefaultStringFilter,
    DefaultIntFilter,
    DefaultFloatFilter,
    DefaultBooleanFilter,
    LowercaseFilter,
    UppercaseFilter,
    LcFirstFilter,
    UcFirstFilter,
    TrimFilter,
)
