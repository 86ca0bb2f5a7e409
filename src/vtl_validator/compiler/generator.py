"""Snippet generation: ValidatorArguments -> ValidatorRule -> VTL.

Generation happens in two steps:

1. resolve_rule() applies every validity rule of the @validator directive
   (known validator type and filter, supported declared field type,
   required parameters present and parseable) and returns one variant of
   the ValidatorRule union.
2. render_rule() prints that variant as a framed VTL block. Validation
   rules raise $util.error() and never touch the input; filter rules
   rewrite the input field and never raise.

generate() chains both steps and is the entry point used by the
transformer.

Example:
    >>> args = ValidatorArguments.model_validate({"type": "required"})
    >>> print(generate("required", "title", "String", args))
    ## [Start] Check required validation "title". **
    #if( !$ctx.args.input.title ) $util.error("title attribute is required", "InvalidArgumentsError") #end
    ## [End] Check required validation "title". **
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any, TypeAlias, TypeVar

import structlog
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from vtl_validator.compiler import vtl
from vtl_validator.config import TransformerConfig
from vtl_validator.errors import InvalidDirectiveError
from vtl_validator.schemas.arguments import ValidatorArguments
from vtl_validator.schemas.directive import GRAPHQL_NAME_PATTERN, FilterName, ValidatorName
from vtl_validator.schemas.rules import (
    FILTER_RULES,
    BooleanRule,
    DefaultBooleanFilter,
    DefaultFloatFilter,
    DefaultIntFilter,
    DefaultStringFilter,
    EmailRule,
    InFloatRule,
    InIntRule,
    InStringRule,
    LcFirstFilter,
    LowercaseFilter,
    NumberRule,
    RegexRule,
    RequiredRule,
    StringRule,
    TrimFilter,
    UcFirstFilter,
    UppercaseFilter,
    UrlRule,
    ValidatorRule,
)

logger = structlog.get_logger(__name__)

EMAIL_PATTERN = r"^[_A-Za-z0-9-\+]+(\.[_A-Za-z0-9-]+)*@[A-Za-z0-9-]+(\.[A-Za-z0-9]+)*(\.[A-Za-z]{2,})$"
URL_PATTERN = r"^(https?|ftp|file)://[-a-zA-Z0-9+&@#/%?=~_|!:,.;]*[-a-zA-Z0-9+&@#/%=~_|]"

# GraphQL literal grammar; Float accepts Int literals.
INT_LITERAL = re.compile(r"^-?(0|[1-9][0-9]*)$")
FLOAT_LITERAL = re.compile(r"^-?(0|[1-9][0-9]*)(\.[0-9]+)?([eE][+-]?[0-9]+)?$")

# GraphQL Int is a signed 32-bit integer.
GRAPHQL_INT_MIN = -(2**31)
GRAPHQL_INT_MAX = 2**31 - 1

_RuleT = TypeVar("_RuleT", bound=BaseModel)


# --------------------------------------------------------------------------
# Literal parsing
# --------------------------------------------------------------------------


def _parse_string(text: str) -> str:
    return text


def _parse_int(text: str) -> int:
    if not INT_LITERAL.match(text):
        raise ValueError(f"'{text}' is not an Int literal")
    value = int(text)
    if not GRAPHQL_INT_MIN <= value <= GRAPHQL_INT_MAX:
        raise ValueError(f"'{text}' is outside the 32-bit Int range")
    return value


def _parse_float(text: str) -> float:
    if not FLOAT_LITERAL.match(text):
        raise ValueError(f"'{text}' is not a Float literal")
    return float(text)


def _parse_boolean(text: str) -> bool:
    if text not in ("true", "false"):
        raise ValueError(f"'{text}' is not a Boolean literal")
    return text == "true"


_InRule: TypeAlias = InStringRule | InIntRule | InFloatRule
_DefaultFilter: TypeAlias = (
    DefaultStringFilter | DefaultIntFilter | DefaultFloatFilter | DefaultBooleanFilter
)
_PlainValidator: TypeAlias = (
    RequiredRule | NumberRule | StringRule | BooleanRule | EmailRule | UrlRule
)
_PlainFilter: TypeAlias = (
    LowercaseFilter | UppercaseFilter | LcFirstFilter | UcFirstFilter | TrimFilter
)

# declared field type -> (argument name, record attribute, rule, parser)
_IN_RULES: dict[str, tuple[str, str, type[_InRule], Callable[[str], Any]]] = {
    "String": ("arrayString", "array_string", InStringRule, _parse_string),
    "Int": ("arrayInt", "array_int", InIntRule, _parse_int),
    "Float": ("arrayFloat", "array_float", InFloatRule, _parse_float),
}

_DEFAULT_FILTERS: dict[str, tuple[str, str, type[_DefaultFilter], Callable[[str], Any]]] = {
    "String": ("valueString", "value_string", DefaultStringFilter, _parse_string),
    "Int": ("valueInt", "value_int", DefaultIntFilter, _parse_int),
    "Float": ("valueFloat", "value_float", DefaultFloatFilter, _parse_float),
    "Boolean": ("valueBoolean", "value_boolean", DefaultBooleanFilter, _parse_boolean),
}

_PLAIN_VALIDATORS: dict[ValidatorName, type[_PlainValidator]] = {
    ValidatorName.required: RequiredRule,
    ValidatorName.number: NumberRule,
    ValidatorName.string: StringRule,
    ValidatorName.boolean: BooleanRule,
    ValidatorName.email: EmailRule,
    ValidatorName.url: UrlRule,
}

_PLAIN_FILTERS: dict[FilterName, type[_PlainFilter]] = {
    FilterName.lowercase: LowercaseFilter,
    FilterName.uppercase: UppercaseFilter,
    FilterName.lc_first: LcFirstFilter,
    FilterName.uc_first: UcFirstFilter,
    FilterName.trim: TrimFilter,
}


# --------------------------------------------------------------------------
# Rule resolution
# --------------------------------------------------------------------------


def _build(rule_cls: type[_RuleT], **values: Any) -> _RuleT:
    try:
        return rule_cls(**values)
    except PydanticValidationError as e:
        raise InvalidDirectiveError(
            "Invalid validator arguments",
            internal_details=str(e),
        ) from e


def _parse_literals(
    argument_name: str, literals: list[str], parser: Callable[[str], Any]
) -> list[Any]:
    parsed: list[Any] = []
    for index, literal in enumerate(literals):
        try:
            parsed.append(parser(literal))
        except ValueError as e:
            raise InvalidDirectiveError(f"{argument_name}[{index}]: {e}") from e
    return parsed


def _resolve_in(field_type: str, params: ValidatorArguments) -> ValidatorRule:
    if field_type not in _IN_RULES:
        raise InvalidDirectiveError(
            f"Unexpected field type '{field_type}' for in validator. "
            f"Supported: {', '.join(_IN_RULES)}"
        )
    argument_name, attribute, rule_cls, parser = _IN_RULES[field_type]
    literals: list[str] | None = getattr(params, attribute)
    if literals is None:
        raise InvalidDirectiveError(f"{argument_name} must be defined.")
    return _build(rule_cls, values=_parse_literals(argument_name, literals, parser))


def _resolve_default(field_type: str, params: ValidatorArguments) -> ValidatorRule:
    if field_type not in _DEFAULT_FILTERS:
        raise InvalidDirectiveError(
            f"Unexpected field type '{field_type}' for default filter. "
            f"Supported: {', '.join(_DEFAULT_FILTERS)}"
        )
    argument_name, attribute, rule_cls, parser = _DEFAULT_FILTERS[field_type]
    literal: str | None = getattr(params, attribute)
    if literal is None:
        raise InvalidDirectiveError(f"{argument_name} must be defined.")
    try:
        value = parser(literal)
    except ValueError as e:
        raise InvalidDirectiveError(f"{argument_name}: {e}") from e
    return _build(rule_cls, value=value)


def _resolve_filter(field_type: str, params: ValidatorArguments) -> ValidatorRule:
    if params.filter_kind is None:
        raise InvalidDirectiveError("filter attribute should be set for filter validator.")
    try:
        filter_name = FilterName(params.filter_kind)
    except ValueError:
        raise InvalidDirectiveError(f"Invalid filter '{params.filter_kind}'.") from None

    if filter_name is FilterName.default:
        return _resolve_default(field_type, params)
    return _build(_PLAIN_FILTERS[filter_name])


def resolve_rule(
    kind: ValidatorName | str | None,
    field_type: str,
    params: ValidatorArguments,
) -> ValidatorRule:
    """Resolve a validator type and its arguments to a typed rule.

    Args:
        kind: Validator type (the directive's ``type`` argument).
        field_type: Declared named type of the annotated field.
        params: Extracted directive arguments.

    Returns:
        The rule variant for this validator type and field type.

    Raises:
        InvalidDirectiveError: If the validator type or filter is unknown,
            the field type is unsupported, or a required parameter is
            missing or not a literal of the expected type.
    """
    if kind is None:
        raise InvalidDirectiveError("Validator type must be defined.")
    try:
        validator = ValidatorName(kind)
    except ValueError:
        raise InvalidDirectiveError(f"Invalid validator type '{kind}'.") from None

    if validator in _PLAIN_VALIDATORS:
        return _build(_PLAIN_VALIDATORS[validator])
    if validator is ValidatorName.regex:
        if params.expression is None:
            raise InvalidDirectiveError("expression attribute should be set to validate pattern.")
        return _build(RegexRule, expression=params.expression)
    if validator is ValidatorName.in_:
        return _resolve_in(field_type, params)
    return _resolve_filter(field_type, params)


# --------------------------------------------------------------------------
# Rendering
# --------------------------------------------------------------------------


class _Field:
    """Printing context for one annotated field."""

    def __init__(self, name: str, config: TransformerConfig) -> None:
        self.name = name
        self.config = config
        self.value = f"{config.input_path}.{name}"

    def check(self, description: str, predicate: str, message: str) -> str:
        return vtl.block(
            f'{description} "{self.name}"',
            vtl.iff(
                predicate,
                vtl.util_error(f"{self.name} attribute {message}", self.config.error_type),
                inline=self.config.inline_conditionals,
            ),
        )

    def put(self, expression: str) -> str:
        return vtl.quiet(
            f"{self.config.input_path}.put({vtl.string_literal(self.name)}, {expression})"
        )

    def rewrite(self, description: str, expression: str, predicate: str | None = None) -> str:
        return vtl.block(
            description,
            vtl.iff(
                predicate or self.value,
                self.put(expression),
                inline=self.config.inline_conditionals,
            ),
        )

    def matches(self, pattern: str) -> str:
        return f"!$util.matches({vtl.string_literal(pattern)}, {self.value})"


def _render_required(rule: RequiredRule, f: _Field) -> str:
    return f.check("Check required validation", f"!{f.value}", "is required")


def _render_number(rule: NumberRule, f: _Field) -> str:
    return f.check("Check number validation", f"!$util.isNumber({f.value})", "must be of type number")


def _render_string(rule: StringRule, f: _Field) -> str:
    return f.check("Check string validation", f"!$util.isString({f.value})", "must be of type string")


def _render_boolean(rule: BooleanRule, f: _Field) -> str:
    return f.check(
        "Check boolean validation", f"!$util.isBoolean({f.value})", "must be of type boolean"
    )


def _render_regex(rule: RegexRule, f: _Field) -> str:
    return f.check("Check regex validation", f.matches(rule.expression), "must match pattern")


def _render_email(rule: EmailRule, f: _Field) -> str:
    return f.check("Check email validation", f.matches(EMAIL_PATTERN), "must be valid email")


def _render_url(rule: UrlRule, f: _Field) -> str:
    return f.check("Check url validation", f.matches(URL_PATTERN), "must be valid url")


def _render_in(f: _Field, members: list[str]) -> str:
    array_name = f"{f.name}Arr"
    set_array = vtl.block(
        f'Set filter array variable for "{f.name}"',
        vtl.set_var(array_name, vtl.list_literal(members)),
    )
    # Message text is shared with the url check.
    check = f.check(
        "Apply IN filter to",
        f"!{vtl.reference(array_name)}.contains({f.value})",
        "must be valid url",
    )
    return f"{set_array}\n{check}"


def _render_in_string(rule: InStringRule, f: _Field) -> str:
    return _render_in(f, [vtl.string_literal(v) for v in rule.values])


def _render_in_int(rule: InIntRule, f: _Field) -> str:
    return _render_in(f, [vtl.int_literal(v) for v in rule.values])


def _render_in_float(rule: InFloatRule, f: _Field) -> str:
    return _render_in(f, [vtl.float_literal(v) for v in rule.values])


def _render_default(f: _Field, literal: str) -> str:
    return vtl.block(
        f'Apply default filter to "{f.name}"',
        vtl.if_else(
            f.value,
            f.put(f.value),
            f.put(literal),
            inline=f.config.inline_conditionals,
        ),
    )


def _render_default_string(rule: DefaultStringFilter, f: _Field) -> str:
    return _render_default(f, vtl.string_literal(rule.value))


def _render_default_int(rule: DefaultIntFilter, f: _Field) -> str:
    return _render_default(f, vtl.int_literal(rule.value))


def _render_default_float(rule: DefaultFloatFilter, f: _Field) -> str:
    return _render_default(f, vtl.float_literal(rule.value))


def _render_default_boolean(rule: DefaultBooleanFilter, f: _Field) -> str:
    return _render_default(f, vtl.boolean_literal(rule.value))


def _render_lowercase(rule: LowercaseFilter, f: _Field) -> str:
    return f.rewrite(f'Setting "{f.name}" to lower case', f"{f.value}.toLowerCase()")


def _render_uppercase(rule: UppercaseFilter, f: _Field) -> str:
    return f.rewrite(f'Setting "{f.name}" to upper case', f"{f.value}.toUpperCase()")


def _render_lc_first(rule: LcFirstFilter, f: _Field) -> str:
    return f.rewrite(
        f'Apply lower case first character filter to "{f.name}"',
        f"{f.value}.substring(0, 1).toLowerCase().concat({f.value}.substring(1))",
        predicate=f"!$util.isNullOrEmpty({f.value})",
    )


def _render_uc_first(rule: UcFirstFilter, f: _Field) -> str:
    return f.rewrite(
        f'Apply upper case first character filter to "{f.name}"',
        f"{f.value}.substring(0, 1).toUpperCase().concat({f.value}.substring(1))",
        predicate=f"!$util.isNullOrEmpty({f.value})",
    )


def _render_trim(rule: TrimFilter, f: _Field) -> str:
    return f.rewrite(f'Apply trim filter to "{f.name}"', f"{f.value}.trim()")


_RENDERERS: dict[type[BaseModel], Callable[[Any, _Field], str]] = {
    RequiredRule: _render_required,
    NumberRule: _render_number,
    StringRule: _render_string,
    BooleanRule: _render_boolean,
    RegexRule: _render_regex,
    EmailRule: _render_email,
    UrlRule: _render_url,
    InStringRule: _render_in_string,
    InIntRule: _render_in_int,
    InFloatRule: _render_in_float,
    DefaultStringFilter: _render_default_string,
    DefaultIntFilter: _render_default_int,
    DefaultFloatFilter: _render_default_float,
    DefaultBooleanFilter: _render_default_boolean,
    LowercaseFilter: _render_lowercase,
    UppercaseFilter: _render_uppercase,
    LcFirstFilter: _render_lc_first,
    UcFirstFilter: _render_uc_first,
    TrimFilter: _render_trim,
}


def render_rule(
    rule: ValidatorRule,
    field_name: str,
    config: TransformerConfig | None = None,
) -> str:
    """Print a rule as a framed VTL snippet for one field.

    Args:
        rule: Resolved rule.
        field_name: Name of the annotated field.
        config: Transformer configuration (defaults apply when omitted).

    Returns:
        Snippet text without a trailing newline.

    Raises:
        InvalidDirectiveError: If field_name is not a GraphQL name.
    """
    if not GRAPHQL_NAME_PATTERN.match(field_name):
        raise InvalidDirectiveError(f"'{field_name}' is not a valid field name.")

    snippet = _RENDERERS[type(rule)](rule, _Field(field_name, config or TransformerConfig()))
    logger.debug(
        "validator_snippet_generated",
        rule=rule.rule,
        field=field_name,
        filter=isinstance(rule, FILTER_RULES),
    )
    return snippet


def generate(
    kind: ValidatorName | str | None,
    field_name: str,
    field_type: str,
    params: ValidatorArguments,
    config: TransformerConfig | None = None,
) -> str:
    """Generate the VTL snippet for one @validator directive occurrence.

    Args:
        kind: Validator type (the directive's ``type`` argument).
        field_name: Name of the annotated field.
        field_type: Declared named type of the field (String, Int, ...).
        params: Extracted directive arguments.
        config: Transformer configuration (defaults apply when omitted).

    Returns:
        Snippet text.

    Raises:
        InvalidDirectiveError: If the directive cannot be compiled.
    """
    rule = resolve_rule(kind, field_type, params)
    return render_rule(rule, field_name, config)
