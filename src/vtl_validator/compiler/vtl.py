"""VTL printing primitives.

Small helpers that print Velocity Template Language fragments as AppSync
resolvers expect them. Every value embedded in a snippet passes through
one of the literal encoders below.

String literals are single-quoted: Velocity does not interpolate ``$`` or
``#`` references inside single quotes and treats backslashes literally, so
the only character needing an escape is the quote itself, written twice.

Example:
    >>> print(block("Check title", iff("!$ctx.args.input.title", "...")))
    ## [Start] Check title. **
    #if( !$ctx.args.input.title ) ... #end
    ## [End] Check title. **
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

TAB = "  "


def string_literal(value: str) -> str:
    """Encode a value as a single-quoted VTL string literal.

    Args:
        value: Raw string value.

    Returns:
        Literal text that evaluates back to ``value``.

    Example:
        >>> string_literal("it's")
        "'it''s'"
    """
    return "'" + value.replace("'", "''") + "'"


def int_literal(value: int) -> str:
    """Encode an integer as a VTL integer literal."""
    return str(value)


def float_literal(value: float) -> str:
    """Encode a float as a positional VTL floating point literal.

    Velocity's parser has no exponent notation, so ``1e+20`` is printed as
    ``100000000000000000000.0``.
    """
    text = format(Decimal(repr(value)), "f")
    if "." not in text:
        text += ".0"
    return text


def boolean_literal(value: bool) -> str:
    return "true" if value else "false"


def list_literal(items: Iterable[str]) -> str:
    """Join already-encoded literals into a VTL list literal."""
    return "[" + ", ".join(items) + "]"


def reference(name: str) -> str:
    return f"${name}"


def set_var(name: str, value: str) -> str:
    """Print ``#set( $name = value )``."""
    return f"#set( {reference(name)} = {value} )"


def quiet(expression: str) -> str:
    """Wrap an expression in ``$util.qr()`` so its result is not printed."""
    return f"$util.qr({expression})"


def util_error(message: str, error_type: str) -> str:
    """Print a ``$util.error()`` call.

    Both arguments are placed in double quotes; callers pass field names
    (GraphQL names) and fixed text only.
    """
    return f'$util.error("{message}", "{error_type}")'


def _indent(text: str, indent: str) -> str:
    return "\n".join(indent + line for line in text.split("\n"))


def iff(predicate: str, body: str, inline: bool = True) -> str:
    """Print an ``#if`` directive."""
    if inline:
        return f"#if( {predicate} ) {body} #end"
    return f"#if( {predicate} )\n{_indent(body, TAB)}\n#end"


def if_else(predicate: str, if_body: str, else_body: str, inline: bool = True) -> str:
    """Print an ``#if``/``#else`` directive."""
    if inline:
        return f"#if( {predicate} ) {if_body} #else {else_body} #end"
    return (
        f"#if( {predicate} )\n{_indent(if_body, TAB)}\n"
        f"#else\n{_indent(else_body, TAB)}\n#end"
    )


def block(description: str, *statements: str) -> str:
    """Frame statements with ``## [Start]``/``## [End]`` comment lines.

    Args:
        description: Human readable description of the block.
        statements: Printed statements, one or more lines each.

    Returns:
        The framed block without a trailing newline.
    """
    body = "\n".join(statements)
    return f"## [Start] {description}. **\n{body}\n## [End] {description}. **"
