"""Contract tests pinning the exact text of emitted snippets.

Host pipelines and deployed resolvers depend on these byte-for-byte;
a change here is a breaking change for every generated template.
"""

from __future__ import annotations

import pytest

from vtl_validator.compiler.generator import generate
from vtl_validator.config import TransformerConfig
from vtl_validator.schemas.arguments import ValidatorArguments

pytestmark = pytest.mark.contract


def _args(**values: object) -> ValidatorArguments:
    return ValidatorArguments.model_validate(values)


class TestSnippetFormatContract:
    """Golden snippet texts for representative rules."""

    def test_required_snippet(self) -> None:
        snippet = generate("required", "title", "String", _args(type="required"))

        assert snippet == (
            '## [Start] Check required validation "title". **\n'
            '#if( !$ctx.args.input.title ) $util.error("title attribute is required", '
            '"InvalidArgumentsError") #end\n'
            '## [End] Check required validation "title". **'
        )

    def test_email_snippet(self) -> None:
        snippet = generate("email", "contact", "String", _args(type="email"))

        assert snippet == (
            '## [Start] Check email validation "contact". **\n'
            "#if( !$util.matches('^[_A-Za-z0-9-\\+]+(\\.[_A-Za-z0-9-]+)*@[A-Za-z0-9-]+"
            "(\\.[A-Za-z0-9]+)*(\\.[A-Za-z]{2,})$', $ctx.args.input.contact) ) "
            '$util.error("contact attribute must be valid email", "InvalidArgumentsError") #end\n'
            '## [End] Check email validation "contact". **'
        )

    def test_in_string_snippet(self) -> None:
        snippet = generate(
            "in", "title", "String", _args(type="in", arrayString=["asd", "123"])
        )

        assert snippet == (
            '## [Start] Set filter array variable for "title". **\n'
            "#set( $titleArr = ['asd', '123'] )\n"
            '## [End] Set filter array variable for "title". **\n'
            '## [Start] Apply IN filter to "title". **\n'
            "#if( !$titleArr.contains($ctx.args.input.title) ) "
            '$util.error("title attribute must be valid url", "InvalidArgumentsError") #end\n'
            '## [End] Apply IN filter to "title". **'
        )

    def test_default_string_snippet(self) -> None:
        snippet = generate(
            "filter", "title", "String", _args(type="filter", filter="default", valueString="none")
        )

        assert snippet == (
            '## [Start] Apply default filter to "title". **\n'
            "#if( $ctx.args.input.title ) "
            "$util.qr($ctx.args.input.put('title', $ctx.args.input.title)) "
            "#else $util.qr($ctx.args.input.put('title', 'none')) #end\n"
            '## [End] Apply default filter to "title". **'
        )

    def test_trim_snippet(self) -> None:
        snippet = generate("filter", "name", "String", _args(type="filter", filter="trim"))

        assert snippet == (
            '## [Start] Apply trim filter to "name". **\n'
            "#if( $ctx.args.input.name ) "
            "$util.qr($ctx.args.input.put('name', $ctx.args.input.name.trim())) #end\n"
            '## [End] Apply trim filter to "name". **'
        )

    def test_block_mode_default_snippet(self) -> None:
        config = TransformerConfig(inline_conditionals=False, error_type="ValidationError")
        snippet = generate(
            "filter", "views", "Int", _args(type="filter", filter="default", valueInt="0"), config
        )

        assert snippet == (
            '## [Start] Apply default filter to "views". **\n'
            "#if( $ctx.args.input.views )\n"
            "  $util.qr($ctx.args.input.put('views', $ctx.args.input.views))\n"
            "#else\n"
            "  $util.qr($ctx.args.input.put('views', 0))\n"
            "#end\n"
            '## [End] Apply default filter to "views". **'
        )

    def test_block_mode_required_snippet(self) -> None:
        config = TransformerConfig(inline_conditionals=False, error_type="ValidationError")
        snippet = generate("required", "title", "String", _args(type="required"), config)

        assert snippet == (
            '## [Start] Check required validation "title". **\n'
            "#if( !$ctx.args.input.title )\n"
            '  $util.error("title attribute is required", "ValidationError")\n'
            "#end\n"
            '## [End] Check required validation "title". **'
        )
