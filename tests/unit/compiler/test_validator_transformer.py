"""Unit tests for ValidatorTransformer."""

from __future__ import annotations

import pytest
from conftest import CREATE_TEMPLATE, UPDATE_TEMPLATE
from directive_builders import enum_arg, list_arg, string_arg, validator

from vtl_validator.compiler.augmenter import InMemoryResourceStore
from vtl_validator.compiler.transformer import ValidatorTransformer
from vtl_validator.config import TransformerConfig
from vtl_validator.errors import InvalidDirectiveError
from vtl_validator.schemas.directive import (
    VALIDATOR_DIRECTIVE_SDL,
    DirectiveNode,
    FieldDefinition,
    TypeDefinition,
)


@pytest.fixture
def title_field() -> FieldDefinition:
    return FieldDefinition(name="title", type_name="String")


class TestModelGuard:
    """Tests for the @model marker requirement."""

    def test_missing_model_directive(
        self, title_field: FieldDefinition, resource_store: InMemoryResourceStore
    ) -> None:
        parent = TypeDefinition(name="Post", directives=[DirectiveNode(name="searchable")])

        with pytest.raises(
            InvalidDirectiveError,
            match="validator directive requires model directive on parent type",
        ):
            ValidatorTransformer().field(
                parent, title_field, validator(enum_arg("type", "required")), resource_store
            )

        assert resource_store.request_template("CreatePostResolver") == CREATE_TEMPLATE

    def test_guard_runs_before_generation(
        self, title_field: FieldDefinition, resource_store: InMemoryResourceStore
    ) -> None:
        """An invalid directive on a non-model type reports the missing marker."""
        parent = TypeDefinition(name="Post")

        with pytest.raises(InvalidDirectiveError, match="requires model directive"):
            ValidatorTransformer().field(
                parent, title_field, validator(enum_arg("type", "nope")), resource_store
            )

    def test_custom_model_directive(
        self, title_field: FieldDefinition, resource_store: InMemoryResourceStore
    ) -> None:
        transformer = ValidatorTransformer(TransformerConfig(model_directive="entity"))
        parent = TypeDefinition(name="Post", directives=[DirectiveNode(name="entity")])

        transformer.field(
            parent, title_field, validator(enum_arg("type", "required")), resource_store
        )

        template = resource_store.request_template("CreatePostResolver")
        assert template is not None
        assert "title attribute is required" in template


class TestField:
    """Tests for compiling one directive occurrence."""

    def test_required_on_title(
        self,
        model_directive: DirectiveNode,
        title_field: FieldDefinition,
        resource_store: InMemoryResourceStore,
    ) -> None:
        parent = TypeDefinition(name="Post", directives=[model_directive])

        snippet = ValidatorTransformer().field(
            parent, title_field, validator(enum_arg("type", "required")), resource_store
        )

        assert '"title attribute is required"' in snippet
        assert resource_store.request_template("CreatePostResolver") == (
            snippet + "\n\n" + CREATE_TEMPLATE
        )
        assert resource_store.request_template("UpdatePostResolver") == (
            snippet + "\n\n" + UPDATE_TEMPLATE
        )

    def test_invalid_directive_leaves_templates_untouched(
        self,
        model_directive: DirectiveNode,
        resource_store: InMemoryResourceStore,
    ) -> None:
        parent = TypeDefinition(name="Post", directives=[model_directive])
        flag = FieldDefinition(name="flag", type_name="Boolean")

        with pytest.raises(InvalidDirectiveError) as exc_info:
            ValidatorTransformer().field(
                parent,
                flag,
                validator(enum_arg("type", "in"), list_arg("arrayString", "StringValue", ["a"])),
                resource_store,
            )

        assert exc_info.value.type_name == "Post"
        assert exc_info.value.field_name == "flag"
        assert "(type 'Post', field 'flag')" in str(exc_info.value)
        assert resource_store.request_template("CreatePostResolver") == CREATE_TEMPLATE
        assert resource_store.request_template("UpdatePostResolver") == UPDATE_TEMPLATE

    def test_regex_without_expression(
        self,
        model_directive: DirectiveNode,
        title_field: FieldDefinition,
        resource_store: InMemoryResourceStore,
    ) -> None:
        parent = TypeDefinition(name="Post", directives=[model_directive])

        with pytest.raises(InvalidDirectiveError, match="expression"):
            ValidatorTransformer().field(
                parent, title_field, validator(enum_arg("type", "regex")), resource_store
            )

    def test_only_create_resolver_exists(
        self, model_directive: DirectiveNode, title_field: FieldDefinition
    ) -> None:
        store = InMemoryResourceStore()
        store.add_resolver("CreatePostResolver", CREATE_TEMPLATE)
        parent = TypeDefinition(name="Post", directives=[model_directive])

        snippet = ValidatorTransformer().field(
            parent,
            title_field,
            validator(enum_arg("type", "regex"), string_arg("expression", "^[A-Z]")),
            store,
        )

        assert store.request_template("CreatePostResolver") == snippet + "\n\n" + CREATE_TEMPLATE
        assert store.get_resource("UpdatePostResolver") is None

    def test_logs_applied_directive(
        self,
        model_directive: DirectiveNode,
        title_field: FieldDefinition,
        resource_store: InMemoryResourceStore,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        parent = TypeDefinition(name="Post", directives=[model_directive])

        ValidatorTransformer().field(
            parent, title_field, validator(enum_arg("type", "string")), resource_store
        )

        out = capsys.readouterr().out
        assert "validator_directive_applied" in out
        assert "CreatePostResolver" in out


class TestTransformType:
    """Tests for applying every directive on a type."""

    def test_snippets_stack_in_reverse_declaration_order(
        self, post_type: TypeDefinition, resource_store: InMemoryResourceStore
    ) -> None:
        title_snippet, views_snippet = ValidatorTransformer().transform_type(
            post_type, resource_store
        )

        assert "#set( $titleArr = ['asd', '123'] )" in title_snippet
        assert "$util.qr($ctx.args.input.put('views', 0))" in views_snippet
        for resource_id, original in (
            ("CreatePostResolver", CREATE_TEMPLATE),
            ("UpdatePostResolver", UPDATE_TEMPLATE),
        ):
            assert resource_store.request_template(resource_id) == (
                views_snippet + "\n\n" + title_snippet + "\n\n" + original
            )

    def test_ignores_other_directives(
        self, model_directive: DirectiveNode, resource_store: InMemoryResourceStore
    ) -> None:
        parent = TypeDefinition(
            name="Post",
            directives=[model_directive],
            fields=[
                FieldDefinition(
                    name="title",
                    type_name="String",
                    directives=[DirectiveNode(name="deprecated")],
                )
            ],
        )

        assert ValidatorTransformer().transform_type(parent, resource_store) == []
        assert resource_store.request_template("CreatePostResolver") == CREATE_TEMPLATE

    def test_stops_at_first_invalid_directive(
        self, model_directive: DirectiveNode, resource_store: InMemoryResourceStore
    ) -> None:
        parent = TypeDefinition(
            name="Post",
            directives=[model_directive],
            fields=[
                FieldDefinition(
                    name="title",
                    type_name="String",
                    directives=[validator(enum_arg("type", "required"))],
                ),
                FieldDefinition(
                    name="body",
                    type_name="String",
                    directives=[validator(enum_arg("type", "integer"))],
                ),
            ],
        )

        with pytest.raises(InvalidDirectiveError, match="field 'body'"):
            ValidatorTransformer().transform_type(parent, resource_store)

        template = resource_store.request_template("CreatePostResolver")
        assert template is not None
        assert template.count("## [Start]") == 1


class TestDirectiveDefinition:
    def test_transformer_exposes_sdl(self) -> None:
        assert ValidatorTransformer.directive_definition == VALIDATOR_DIRECTIVE_SDL
        assert ValidatorTransformer.name == "ValidatorTransformer"
