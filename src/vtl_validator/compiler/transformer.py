"""ValidatorTransformer: compile @validator directives into resolver templates.

For each @validator occurrence on a field of a @model type the transformer:

1. checks the owning type carries the @model marker directive,
2. extracts the directive arguments (parse_arguments),
3. generates the VTL snippet (generate),
4. prepends the snippet to the create and update request mapping
   templates of the type (MutationAugmenter).

Any failure raises InvalidDirectiveError before a template is touched.

Example:
    >>> store = InMemoryResourceStore()
    >>> store.add_resolver("CreatePostResolver", "{}")
    >>> transformer = ValidatorTransformer()
    >>> transformer.transform_type(post_type, store)
"""

from __future__ import annotations

import structlog

from vtl_validator.compiler.augmenter import MutationAugmenter, ResourceStore
from vtl_validator.compiler.extractor import parse_arguments
from vtl_validator.compiler.generator import generate
from vtl_validator.config import TransformerConfig
from vtl_validator.errors import InvalidDirectiveError
from vtl_validator.schemas.directive import (
    VALIDATOR_DIRECTIVE_SDL,
    DirectiveNode,
    FieldDefinition,
    TypeDefinition,
)

logger = structlog.get_logger(__name__)


class ValidatorTransformer:
    """Field-directive transformer for @validator.

    Attributes:
        config: Transformer configuration.
        directive_definition: SDL to register with the host schema.
    """

    name = "ValidatorTransformer"
    directive_definition = VALIDATOR_DIRECTIVE_SDL

    def __init__(self, config: TransformerConfig | None = None) -> None:
        """Initialize the transformer.

        Args:
            config: Transformer configuration. Defaults apply when omitted.
        """
        self.config = config or TransformerConfig()
        self._log = logger.bind(component="validator_transformer")

    def field(
        self,
        parent: TypeDefinition,
        definition: FieldDefinition,
        directive: DirectiveNode,
        store: ResourceStore,
    ) -> str:
        """Compile one @validator occurrence and splice it into the templates.

        Args:
            parent: Owning type definition.
            definition: Annotated field definition.
            directive: The @validator directive occurrence.
            store: Host resource store holding the resolver resources.

        Returns:
            The generated snippet.

        Raises:
            InvalidDirectiveError: If the parent type lacks the model marker
                or the directive cannot be compiled.
        """
        self.assert_model_directive(parent)

        args = parse_arguments(directive.arguments)
        try:
            snippet = generate(
                args.kind,
                definition.name,
                definition.type_name,
                args,
                self.config,
            )
        except InvalidDirectiveError as e:
            raise InvalidDirectiveError(
                e.user_message,
                type_name=parent.name,
                field_name=definition.name,
            ) from e

        updated = MutationAugmenter(store, self.config).augment(parent.name, snippet)
        self._log.info(
            "validator_directive_applied",
            type_name=parent.name,
            field=definition.name,
            validator=args.kind,
            filter=args.filter_kind,
            resolvers=updated,
        )
        return snippet

    def transform_type(self, parent: TypeDefinition, store: ResourceStore) -> list[str]:
        """Apply every @validator occurrence on a type's fields, in declaration order.

        Args:
            parent: Type definition to process.
            store: Host resource store holding the resolver resources.

        Returns:
            Generated snippets in the order they were applied.

        Raises:
            InvalidDirectiveError: On the first invalid occurrence.
        """
        snippets: list[str] = []
        for definition in parent.fields:
            for directive in definition.directives:
                if directive.name == self.config.directive_name:
                    snippets.append(self.field(parent, definition, directive, store))
        return snippets

    def assert_model_directive(self, parent: TypeDefinition) -> None:
        """Raise unless the parent type carries the model marker directive.

        Raises:
            InvalidDirectiveError: If the marker is missing.
        """
        if not parent.has_directive(self.config.model_directive):
            raise InvalidDirectiveError(
                f"{self.config.directive_name} directive requires "
                f"{self.config.model_directive} directive on parent type",
                type_name=parent.name,
            )
