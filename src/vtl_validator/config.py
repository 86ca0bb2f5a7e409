"""Transformer configuration for vtl-validator.

TransformerConfig controls the host-facing conventions of the compiler:
directive names, the VTL reference holding mutation input, the error type
passed to $util.error(), and the naming of resolver resources.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from vtl_validator.schemas.directive import GRAPHQL_NAME_PATTERN

VTL_REFERENCE_PATTERN = re.compile(r"^\$[A-Za-z][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$")


class TransformerConfig(BaseModel):
    """Configuration for @validator compilation.

    Attributes:
        directive_name: Name of the field directive to compile.
        model_directive: Marker directive the owning type must carry.
        input_path: VTL reference to the mutation input map.
        error_type: Error type passed as second argument to $util.error().
        create_resolver_id: Format string for the create resolver resource id.
        update_resolver_id: Format string for the update resolver resource id.
        inline_conditionals: Emit ``#if( p ) body #end`` on one line when True,
            as an indented block otherwise.

    Example:
        >>> config = TransformerConfig(error_type="ValidationError")
        >>> config.resolver_ids("Post")
        ('CreatePostResolver', 'UpdatePostResolver')
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    directive_name: str = Field(
        default="validator",
        description="Name of the field directive to compile",
    )
    model_directive: str = Field(
        default="model",
        description="Marker directive required on the owning type",
    )
    input_path: str = Field(
        default="$ctx.args.input",
        description="VTL reference to the mutation input map",
    )
    error_type: str = Field(
        default="InvalidArgumentsError",
        min_length=1,
        max_length=100,
        description="Error type passed to $util.error()",
    )
    create_resolver_id: str = Field(
        default="Create{type_name}Resolver",
        description="Resource id format of the create mutation resolver",
    )
    update_resolver_id: str = Field(
        default="Update{type_name}Resolver",
        description="Resource id format of the update mutation resolver",
    )
    inline_conditionals: bool = Field(
        default=True,
        description="Emit single-line #if directives",
    )

    @field_validator("directive_name", "model_directive")
    @classmethod
    def validate_directive_name(cls, v: str) -> str:
        """Validate directive names are GraphQL names.

        Raises:
            ValueError: If the name is not a valid GraphQL name.
        """
        if not GRAPHQL_NAME_PATTERN.match(v):
            raise ValueError(f"'{v}' is not a valid GraphQL name")
        return v

    @field_validator("input_path")
    @classmethod
    def validate_input_path(cls, v: str) -> str:
        """Validate input_path is a dotted VTL reference such as $ctx.args.input."""
        if not VTL_REFERENCE_PATTERN.match(v):
            raise ValueError(f"'{v}' is not a VTL reference")
        return v

    @field_validator("error_type")
    @classmethod
    def validate_error_type(cls, v: str) -> str:
        """Validate error_type can be embedded verbatim in a double-quoted VTL string.

        Raises:
            ValueError: If the value contains a quote, '$', '#' or a newline.
        """
        if any(c in v for c in "\"$#\n"):
            raise ValueError("error_type must not contain quotes, '$', '#' or newlines")
        return v

    @field_validator("create_resolver_id", "update_resolver_id")
    @classmethod
    def validate_resolver_id(cls, v: str) -> str:
        """Validate resolver id templates reference the type name.

        Raises:
            ValueError: If the template lacks a {type_name} placeholder or
                contains other placeholders.
        """
        if "{type_name}" not in v:
            raise ValueError("Resolver id template must contain '{type_name}'")
        try:
            v.format(type_name="T")
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(f"Invalid resolver id template: {e}") from e
        return v

    def resolver_ids(self, type_name: str) -> tuple[str, str]:
        """Return the (create, update) resolver resource ids for a type.

        Args:
            type_name: Name of the @model type.

        Returns:
            Tuple of create and update resolver resource ids.
        """
        return (
            self.create_resolver_id.format(type_name=type_name),
            self.update_resolver_id.format(type_name=type_name),
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> TransformerConfig:
        """Load and validate TransformerConfig from a YAML file.

        An empty file yields the default configuration.

        Args:
            path: Path to the YAML file.

        Returns:
            Validated TransformerConfig instance.

        Raises:
            FileNotFoundError: If file doesn't exist.
            yaml.YAMLError: If YAML syntax is invalid.
            pydantic.ValidationError: If schema validation fails.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        with path.open("r") as f:
            data: dict[str, Any] | None = yaml.safe_load(f)

        return cls.model_validate(data or {})
