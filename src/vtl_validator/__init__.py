"""vtl-validator: compile @validator directives into VTL resolver snippets.

This package provides:
- ValidatorTransformer: compile a @validator occurrence and splice it into
  the create/update request mapping templates of its @model type
- generate: the directive-to-snippet compiler
- TransformerConfig: host-facing conventions (directive names, resolver ids)
"""

from __future__ import annotations

__version__ = "0.1.0"

from vtl_validator.compiler import (
    InMemoryResourceStore,
    MutationAugmenter,
    ResourceStore,
    ValidatorTransformer,
    generate,
    parse_arguments,
    prepend_snippet,
)
from vtl_validator.config import TransformerConfig
from vtl_validator.errors import InvalidDirectiveError, ValidatorError
from vtl_validator.schemas import (
    VALIDATOR_DIRECTIVE_SDL,
    FilterName,
    ValidatorArguments,
    ValidatorName,
)

__all__ = [
    "__version__",
    # Transformer
    "ValidatorTransformer",
    "TransformerConfig",
    # Stages
    "parse_arguments",
    "generate",
    "prepend_snippet",
    "MutationAugmenter",
    "ResourceStore",
    "InMemoryResourceStore",
    # Errors
    "ValidatorError",
    "InvalidDirectiveError",
    # Schema
    "VALIDATOR_DIRECTIVE_SDL",
    "FilterName",
    "ValidatorName",
    "ValidatorArguments",
]
