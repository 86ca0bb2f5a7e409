"""Compiler module for vtl-validator.

- parse_arguments: directive arguments -> ValidatorArguments
- generate / resolve_rule / render_rule: ValidatorArguments -> VTL snippet
- MutationAugmenter / prepend_snippet: splice snippets into resolver templates
- ValidatorTransformer: the three stages for one directive occurrence
"""

from __future__ import annotations

from vtl_validator.compiler.augmenter import (
    InMemoryResourceStore,
    MutationAugmenter,
    ResourceStore,
    prepend_snippet,
)
from vtl_validator.compiler.extractor import parse_arguments
from vtl_validator.compiler.generator import generate, render_rule, resolve_rule
from vtl_validator.compiler.transformer import ValidatorTransformer

__all__: list[str] = [
    # Extraction
    "parse_arguments",
    # Generation
    "generate",
    "resolve_rule",
    "render_rule",
    # Augmentation
    "InMemoryResourceStore",
    "MutationAugmenter",
    "ResourceStore",
    "prepend_snippet",
    # Transformer
    "ValidatorTransformer",
]
