"""Splice validator snippets into mutation request mapping templates.

The host pipeline owns the resolver resources; this module reads the
create and update resolver of a @model type from a ResourceStore, prepends
the snippet to its request mapping template and writes it back. A type
without one of the resolvers is skipped for that operation.
"""

from __future__ import annotations

import copy
from abc import abstractmethod
from typing import Any, Protocol, runtime_checkable

import structlog

from vtl_validator.config import TransformerConfig

logger = structlog.get_logger(__name__)

SNIPPET_SEPARATOR = "\n\n"


def prepend_snippet(template: str, snippet: str) -> str:
    """Return ``template`` with ``snippet`` and a blank line in front of it.

    Args:
        template: Current request mapping template text.
        snippet: Snippet to place before it.

    Returns:
        New template text. Repeated calls stack newest-first.

    Example:
        >>> prepend_snippet("{}", "## check")
        '## check\\n\\n{}'
    """
    return snippet + SNIPPET_SEPARATOR + template


@runtime_checkable
class ResourceStore(Protocol):
    """Protocol for the host's resolver resource map.

    Resources are CloudFormation-style dictionaries; the request mapping
    template lives at ``resource["Properties"]["RequestMappingTemplate"]``.
    """

    @abstractmethod
    def get_resource(self, resource_id: str) -> dict[str, Any] | None:
        """Return the resource for ``resource_id`` or None if it does not exist."""
        ...

    @abstractmethod
    def set_resource(self, resource_id: str, resource: dict[str, Any]) -> None:
        """Store ``resource`` under ``resource_id``."""
        ...


class InMemoryResourceStore:
    """Dictionary-backed ResourceStore.

    Example:
        >>> store = InMemoryResourceStore()
        >>> store.add_resolver("CreatePostResolver", "{}")
        >>> store.request_template("CreatePostResolver")
        '{}'
    """

    def __init__(self, resources: dict[str, dict[str, Any]] | None = None) -> None:
        self.resources: dict[str, dict[str, Any]] = dict(resources or {})

    def get_resource(self, resource_id: str) -> dict[str, Any] | None:
        resource = self.resources.get(resource_id)
        return copy.deepcopy(resource) if resource is not None else None

    def set_resource(self, resource_id: str, resource: dict[str, Any]) -> None:
        self.resources[resource_id] = copy.deepcopy(resource)

    def add_resolver(self, resource_id: str, request_template: str) -> None:
        """Register a resolver resource with the given request mapping template."""
        self.set_resource(
            resource_id,
            {
                "Type": "AWS::AppSync::Resolver",
                "Properties": {"RequestMappingTemplate": request_template},
            },
        )

    def request_template(self, resource_id: str) -> str | None:
        """Return the request mapping template of a resource, if present."""
        resource = self.resources.get(resource_id)
        if resource is None:
            return None
        template: str = resource["Properties"]["RequestMappingTemplate"]
        return template


class MutationAugmenter:
    """Prepend snippets to the create and update resolvers of a type.

    Attributes:
        store: Host resource store.
        config: Transformer configuration naming the resolver resources.

    Example:
        >>> augmenter = MutationAugmenter(store)
        >>> augmenter.augment("Post", snippet)
        ['CreatePostResolver', 'UpdatePostResolver']
    """

    def __init__(self, store: ResourceStore, config: TransformerConfig | None = None) -> None:
        self.store = store
        self.config = config or TransformerConfig()
        self._log = logger.bind(component="mutation_augmenter")

    def augment(self, type_name: str, snippet: str) -> list[str]:
        """Prepend a snippet to every existing mutation resolver of a type.

        Calling this twice with the same snippet stacks two copies.

        Args:
            type_name: Name of the @model type.
            snippet: Snippet text.

        Returns:
            Resource ids of the resolvers that were updated, create first.
        """
        updated: list[str] = []
        for resource_id in self.config.resolver_ids(type_name):
            if self.augment_resolver(resource_id, snippet):
                updated.append(resource_id)
        return updated

    def augment_resolver(self, resource_id: str, snippet: str) -> bool:
        """Prepend a snippet to one resolver's request mapping template.

        Args:
            resource_id: Resolver resource id.
            snippet: Snippet text.

        Returns:
            True if the resolver exists and was updated, False otherwise.
        """
        resource = self.store.get_resource(resource_id)
        if resource is None:
            self._log.debug("resolver_template_missing", resource_id=resource_id)
            return False

        properties = resource.setdefault("Properties", {})
        properties["RequestMappingTemplate"] = prepend_snippet(
            properties.get("RequestMappingTemplate", ""), snippet
        )
        self.store.set_resource(resource_id, resource)

        self._log.debug("resolver_template_augmented", resource_id=resource_id)
        return True
