"""Mapping of GraphQL type references to target language type names."""

from dataclasses import dataclass
from typing import Any

from graphql import ListTypeNode, NamedTypeNode, NonNullTypeNode

from .targets import Target, escape_identifier


@dataclass(frozen=True)
class UnresolvedType:
    """Placeholder for a type that could not be resolved.

    ``provenance`` names the call site (e.g. "field", "variable") and
    ``detail`` carries a human readable diagnostic.
    """
    provenance: str
    detail: str = ""

    def __str__(self) -> str:
        return "unknown"


def named_type_name(type_node: Any) -> str | None:
    """Unwrap list and non-null wrappers down to the named type's name."""
    while isinstance(type_node, (ListTypeNode, NonNullTypeNode)):
        type_node = type_node.type
    if isinstance(type_node, NamedTypeNode) and type_node.name is not None:
        return type_node.name.value
    return None


def type_signature(type_node: Any) -> str | None:
    """Print a type reference as written in GraphQL, e.g. ``[String!]!``."""
    if isinstance(type_node, NonNullTypeNode):
        inner = type_signature(type_node.type)
        return f"{inner}!" if inner else None
    if isinstance(type_node, ListTypeNode):
        inner = type_signature(type_node.type)
        return f"[{inner}]" if inner else None
    if isinstance(type_node, NamedTypeNode) and type_node.name is not None:
        return type_node.name.value
    return None


def _element_node(type_node):
    """Strip every list wrapper, keeping the element's own non-null marker."""
    current = type_node
    while True:
        inner = current.type if isinstance(current, NonNullTypeNode) else current
        if not isinstance(inner, ListTypeNode):
            return current
        current = inner.type


class TypeNameResolver:
    """Resolves GraphQL type references using an override table.

    The override table is keyed by printed type signatures: ``"Int"`` for a
    nullable reference and ``"Int!"`` for a required one. Required lookups
    fall back to the nullable key when no dedicated entry exists.

    With a SchemaIndex, enum names met during resolution are recorded in
    ``enum_names`` and custom scalars without an override resolve to the
    target's ``scalar_fallback``.
    """

    def __init__(
        self,
        target: Target,
        type_overrides: dict[str, str] | None = None,
        reserved_words=None,
        index=None,
    ):
        self.target = target
        self.index = index
        # Enum names met while resolving, in first-seen order
        self.enum_names: list[str] = []
        self.type_overrides = (
            dict(target.default_type_overrides) if type_overrides is None
            else dict(type_overrides)
        )
        self.reserved_words = (
            frozenset(target.default_reserved_words) if reserved_words is None
            else frozenset(reserved_words)
        )

    def escape(self, name: str) -> str:
        """Escape an identifier derived from the schema or a document."""
        escaped = escape_identifier(name, self.reserved_words, self.target.escape_format)
        return self.target.identifier(escaped)

    def resolve(
        self,
        type_node: Any,
        base_only: bool = False,
        leaf: str | None = None,
        provenance: str = "type",
    ) -> str | UnresolvedType:
        """Return the target type name for a type reference.

        Args:
            type_node: A NamedTypeNode, ListTypeNode or NonNullTypeNode
            base_only: Drop list wrappers and return the element type only
            leaf: Use this name for the innermost named type instead of
                  looking it up (the class generated for a selection set)
            provenance: Call site recorded on unresolved results
        """
        if type_signature(type_node) is None:
            return UnresolvedType(provenance, f"cannot resolve type reference {type_node!r}")
        if base_only:
            type_node = _element_node(type_node)
        return self._resolve(type_node, leaf, provenance)

    def _resolve(self, node, leaf, provenance):
        required = isinstance(node, NonNullTypeNode)
        if leaf is None:
            override = self.type_overrides.get(type_signature(node))
            if override is not None:
                return override if required else self.target.optional(override)

        resolved = self._resolve_inner(node.type if required else node, leaf, provenance)
        if required or isinstance(resolved, UnresolvedType):
            return resolved
        return self.target.optional(resolved)

    def _resolve_inner(self, node, leaf, provenance):
        if isinstance(node, NamedTypeNode):
            if leaf is not None:
                return leaf
            name = node.name.value
            if name in self.type_overrides:
                return self.type_overrides[name]
            if self.index is not None:
                if self.index.find_enum_type(name) is not None:
                    if name not in self.enum_names:
                        self.enum_names.append(name)
                elif (
                    self.target.scalar_fallback is not None
                    and self.index.find_scalar_type(name) is not None
                ):
                    return self.target.scalar_fallback
            return self.escape(name)
        if isinstance(node, ListTypeNode):
            element = self._resolve(node.type, leaf, provenance)
            if isinstance(element, UnresolvedType):
                return element
            return self.target.list_type(element)
        # NonNull directly inside NonNull is not valid GraphQL
        return UnresolvedType(provenance, f"unexpected type node {type(node).__name__}")
