"""Typed view of an operation's selection tree.

Walks a selection set top-down and pairs every selected field with the type
reference declared for it in the schema. The result is a parallel tree of
``TypedField`` values; the document and schema ASTs are never modified.

Fragment spreads are inlined from the document's fragment definitions and
inline fragments are flattened, each resolved against its type condition.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from graphql import (
    DocumentNode,
    FieldNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    InlineFragmentNode,
    NamedTypeNode,
    NameNode,
    NonNullTypeNode,
    OperationDefinitionNode,
    SelectionSetNode,
    TypeNode,
)

from .resolver import UnresolvedType, named_type_name
from .schema_index import SchemaIndex

log = logging.getLogger(__name__)

OPERATION_TYPES = ("query", "mutation", "subscription")

TYPENAME_TYPE = NonNullTypeNode(type=NamedTypeNode(name=NameNode(value="String")))


class InvalidOperationTypeError(ValueError):
    """Raised for an operation whose kind is not query, mutation or subscription."""

    def __init__(self, operation_type: Any):
        self.operation_type = operation_type
        super().__init__(f"Invalid Operation Type {operation_type}")


@dataclass
class TypedField:
    """A selected field paired with its resolved schema type."""
    node: FieldNode | FragmentSpreadNode
    response_key: str
    type_ref: TypeNode | UnresolvedType
    children: list["TypedField"] | None = None  # None for leaf selections

    @property
    def is_leaf(self) -> bool:
        return self.children is None

    @property
    def field_name(self) -> str:
        return self.node.name.value


@dataclass
class _CollectedField:
    node: FieldNode
    parent_type: str | None
    selection_sets: list[SelectionSetNode] = field(default_factory=list)
    diagnostic: UnresolvedType | None = None


def operation_type_of(operation: OperationDefinitionNode) -> str:
    """Return the operation kind as a string, rejecting unknown kinds."""
    value = getattr(operation.operation, "value", operation.operation)
    if value not in OPERATION_TYPES:
        raise InvalidOperationTypeError(value)
    return value


def collect_fragments(document: DocumentNode) -> dict[str, FragmentDefinitionNode]:
    """Return the document's fragment definitions by name."""
    return {
        definition.name.value: definition
        for definition in document.definitions
        if isinstance(definition, FragmentDefinitionNode)
    }


class SelectionTypeAnnotator:
    """Resolves the schema type of every field in a selection tree."""

    def __init__(
        self,
        index: SchemaIndex,
        fragments: dict[str, FragmentDefinitionNode] | None = None,
    ):
        self.index = index
        self.fragments = fragments or {}

    def annotate_operation(self, operation: OperationDefinitionNode) -> list[TypedField]:
        """Annotate the top-level selections against the operation's root type."""
        operation_type = operation_type_of(operation)
        root = self.index.root_type(operation_type)
        if root is None:
            log.debug("Schema has no root type for %s operations", operation_type)
        root_name = root.name.value if root else None
        return self.annotate_selections([operation.selection_set], root_name)

    def annotate_selections(
        self,
        selection_sets: list[SelectionSetNode],
        parent_type: str | None,
    ) -> list[TypedField]:
        """Annotate the merged fields of one or more selection sets."""
        collected: dict[str, _CollectedField] = {}
        for selection_set in selection_sets:
            self._collect(selection_set, parent_type, collected, frozenset())

        typed = []
        for key, entry in collected.items():
            if entry.diagnostic is not None:
                typed.append(TypedField(entry.node, key, entry.diagnostic))
                continue
            type_ref = self._field_type(entry.node, entry.parent_type)
            children = None
            if entry.selection_sets:
                child_parent = (
                    None if isinstance(type_ref, UnresolvedType)
                    else named_type_name(type_ref)
                )
                children = self.annotate_selections(entry.selection_sets, child_parent)
            typed.append(TypedField(entry.node, key, type_ref, children))
        return typed

    def _collect(
        self,
        selection_set: SelectionSetNode,
        parent_type: str | None,
        collected: dict[str, _CollectedField],
        visited: frozenset,
    ):
        for selection in selection_set.selections:
            if isinstance(selection, FieldNode):
                key = selection.alias.value if selection.alias else selection.name.value
                entry = collected.get(key)
                if entry is None:
                    entry = collected[key] = _CollectedField(selection, parent_type)
                if selection.selection_set:
                    entry.selection_sets.append(selection.selection_set)
            elif isinstance(selection, InlineFragmentNode):
                condition = (
                    selection.type_condition.name.value
                    if selection.type_condition else parent_type
                )
                self._collect(selection.selection_set, condition, collected, visited)
            elif isinstance(selection, FragmentSpreadNode):
                name = selection.name.value
                if name in visited:
                    continue
                fragment = self.fragments.get(name)
                if fragment is None:
                    log.debug("Fragment %s is not defined in the document", name)
                    collected.setdefault(name, _CollectedField(
                        selection, parent_type,
                        diagnostic=UnresolvedType(
                            "fragment", f"fragment '{name}' is not defined in the document"
                        ),
                    ))
                    continue
                self._collect(
                    fragment.selection_set,
                    fragment.type_condition.name.value,
                    collected,
                    visited | {name},
                )

    def _field_type(self, node: FieldNode, parent_type: str | None) -> TypeNode | UnresolvedType:
        name = node.name.value
        if name == "__typename":
            return TYPENAME_TYPE
        if parent_type is None:
            return UnresolvedType("field", f"type of the parent of field '{name}' is unknown")
        fields = self.index.find_fields(parent_type)
        if fields is None:
            return UnresolvedType(
                "field", f"type '{parent_type}' is not an object or interface type"
            )
        definition = fields.get(name)
        if definition is None:
            log.debug("Field %s not found in type %s", name, parent_type)
            return UnresolvedType("field", f"field '{name}' not found in type '{parent_type}'")
        return definition.type
