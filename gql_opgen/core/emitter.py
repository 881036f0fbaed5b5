"""Lowering of typed selection trees into nested class models.

Every selection set becomes a class and every selected field a property.
Children are emitted before their parent, so a parent class always holds
the finished classes of its nested selections ahead of the properties that
reference them.
"""

import logging

from graphql import FieldNode, NonNullTypeNode, OperationDefinitionNode

from .ir import IRClass, IRProperty
from .naming import pascal_case
from .resolver import TypeNameResolver, UnresolvedType, named_type_name
from .typed_selection import TypedField

log = logging.getLogger(__name__)


class ClassEmitter:
    """Builds IRClass trees from typed selections."""

    RESPONSE_CLASS = "Response"

    def __init__(self, resolver: TypeNameResolver):
        self.resolver = resolver
        self.target = resolver.target

    def emit_response(self, typed_fields: list[TypedField]) -> IRClass:
        """Emit the ``Response`` class for an operation's root selection set."""
        return self.emit_class(self.RESPONSE_CLASS, typed_fields)

    def emit_for_parent(
        self,
        parent,
        typed_fields: list[TypedField],
        type_ref=None,
        name: str | None = None,
    ) -> IRClass:
        """Emit the class for a selection set given the node that owns it.

        Operations produce ``Response``; fields produce a class named ``name``
        or, without one, after their resolved type (their PascalCased response
        key when the type is unknown). Any other owner is not supported and
        yields a diagnostic class.
        """
        if isinstance(parent, OperationDefinitionNode):
            return self.emit_response(typed_fields)
        if isinstance(parent, FieldNode):
            if name is None:
                key = parent.alias.value if parent.alias else parent.name.value
                name = self._base_class_name(TypedField(parent, key, type_ref, typed_fields))
            return self.emit_class(name, typed_fields)
        kind = getattr(parent, "kind", type(parent).__name__)
        log.debug("Selection set under %s is not supported", kind)
        cls = self.emit_class(name or pascal_case(str(kind)), typed_fields)
        cls.comment = f"NOT SUPPORTED {kind}"
        return cls

    def emit_class(self, name: str, typed_fields: list[TypedField]) -> IRClass:
        cls = IRClass(name=name)
        # Nested classes share a scope with the properties of this class
        used_names = {name} | {self.resolver.escape(t.response_key) for t in typed_fields}
        for typed in typed_fields:
            if typed.is_leaf:
                cls.properties.append(self._leaf_property(typed))
                continue
            child_name = self._unique_class_name(typed, used_names)
            child = self.emit_for_parent(typed.node, typed.children, typed.type_ref, child_name)
            cls.classes.append(child)
            cls.properties.append(self._object_property(typed, child.name))
        return cls

    def _base_class_name(self, typed: TypedField) -> str:
        type_name = None
        if not isinstance(typed.type_ref, UnresolvedType):
            type_name = named_type_name(typed.type_ref)
        return self.resolver.escape(type_name or pascal_case(typed.response_key))

    def _unique_class_name(self, typed: TypedField, used_names: set[str]) -> str:
        """Name a nested class with a name still free in the enclosing scope."""
        base = self._base_class_name(typed)
        candidate = base
        if candidate in used_names:
            candidate = f"{pascal_case(typed.response_key)}{base}"
        counter = 2
        while candidate in used_names:
            candidate = f"{base}{counter}"
            counter += 1
        used_names.add(candidate)
        return candidate

    def _leaf_property(self, typed: TypedField) -> IRProperty:
        name = self.resolver.escape(typed.response_key)
        if isinstance(typed.type_ref, UnresolvedType):
            return self._untyped_property(name, typed.response_key, typed.type_ref)
        resolved = self.resolver.resolve(typed.type_ref, provenance="selection")
        if isinstance(resolved, UnresolvedType):
            return self._untyped_property(name, typed.response_key, resolved)
        return IRProperty(
            name=name,
            type_name=resolved,
            graphql_name=typed.response_key,
            required=isinstance(typed.type_ref, NonNullTypeNode),
        )

    def _object_property(self, typed: TypedField, class_name: str) -> IRProperty:
        name = self.resolver.escape(typed.response_key)
        if isinstance(typed.type_ref, UnresolvedType):
            return IRProperty(
                name=name,
                type_name=self.target.optional(class_name),
                graphql_name=typed.response_key,
                comment=typed.type_ref.detail,
            )
        resolved = self.resolver.resolve(typed.type_ref, leaf=class_name, provenance="selection")
        return IRProperty(
            name=name,
            type_name=str(resolved),
            graphql_name=typed.response_key,
            required=isinstance(typed.type_ref, NonNullTypeNode),
        )

    def _untyped_property(self, name: str, graphql_name: str, unresolved: UnresolvedType) -> IRProperty:
        return IRProperty(
            name=name,
            type_name=self.target.any_type,
            graphql_name=graphql_name,
            comment=unresolved.detail or str(unresolved),
        )
