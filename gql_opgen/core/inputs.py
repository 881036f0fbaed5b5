"""Expansion of input object types referenced by operation variables."""

from graphql import InputObjectTypeDefinitionNode, InputValueDefinitionNode, NonNullTypeNode

from .ir import IRClass, IRProperty
from .resolver import TypeNameResolver, UnresolvedType, named_type_name
from .schema_index import SchemaIndex


class InputTypeExpander:
    """Emits one class per input object type reachable from a type name.

    Classes are returned dependencies first. A visited set stops the
    expansion of recursive input types: a revisited type is only referenced
    by name, its class is never emitted twice.
    """

    def __init__(self, index: SchemaIndex, resolver: TypeNameResolver):
        self.index = index
        self.resolver = resolver

    def expand(self, type_name: str | None, seen: set[str] | None = None) -> tuple[list[IRClass], str | None]:
        """Expand an input type.

        Args:
            type_name: GraphQL name of the variable's named type
            seen: Names already expanded; pass a shared set to avoid
                  emitting the same class for several variables

        Returns:
            (classes, top-level class name). Scalars and enums give ([], None).
        """
        definition = self.index.find_input_type(type_name)
        if definition is None:
            return [], None
        if seen is None:
            seen = set()
        classes: list[IRClass] = []
        self._expand(definition, seen, classes)
        return classes, self.resolver.escape(definition.name.value)

    def _expand(
        self,
        definition: InputObjectTypeDefinitionNode,
        seen: set[str],
        classes: list[IRClass],
    ):
        name = definition.name.value
        if name in seen:
            return
        seen.add(name)

        cls = IRClass(name=self.resolver.escape(name))
        for input_field in definition.fields or ():
            nested = self.index.find_input_type(named_type_name(input_field.type))
            if nested is not None:
                self._expand(nested, seen, classes)
            cls.properties.append(self._property(input_field))
        classes.append(cls)

    def _property(self, input_field: InputValueDefinitionNode) -> IRProperty:
        field_name = input_field.name.value
        resolved = self.resolver.resolve(input_field.type, provenance="input")
        if isinstance(resolved, UnresolvedType):
            return IRProperty(
                name=self.resolver.escape(field_name),
                type_name=self.resolver.target.any_type,
                graphql_name=field_name,
                comment=resolved.detail,
            )
        return IRProperty(
            name=self.resolver.escape(field_name),
            type_name=resolved,
            graphql_name=field_name,
            required=isinstance(input_field.type, NonNullTypeNode),
        )
