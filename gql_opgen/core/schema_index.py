"""Queryable view over a schema's AST.

The schema is printed to SDL and parsed again so that schema type references
have the same node shapes as the ones found in operation documents.
"""

from graphql import (
    DocumentNode,
    EnumTypeDefinitionNode,
    FieldDefinitionNode,
    GraphQLSchema,
    InputObjectTypeDefinitionNode,
    InterfaceTypeDefinitionNode,
    ObjectTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    SchemaDefinitionNode,
    build_schema,
    parse,
    print_schema,
)


class SchemaIndex:
    """Lookup of object, interface, input object, enum and scalar definitions by name."""

    def __init__(self, schema: GraphQLSchema):
        self.document: DocumentNode = parse(print_schema(schema))
        self._objects: dict[str, ObjectTypeDefinitionNode] = {}
        self._interfaces: dict[str, InterfaceTypeDefinitionNode] = {}
        self._inputs: dict[str, InputObjectTypeDefinitionNode] = {}
        self._enums: dict[str, EnumTypeDefinitionNode] = {}
        self._scalars: dict[str, ScalarTypeDefinitionNode] = {}
        self._roots: dict[str, str] = {}
        self._index()

    @classmethod
    def from_sdl(cls, sdl: str) -> "SchemaIndex":
        """Build an index straight from schema SDL text."""
        return cls(build_schema(sdl))

    def _index(self):
        for definition in self.document.definitions:
            if isinstance(definition, ObjectTypeDefinitionNode):
                self._objects.setdefault(definition.name.value, definition)
            elif isinstance(definition, InterfaceTypeDefinitionNode):
                self._interfaces.setdefault(definition.name.value, definition)
            elif isinstance(definition, InputObjectTypeDefinitionNode):
                self._inputs.setdefault(definition.name.value, definition)
            elif isinstance(definition, EnumTypeDefinitionNode):
                self._enums.setdefault(definition.name.value, definition)
            elif isinstance(definition, ScalarTypeDefinitionNode):
                self._scalars.setdefault(definition.name.value, definition)
            elif isinstance(definition, SchemaDefinitionNode):
                for op_type in definition.operation_types:
                    self._roots[op_type.operation.value] = op_type.type.name.value

    def find_object_type(self, name: str | None) -> ObjectTypeDefinitionNode | None:
        if name is None:
            return None
        return self._objects.get(name)

    def find_interface_type(self, name: str | None) -> InterfaceTypeDefinitionNode | None:
        if name is None:
            return None
        return self._interfaces.get(name)

    def find_input_type(self, name: str | None) -> InputObjectTypeDefinitionNode | None:
        if name is None:
            return None
        return self._inputs.get(name)

    def find_enum_type(self, name: str | None) -> EnumTypeDefinitionNode | None:
        if name is None:
            return None
        return self._enums.get(name)

    def find_scalar_type(self, name: str | None) -> ScalarTypeDefinitionNode | None:
        """Return a custom scalar definition; built-in scalars are not indexed."""
        if name is None:
            return None
        return self._scalars.get(name)

    def find_fields(self, name: str | None) -> dict[str, FieldDefinitionNode] | None:
        """Return the field definitions of an object or interface type, or None."""
        definition = self.find_object_type(name) or self.find_interface_type(name)
        if definition is None:
            return None
        return {f.name.value: f for f in definition.fields or ()}

    def root_type(self, operation_type: str) -> ObjectTypeDefinitionNode | None:
        """Return the root object type for 'query', 'mutation' or 'subscription'."""
        if operation_type in self._roots:
            return self.find_object_type(self._roots[operation_type])
        for name, definition in self._objects.items():
            if name.lower() == operation_type.lower():
                return definition
        return None
