"""Intermediate Representation (IR) for generated operation code.

This module defines dataclasses describing what to generate (classes,
properties, operation wrappers) independently of how a target language
prints them.
"""

from dataclasses import dataclass, field

from graphql import DocumentNode


@dataclass
class SourceDocument:
    """A parsed operation document together with the path it was read from."""
    path: str
    document: DocumentNode


@dataclass
class IRProperty:
    """A property of a generated class."""
    name: str  # Escaped identifier in the target language
    type_name: str
    graphql_name: str = ""  # Response key or variable name as written in GraphQL
    required: bool = False
    comment: str | None = None  # Diagnostic emitted next to the property

    def __post_init__(self):
        if not self.graphql_name:
            self.graphql_name = self.name


@dataclass
class IRClass:
    """A generated class: nested classes first, then properties."""
    name: str
    properties: list[IRProperty] = field(default_factory=list)
    classes: list["IRClass"] = field(default_factory=list)
    comment: str | None = None

    def find_class(self, name: str) -> "IRClass | None":
        """Look up a directly nested class by name."""
        for cls in self.classes:
            if cls.name == name:
                return cls
        return None

    def find_property(self, name: str) -> IRProperty | None:
        """Look up a property by escaped name or GraphQL name."""
        for prop in self.properties:
            if prop.name == name or prop.graphql_name == name:
                return prop
        return None


@dataclass
class IREnumValue:
    """A single value of a GraphQL enum."""
    name: str  # Escaped member name
    value: str  # Value as written in the schema


@dataclass
class IREnum:
    """A GraphQL enum referenced by the generated classes."""
    name: str
    values: list[IREnumValue] = field(default_factory=list)


@dataclass
class IROperationWrapper:
    """Everything generated for one named operation."""
    name: str  # e.g. "queryGetUser"
    operation_type: str  # 'query', 'mutation' or 'subscription'
    operation_name: str  # e.g. "GetUser"
    source: str  # Literal wire payload
    response: IRClass
    request: IRClass
    # Input object classes reachable from the variables, dependencies first
    input_classes: list[IRClass] = field(default_factory=list)
    document_path: str = ""


@dataclass
class IROutput:
    """All operations generated in one run."""
    operations: list[IROperationWrapper] = field(default_factory=list)
    enums: list[IREnum] = field(default_factory=list)

    def input_classes(self) -> list[IRClass]:
        """Return distinct input classes across operations in first-seen order."""
        seen: dict[str, IRClass] = {}
        for op in self.operations:
            for cls in op.input_classes:
                seen.setdefault(cls.name, cls)
        return list(seen.values())

    def get_operation(self, name: str) -> IROperationWrapper | None:
        for op in self.operations:
            if op.name == name:
                return op
        return None
