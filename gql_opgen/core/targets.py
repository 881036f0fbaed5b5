"""Target language profiles for operation code generation.

A target describes how GraphQL type names are spelled in the generated
language: the list container, the untyped fallback, how nullable values are
written, which identifiers are reserved and how they are escaped.

Example usage:
    from gql_opgen.core.targets import TargetRegistry

    registry = TargetRegistry()
    target = registry.get("csharp")
    target.list_type("string")  # "List<string>"

    # Register a custom target
    class KotlinTarget:
        name = "kotlin"
        template = "kotlin/operations.kt.j2"
        ...

    registry.register("kotlin", KotlinTarget())
"""

import keyword
from typing import Protocol, runtime_checkable


def escape_identifier(name: str, reserved_words, escape_format: str) -> str:
    """Escape an identifier if it is a reserved word (exact, case-sensitive match)."""
    if name in reserved_words:
        return escape_format.format(name)
    return name


@runtime_checkable
class Target(Protocol):
    """Protocol for output languages.

    Attributes:
        name: Registry key (e.g., "csharp")
        template: Template path relative to the templates directory
        any_type: Type used for properties whose type could not be resolved
        escape_format: Format string applied to reserved identifiers
        default_reserved_words: Identifiers escaped when the config sets none
        default_type_overrides: Override table used when the config sets none
        scalar_fallback: Type used for custom scalars without an override,
            or None to keep the scalar name
        validate_python: Whether rendered output must parse as Python
    """

    name: str
    template: str
    any_type: str
    escape_format: str
    default_reserved_words: frozenset
    default_type_overrides: dict
    scalar_fallback: str | None
    validate_python: bool

    def list_type(self, element: str) -> str:
        """Wrap an element type name in the list container."""
        ...

    def optional(self, type_name: str) -> str:
        """Spell a nullable type."""
        ...

    def identifier(self, name: str) -> str:
        """Adjust an already escaped name to a valid identifier."""
        ...


class CSharpTarget:
    """C# output, nullable-ness is carried by the override table (``int?``)."""

    name = "csharp"
    template = "csharp/operations.cs.j2"
    any_type = "object"
    escape_format = "@{}"
    scalar_fallback = None
    validate_python = False
    default_reserved_words = frozenset({"case", "private", "public"})
    default_type_overrides = {
        "String": "string",
        "String!": "string",
        "ID": "string",
        "ID!": "string",
        "AWSDateTime": "DateTime?",
        "AWSDateTime!": "DateTime",
        "Int": "int?",
        "Int!": "int",
        "Boolean": "bool?",
        "Boolean!": "bool",
        "Float": "float?",
        "Float!": "float",
    }

    def list_type(self, element: str) -> str:
        return f"List<{element}>"

    def optional(self, type_name: str) -> str:
        return type_name

    def identifier(self, name: str) -> str:
        return name


class PythonTarget:
    """Python output using pydantic models and ``typing`` containers."""

    name = "python"
    template = "python/operations.py.j2"
    any_type = "Any"
    escape_format = "{}_"
    scalar_fallback = "Any"
    validate_python = True
    default_reserved_words = frozenset(keyword.kwlist)
    default_type_overrides = {
        "String": "str",
        "ID": "str",
        "Int": "int",
        "Float": "float",
        "Boolean": "bool",
        "AWSDateTime": "datetime",
        "AWSDate": "date",
        "AWSJSON": "Any",
    }

    def list_type(self, element: str) -> str:
        return f"List[{element}]"

    def optional(self, type_name: str) -> str:
        if type_name.startswith("Optional[") or type_name == self.any_type:
            return type_name
        return f"Optional[{type_name}]"

    def identifier(self, name: str) -> str:
        # pydantic treats leading underscores as private attributes
        if name.startswith("_"):
            return name.lstrip("_") + "_"
        return name


class TargetRegistry:
    """Registry of output targets keyed by name.

    Example:
        registry = TargetRegistry()
        target = registry.get("python")
        if target:
            target.list_type("str")  # "List[str]"
    """

    def __init__(self):
        self._targets: dict[str, Target] = {}
        self._register_defaults()

    def _register_defaults(self):
        """Register built-in targets."""
        self.register("csharp", CSharpTarget())
        self.register("python", PythonTarget())

    def register(self, name: str, target: Target):
        """Register a target under a name."""
        self._targets[name] = target

    def get(self, name: str) -> Target | None:
        """Get the target registered under a name, or None."""
        return self._targets.get(name)

    def has(self, name: str) -> bool:
        """Check if a target is registered."""
        return name in self._targets

    def names(self) -> list[str]:
        """Return registered target names."""
        return sorted(self._targets)
