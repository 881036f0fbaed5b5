"""Core modules for GraphQL operation code generation."""

from .config import GeneratorConfig, load_config
from .emitter import ClassEmitter
from .generator import CodeGenerator, plugin
from .hooks import (
    AddHeaderHook,
    FilterOperationsHook,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
)
from .inputs import InputTypeExpander
from .ir import (
    IRClass,
    IROperationWrapper,
    IROutput,
    IRProperty,
    SourceDocument,
)
from .loader import DocumentLoader, SchemaLoader
from .operations import OperationWrapperEmitter, operation_source
from .resolver import TypeNameResolver, UnresolvedType, named_type_name
from .schema_index import SchemaIndex
from .targets import (
    CSharpTarget,
    PythonTarget,
    Target,
    TargetRegistry,
    escape_identifier,
)
from .typed_selection import (
    InvalidOperationTypeError,
    SelectionTypeAnnotator,
    TypedField,
)

__all__ = [
    # Config
    "GeneratorConfig",
    "load_config",
    # Targets
    "Target",
    "CSharpTarget",
    "PythonTarget",
    "TargetRegistry",
    "escape_identifier",
    # Hooks
    "PreGenerateHook",
    "PostGenerateHook",
    "AddHeaderHook",
    "FilterOperationsHook",
    "HookRunner",
    # IR types
    "IRClass",
    "IROperationWrapper",
    "IROutput",
    "IRProperty",
    "SourceDocument",
    # Loading
    "DocumentLoader",
    "SchemaLoader",
    # Resolution
    "SchemaIndex",
    "TypeNameResolver",
    "UnresolvedType",
    "named_type_name",
    "SelectionTypeAnnotator",
    "TypedField",
    "InvalidOperationTypeError",
    # Emission
    "ClassEmitter",
    "InputTypeExpander",
    "OperationWrapperEmitter",
    "operation_source",
    # Generator
    "CodeGenerator",
    "plugin",
]
