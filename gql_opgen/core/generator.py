"""Code generator for GraphQL operations.

Builds the IR for every named operation and renders it with the Jinja2
template of the configured target.

Supports custom templates via the template_dir parameter:
    generator = CodeGenerator(schema, documents, template_dir="./my_templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

import ast
import logging
import os
from pathlib import Path
from typing import Any

from graphql import GraphQLSchema, OperationDefinitionNode
from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .config import GeneratorConfig
from .hooks import HookRunner
from .ir import IREnum, IREnumValue, IROutput, SourceDocument
from .naming import csharp_verbatim, pascal_case, safe_comment, snake_case
from .operations import OperationWrapperEmitter
from .resolver import TypeNameResolver
from .schema_index import SchemaIndex
from .targets import TargetRegistry
from .typed_selection import collect_fragments

log = logging.getLogger(__name__)


class CodeGenerator:
    """Generates client operation code from a schema and operation documents.

    Each call to ``build`` is a full, stateless pass: a fresh SchemaIndex
    is built and every document is traversed again.

    Example:
        generator = CodeGenerator(
            schema=build_schema(sdl),
            documents=[SourceDocument("ops.graphql", parse(ops))],
            config=GeneratorConfig(target="python"),
        )
        code = generator.generate_code()
    """

    def __init__(
        self,
        schema: GraphQLSchema,
        documents: list[SourceDocument],
        config: GeneratorConfig | None = None,
        template_dir: str | None = None,
        hooks: HookRunner | None = None,
        registry: TargetRegistry | None = None,
    ):
        """Initialize the code generator.

        Args:
            schema: The schema the operations are written against
            documents: Parsed operation documents with their paths
            config: Generator options (target, override table, reserved words)
            template_dir: Optional directory with custom Jinja2 templates.
                          Templates here override the built-in templates.
            hooks: Pre/post generation hooks
            registry: Target registry, for custom targets
        """
        self.schema = schema
        self.documents = list(documents)
        self.config = config or GeneratorConfig()
        self.target = self.config.get_target(registry)
        self.hooks = hooks or HookRunner()

        # Build template loader - custom templates take precedence
        loaders = []
        if template_dir:
            template_path = Path(template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("gql_opgen", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        # Register custom filters
        self.env.filters["snake_case"] = snake_case
        self.env.filters["pascal_case"] = pascal_case
        self.env.filters["repr"] = repr
        self.env.filters["safe_comment"] = safe_comment
        self.env.filters["csharp_verbatim"] = csharp_verbatim

    def make_resolver(self, index: SchemaIndex | None = None) -> TypeNameResolver:
        """Build a resolver from the config, applying the target's defaults."""
        return TypeNameResolver(
            self.target,
            type_overrides=self.config.effective_type_overrides(self.target),
            reserved_words=self.config.effective_reserved_words(self.target),
            index=index,
        )

    def build(self) -> IROutput:
        """Build the IR for every named operation in every document."""
        index = SchemaIndex(self.schema)
        resolver = self.make_resolver(index)
        emitter = OperationWrapperEmitter(index, resolver)
        output = IROutput()

        for source in self.hooks.run_pre_hooks(self.documents):
            fragments = collect_fragments(source.document)
            for definition in source.document.definitions:
                if not isinstance(definition, OperationDefinitionNode):
                    continue
                wrapper = emitter.emit(definition, fragments, source.path)
                if wrapper is None:
                    continue
                if output.get_operation(wrapper.name) is not None:
                    log.warning("Operation %s is defined more than once (%s)", wrapper.name, source.path)
                output.operations.append(wrapper)
        output.enums = self._emit_enums(index, resolver)
        return output

    def _emit_enums(self, index: SchemaIndex, resolver: TypeNameResolver) -> list[IREnum]:
        enums = []
        for name in resolver.enum_names:
            definition = index.find_enum_type(name)
            values = [
                IREnumValue(name=resolver.escape(v.name.value), value=v.name.value)
                for v in definition.values or ()
            ]
            enums.append(IREnum(name=resolver.escape(name), values=values))
        return enums

    @property
    def output_filename(self) -> str:
        """Default file name derived from the target template (e.g. operations.cs)."""
        return os.path.basename(self.target.template).removesuffix(".j2")

    def render(self, output: IROutput, filename: str | None = None) -> str:
        """Render an IROutput with the target template and run post hooks."""
        template_name = self.target.template
        template = self.env.get_template(template_name)
        content = template.render(self._template_context(output))
        content = self.hooks.run_post_hooks(filename or self.output_filename, content)

        # Validate Python syntax
        if self.target.validate_python:
            try:
                ast.parse(content)
            except SyntaxError as e:
                raise ValueError(
                    f"Generated invalid Python: {e}\n"
                    f"Template: {template_name}"
                )
        return content

    def _template_context(self, output: IROutput) -> dict[str, Any]:
        return {
            "config": self.config,
            "target": self.target,
            "operations": output.operations,
            "enums": output.enums,
            "input_classes": output.input_classes(),
        }

    def generate_code(self, filename: str | None = None) -> str:
        """Build and render all operations into one output unit."""
        return self.render(self.build(), filename)

    def generate(self, output_path: str) -> str:
        """Generate code and write it to output_path."""
        content = self.generate_code(os.path.basename(output_path))
        parent = os.path.dirname(output_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(output_path, "w") as f:
            f.write(content)
        return content


def plugin(
    schema: GraphQLSchema,
    documents: list[SourceDocument | dict[str, Any]],
    config: GeneratorConfig | dict[str, Any] | None = None,
) -> str:
    """Generate operation code in one call.

    Documents may be SourceDocument values or dicts with "path" and
    "document" keys; config may be a GeneratorConfig or a plain dict using
    either the field names or the plugin keys ("netKeywords", "netTypes").
    """
    if isinstance(config, dict):
        config = GeneratorConfig.model_validate(config)
    sources = [
        d if isinstance(d, SourceDocument) else SourceDocument(path=d["path"], document=d["document"])
        for d in documents
    ]
    return CodeGenerator(schema, sources, config).generate_code()
