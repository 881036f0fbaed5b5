"""Command-line interface for gql-opgen."""

import logging
import shutil
import tarfile
import tempfile
import zipfile
from pathlib import Path

import click

from .core.config import GeneratorConfig, load_config
from .core.generator import CodeGenerator
from .core.hooks import AddHeaderHook, HookRunner
from .core.loader import DocumentLoader, SchemaLoader
from .core.targets import TargetRegistry


def extract_archive(archive_path: Path) -> str:
    """Extract archive to temp directory. Returns path to extracted content."""
    temp_dir = tempfile.mkdtemp()
    if archive_path.suffix == ".zip":
        with zipfile.ZipFile(archive_path, "r") as zip_ref:
            zip_ref.extractall(temp_dir)
    elif archive_path.name.endswith((".tar.gz", ".tgz")):
        with tarfile.open(archive_path, "r:gz") as tar_ref:
            tar_ref.extractall(temp_dir)
    else:
        shutil.rmtree(temp_dir)
        raise ValueError(f"Unsupported archive format: {archive_path.suffix}")
    return temp_dir


@click.group()
@click.version_option()
def main():
    """GraphQL operation code generator.

    Generate typed request/response classes from GraphQL operations.
    """
    pass


@main.command()
@click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True),
    help="Path to GraphQL schema file, directory, or archive (.zip, .tar.gz, .tgz).",
)
@click.option(
    "--documents",
    "-d",
    required=True,
    type=click.Path(exists=True),
    help="Path to an operation document or a directory of .graphql/.gql files.",
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(),
    help="Output file for the generated code (e.g., Operations.cs).",
)
@click.option(
    "--target",
    "-t",
    type=click.Choice(TargetRegistry().names()),
    default=None,
    help="Output language (overrides the config file; default: csharp).",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True),
    default=None,
    help="JSON config file with netKeywords/netTypes and other options.",
)
@click.option(
    "--namespace",
    default=None,
    help="Namespace for C# output (default: AppSync.Operations).",
)
@click.option(
    "--header",
    default=None,
    help="Header text prepended to the generated file.",
)
@click.option(
    "--template-dir",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Directory with templates overriding the built-in ones.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    schema: str,
    documents: str,
    output: str,
    target: str | None,
    config_path: str | None,
    namespace: str | None,
    header: str | None,
    template_dir: str | None,
    verbose: bool,
):
    """Generate operation classes from GraphQL documents.

    Examples:

        gql-opgen generate -s ./schema.graphql -d ./operations -o ./Operations.cs

        gql-opgen generate -s ./schema -d ./operations -o ./operations.py -t python

        gql-opgen generate -s ./schema.tgz -d ./ops -o ./Ops.cs -c codegen.json
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    schema_path = Path(schema).resolve()
    output_path = Path(output).resolve()
    temp_dir = None

    try:
        # Handle archives
        actual_schema_path = schema_path
        if schema_path.is_file() and schema_path.name.lower().endswith(
            (".zip", ".tar.gz", ".tgz")
        ):
            click.echo(f"Extracting archive {schema_path.name}...")
            temp_dir = extract_archive(schema_path)
            actual_schema_path = Path(temp_dir)
            if verbose:
                click.echo(f"  Extracted to: {temp_dir}")

        config = load_config(config_path) if config_path else GeneratorConfig()
        updates = {}
        if target:
            updates["target"] = target
        if namespace:
            updates["namespace"] = namespace
        if updates:
            config = config.model_copy(update=updates)

        if verbose:
            click.echo(f"Schema: {actual_schema_path}")
            click.echo(f"Documents: {Path(documents).resolve()}")
            click.echo(f"Output: {output_path}")
            click.echo(f"Target: {config.target}")

        click.echo("Loading schema...")
        graphql_schema = SchemaLoader(str(actual_schema_path)).load()

        click.echo("Parsing documents...")
        sources = DocumentLoader(documents).load()
        if verbose:
            click.echo(f"  Documents: {len(sources)}")

        hooks = HookRunner()
        if header:
            hooks.add_post_hook(AddHeaderHook(header))

        click.echo("Generating code...")
        generator = CodeGenerator(
            graphql_schema, sources, config, template_dir=template_dir, hooks=hooks
        )
        ir = generator.build()
        code = generator.render(ir, output_path.name)

        if verbose:
            click.echo(f"  Operations: {len(ir.operations)}")
            click.echo(f"  Input classes: {len(ir.input_classes())}")
            click.echo(f"  Lines: {len(code.splitlines())}")

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(code)

        click.echo(f"Done! Generated {len(ir.operations)} operations in {output_path}")
    finally:
        # Clean up temp directory
        if temp_dir:
            shutil.rmtree(temp_dir)


if __name__ == "__main__":
    main()
