"""Schema and operation document loading using graphql-core.

Reads SDL files into a GraphQLSchema and operation files into parsed
documents for the generator.
"""

import logging
import os

from graphql import ExecutableDefinitionNode, GraphQLSchema, build_schema, parse

from .ir import SourceDocument

log = logging.getLogger(__name__)

SCHEMA_EXTENSIONS = (".graphqls", ".graphql", ".gql")
DOCUMENT_EXTENSIONS = (".graphql", ".gql")


def collect_files(path: str, extensions: tuple[str, ...]) -> list[str]:
    """Collect files with the given extensions from a file or directory path."""
    files = []
    if os.path.isfile(path):
        if path.endswith(extensions):
            files.append(path)
    else:
        for root, _, filenames in os.walk(path):
            for filename in filenames:
                if filename.endswith(extensions):
                    files.append(os.path.join(root, filename))
    return sorted(files)


class SchemaLoader:
    """Builds a GraphQLSchema from one SDL file or a directory of them."""

    def __init__(self, schema_path: str):
        self.schema_path = schema_path

    def load(self) -> GraphQLSchema:
        """Concatenate all schema files and build the schema."""
        files = collect_files(self.schema_path, SCHEMA_EXTENSIONS)
        if not files:
            raise ValueError(f"No schema files found in {self.schema_path}")
        parts = []
        for file_path in files:
            with open(file_path) as f:
                parts.append(f.read())
        try:
            return build_schema("\n\n".join(parts))
        except Exception as e:
            log.error("Error building schema from %s: %s", self.schema_path, e)
            raise


class DocumentLoader:
    """Parses every operation document under a path.

    Files that contain no executable definitions (e.g. schema files placed
    next to the operations) are skipped.
    """

    def __init__(self, documents_path: str):
        self.documents_path = documents_path

    def load(self) -> list[SourceDocument]:
        documents = []
        for file_path in collect_files(self.documents_path, DOCUMENT_EXTENSIONS):
            with open(file_path) as f:
                content = f.read()
            try:
                document = parse(content)
            except Exception as e:
                log.error("Error parsing %s: %s", os.path.basename(file_path), e)
                raise
            if not any(isinstance(d, ExecutableDefinitionNode) for d in document.definitions):
                log.debug("Skipping %s: no operations or fragments", file_path)
                continue
            documents.append(SourceDocument(path=file_path, document=document))
        return documents
