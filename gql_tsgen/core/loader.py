"""Loads GraphQL documents from files using graphql-core."""

import logging
import os

from graphql import DocumentNode, parse

logger = logging.getLogger(__name__)

GRAPHQL_EXTENSIONS = (".graphql", ".graphqls", ".gql")


def collect_graphql_files(path: str) -> list[str]:
    """Collect GraphQL files from a path.

    A file is returned as is, whatever its extension. A directory is
    searched recursively for GraphQL files.
    """
    if os.path.isfile(path):
        return [path]

    files = []
    for root, _, filenames in os.walk(path):
        for filename in filenames:
            if filename.endswith(GRAPHQL_EXTENSIONS):
                files.append(os.path.join(root, filename))
    return sorted(files)


def load_document(path: str) -> DocumentNode:
    """Parse every GraphQL file under path into a single document."""
    definitions = []
    for file_path in collect_graphql_files(path):
        with open(file_path, encoding="utf-8") as f:
            content = f.read()
        try:
            document = parse(content)
        except Exception as e:
            logger.error(f"Error parsing {file_path}: {e}")
            raise
        logger.debug(f"Parsed {len(document.definitions)} definitions from {file_path}")
        definitions.extend(document.definitions)
    return DocumentNode(definitions=tuple(definitions))
