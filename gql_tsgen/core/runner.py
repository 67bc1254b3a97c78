"""Runs the builder over whole model and query documents."""

import logging
from typing import Iterable

from graphql import DocumentNode, OperationDefinitionNode

from .builder import Builder
from .hooks import HookRunner
from .loader import load_document
from .options import BuilderOptions

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_NAME = "types.ts"


def render_documents(
    models: Iterable[DocumentNode],
    queries: Iterable[DocumentNode],
    options: BuilderOptions | None = None,
    scalars: dict[str, str] | None = None,
    hooks: HookRunner | None = None,
    template_dir: str | None = None,
    output_name: str = DEFAULT_OUTPUT_NAME,
) -> str:
    """Generate the TypeScript module for parsed model and query documents.

    Every operation is rendered first; the input types they reference are
    collected and declared once at the end.
    """
    hooks = hooks or HookRunner()
    builder = Builder(options, template_dir)

    for document in models:
        count = builder.add_all_document(hooks.run_pre_hooks(document))
        logger.debug(f"Registered {count} model types")

    for name, ts_type in (scalars or {}).items():
        builder.add_scalar(name, ts_type)

    parts: list[str] = []
    pending: list[str] = []
    for document in queries:
        for definition in document.definitions:
            if not isinstance(definition, OperationDefinitionNode):
                logger.debug(f"Skipping {definition.kind} in query document")
                continue
            output = builder.render_operation(definition)
            pending.extend(output.pending_input_types)
            parts.append(output.text)

    inputs = builder.render_input_types(pending)
    if inputs.text:
        parts.append(inputs.text)
    logger.info(
        f"Rendered {len(parts) - bool(inputs.text)} operations and "
        f"{len(inputs.input_types)} input types"
    )

    return hooks.run_post_hooks(output_name, "\n".join(parts))


def run_all_builder(
    model: str | list[str],
    query: str | list[str],
    options: BuilderOptions | None = None,
    scalars: dict[str, str] | None = None,
    hooks: HookRunner | None = None,
    template_dir: str | None = None,
    output_name: str = DEFAULT_OUTPUT_NAME,
) -> str:
    """Run the builder over model and query files, including input types."""
    models = [load_document(p) for p in _as_list(model)]
    queries = [load_document(p) for p in _as_list(query)]
    return render_documents(
        models,
        queries,
        options=options,
        scalars=scalars,
        hooks=hooks,
        template_dir=template_dir,
        output_name=output_name,
    )


def _as_list(paths: str | list[str]) -> list[str]:
    if isinstance(paths, str):
        return [paths]
    return list(paths)
