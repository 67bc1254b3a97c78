"""Builds TypeScript types for GraphQL operations against a model.

Example usage:
    from graphql import parse
    from gql_tsgen.core import Builder

    builder = Builder()
    builder.add_all_document(parse(model_source))
    builder.add_scalar("AWSDateTime", "string")

    pending = []
    for definition in parse(query_source).definitions:
        output = builder.render_operation(definition)
        pending.extend(output.pending_input_types)
    inputs = builder.render_input_types(pending)
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable

from graphql import DocumentNode, OperationDefinitionNode, TypeDefinitionNode, print_ast

from .context import RenderContext
from .emitter import Emitter
from .errors import UnnamedOperationError
from .inputs import InputTypeClosure, InputTypesOutput
from .options import BuilderOptions
from .registry import TypeRegistry
from .render import wrap
from .resolver import TypeResolver
from .scalars import ScalarMap

logger = logging.getLogger(__name__)


@dataclass
class OperationOutput:
    """Rendered declarations for one operation.

    Attributes:
        text: The operation source constant plus result and variables types
        pending_input_types: Input types referenced by name but not rendered;
            pass them (collected across operations) to render_input_types
    """
    text: str
    pending_input_types: list[str] = field(default_factory=list)


class Builder:
    """Projects a GraphQL model and its operations into TypeScript types.

    Register the whole model first: the first render freezes it. Scalars
    may be added at any time. Renders keep no state on the builder.
    """

    def __init__(
        self,
        options: BuilderOptions | None = None,
        template_dir: str | None = None,
    ):
        """Initialize the builder.

        Args:
            options: Tolerance switches, strict defaults when omitted
            template_dir: Optional directory with custom Jinja2 templates.
                          Templates here override the built-in templates.
        """
        self.options = options or BuilderOptions()
        self.registry = TypeRegistry()
        self.scalars = ScalarMap()
        self.emitter = Emitter(template_dir)
        self.resolver = TypeResolver(self.registry, self.scalars, self.options)
        self.closure = InputTypeClosure(self.resolver, self.emitter)

    def add_scalar(self, name: str, ts_type: str):
        """Map a scalar to a TypeScript type.

        This is required even if the model declares "scalar Foo", as the
        model knows nothing about what TypeScript type it should be.
        """
        self.scalars.register(name, ts_type)

    def add_all_document(self, document: DocumentNode) -> int:
        """Add all type definitions from a model document."""
        return self.registry.register_document(document)

    def add_model_type(self, definition: TypeDefinitionNode):
        """Add a single type definition. Raises on duplicate names."""
        self.registry.register(definition)

    def render_operation(self, operation: OperationDefinitionNode) -> OperationOutput:
        """Render a query or mutation.

        Produces the operation's normalized source as a constant, the type of
        its result and the type of its variables.
        """
        if operation.name is None:
            raise UnnamedOperationError(
                f"Cannot generate code for unnamed operation: {operation.operation.value}"
            )
        self.registry.freeze()

        op_name = operation.name.value
        root = self.registry.lookup_operation_root(operation.operation)
        root_name = root.name.value
        logger.debug(f"Rendering {operation.operation.value} {op_name}")

        # Printing again removes comments and needless whitespace
        source = re.sub(r"\s+", " ", print_ast(operation))

        context = RenderContext.for_variables(operation.variable_definitions)
        result_type = self.resolver.selections.render(
            root, operation.selection_set.selections, op_name, context
        )
        variables_type = wrap([
            self.resolver.render_input_value(v, op_name, context)
            for v in operation.variable_definitions or ()
        ])

        text = self.emitter.render(
            "operation.ts.j2",
            operation_name=op_name,
            source=source,
            result_name=f"{op_name}{root_name}",
            result_type=result_type,
            variables_name=f"{op_name}{root_name}Variables",
            variables_type=variables_type,
        )
        return OperationOutput(
            text=text, pending_input_types=list(context.pending_input_types)
        )

    def render_input_types(self, names: Iterable[str]) -> InputTypesOutput:
        """Render the input types operations left pending, once each."""
        self.registry.freeze()
        return self.closure.expand(names)
