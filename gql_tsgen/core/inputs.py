"""Closure over the input object types an operation references.

Input types may be self or mutually recursive, so they are never inlined.
The resolver queues their names instead and this module renders each
distinct name exactly once, following references queued along the way.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Iterable

from graphql import InputObjectTypeDefinitionNode

from .context import RenderContext
from .emitter import Emitter
from .errors import UnknownInputTypeError, WrongKindError
from .resolver import TypeResolver

logger = logging.getLogger(__name__)


@dataclass
class InputTypesOutput:
    """Rendered input type declarations.

    Attributes:
        text: One ``type Name = {...};`` declaration per input type
        input_types: Every input type rendered, in first-seen order
    """
    text: str
    input_types: list[str] = field(default_factory=list)


class InputTypeClosure:
    """Expands queued input type names into standalone declarations."""

    def __init__(self, resolver: TypeResolver, emitter: Emitter):
        self.resolver = resolver
        self.emitter = emitter

    def expand(self, names: Iterable[str]) -> InputTypesOutput:
        """Render the given input types and everything they reference."""
        context = RenderContext(pending_input_types=deque(names))
        seen: list[str] = []
        declarations: list[tuple[str, str]] = []

        while context.pending_input_types:
            name = context.pending_input_types.popleft()
            if name in seen:
                continue
            seen.append(name)

            definition = self.resolver.registry.get(name)
            if definition is None:
                raise UnknownInputTypeError(f"Can't render unknown input type: {name}")
            if not isinstance(definition, InputObjectTypeDefinitionNode):
                raise WrongKindError(
                    f"Can't render non-object input type: {name} ({definition.kind})"
                )

            logger.debug(f"Rendering input type {name}")
            body = self.resolver.render_input_object(definition, name, context)
            declarations.append((name, body))

        text = self.emitter.render("input_types.ts.j2", declarations=declarations)
        return InputTypesOutput(text=text, input_types=seen)
