"""Per-render state threaded through every resolution call."""

from collections import deque
from dataclasses import dataclass, field

from graphql import VariableDefinitionNode


@dataclass
class RenderContext:
    """State owned by a single render call.

    Attributes:
        variables: Declared operation variables, keyed by name
        pending_input_types: Input types referenced by name but not yet
            rendered, in discovery order
    """
    variables: dict[str, VariableDefinitionNode] = field(default_factory=dict)
    pending_input_types: deque[str] = field(default_factory=deque)

    @classmethod
    def for_variables(cls, definitions) -> "RenderContext":
        """Build a context from an operation's variable definitions."""
        return cls(variables={v.variable.name.value: v for v in definitions or ()})

    def defer_input_type(self, name: str):
        """Queue an input type for the closure instead of inlining it."""
        self.pending_input_types.append(name)
