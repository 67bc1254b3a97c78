"""Checks supplied field arguments against their declared parameters.

Only the structure of supplied values is checked: list values against list
parameters, object literals against input object parameters, nulls against
non-null parameters, and variables against the operation's declarations.
Scalar and enum value types are not compared.
"""

import logging
from typing import Sequence

from graphql import (
    ArgumentNode,
    InputObjectTypeDefinitionNode,
    InputValueDefinitionNode,
    ListTypeNode,
    ListValueNode,
    NamedTypeNode,
    NonNullTypeNode,
    NullValueNode,
    ObjectFieldNode,
    ObjectValueNode,
    TypeNode,
    ValueNode,
    VariableNode,
)

from .context import RenderContext
from .errors import (
    ArgumentTypeMismatchError,
    MissingArgumentsError,
    UndeclaredVariableError,
    UnexpectedArgumentError,
)
from .options import BuilderOptions
from .registry import TypeRegistry

logger = logging.getLogger(__name__)


def unwrap_non_null(type_node: TypeNode) -> TypeNode:
    """Remove the NonNull wrapper from a type reference, if present."""
    if isinstance(type_node, NonNullTypeNode):
        return type_node.type
    return type_node


class ArgumentValidator:
    """Validates the arguments a selection supplies to a field."""

    def __init__(self, registry: TypeRegistry, options: BuilderOptions):
        self.registry = registry
        self.options = options

    def check(
        self,
        declared: Sequence[InputValueDefinitionNode] | None,
        provided: Sequence[ArgumentNode | ObjectFieldNode] | None,
        path: str,
        context: RenderContext,
    ):
        """Check provided arguments (or object fields) against declarations.

        Args:
            declared: The parameters the field (or input type) declares
            provided: The arguments supplied by the selection
            path: Diagnostic path of the field
            context: The in-flight render, for variable lookups
        """
        params = {p.name.value: p for p in declared or ()}
        remaining = dict(params)

        for arg in provided or ():
            name = arg.name.value
            param = params.get(name)
            if param is None:
                if self.options.strict_arguments:
                    raise UnexpectedArgumentError(f"Unexpected argument={name}", path)
                logger.debug(f"Ignoring undeclared argument {name} at {path}")
                continue
            self._check_value(param.type, arg.value, f"{path}({name})", context)
            remaining.pop(name, None)

        # Parameters with a default or that accept null may be omitted
        missing = [
            name
            for name, param in remaining.items()
            if param.default_value is None and isinstance(param.type, NonNullTypeNode)
        ]
        if missing:
            if not self.options.allow_missing_arguments:
                raise MissingArgumentsError(missing, path)
            logger.warning(f"Missing arguments {','.join(missing)} at {path}")

    def _check_value(
        self,
        required: TypeNode,
        value: ValueNode,
        path: str,
        context: RenderContext,
    ):
        """Check a single supplied value against a declared type."""
        non_null = isinstance(required, NonNullTypeNode)
        required = unwrap_non_null(required)

        if isinstance(value, VariableNode):
            name = value.name.value
            variable = context.variables.get(name)
            if variable is None:
                raise UndeclaredVariableError(f"Missing source variable={name}", path)
            if isinstance(required, ListTypeNode) and not isinstance(
                unwrap_non_null(variable.type), ListTypeNode
            ):
                raise ArgumentTypeMismatchError(
                    f"Cannot satisfy list requirement with non-list variable={name}", path
                )
            return

        if isinstance(value, NullValueNode):
            if non_null:
                raise ArgumentTypeMismatchError("Cannot pass null to a non-null argument", path)
            return

        if isinstance(required, ListTypeNode):
            if not isinstance(value, ListValueNode):
                raise ArgumentTypeMismatchError(
                    f"Cannot satisfy list requirement, was provided={value.kind}", path
                )
            for item in value.values:
                self._check_value(required.type, item, path + "[]", context)
            return

        if isinstance(value, ObjectValueNode) and isinstance(required, NamedTypeNode):
            definition = self.registry.get(required.name.value)
            if isinstance(definition, InputObjectTypeDefinitionNode):
                self.check(definition.fields, value.fields, path, context)
