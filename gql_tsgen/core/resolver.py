"""Resolves GraphQL type references into TypeScript type expressions.

GraphQL marks *non-null* types with a wrapper, while TypeScript marks
*nullable* ones, so every step here re-polarizes nullability: a reference
without a NonNull wrapper becomes ``(T | null)``.
"""

import json
import logging

from graphql import (
    EnumTypeDefinitionNode,
    FieldNode,
    InputObjectTypeDefinitionNode,
    InputValueDefinitionNode,
    InterfaceTypeDefinitionNode,
    ListTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    TypeDefinitionNode,
    TypeNode,
    UnionTypeDefinitionNode,
    VariableDefinitionNode,
)

from .arguments import ArgumentValidator
from .context import RenderContext
from .errors import (
    EmptyEnumError,
    InvalidShapeError,
    MissingSelectionError,
    UnknownTypeError,
    WrongKindError,
)
from .options import BuilderOptions
from .registry import TypeRegistry, synthetic_object
from .render import wrap
from .scalars import ScalarMap
from .selection import SelectionRenderer

logger = logging.getLogger(__name__)

# Types that can only be used with a selection set
COMPOSITE_TYPES = (
    ObjectTypeDefinitionNode,
    InterfaceTypeDefinitionNode,
    UnionTypeDefinitionNode,
)


def nullable(expr: str) -> str:
    return f"({expr} | null)"


def _identity(expr: str) -> str:
    return expr


class TypeResolver:
    """Turns type references plus optional selections into TypeScript.

    A ``sel`` of None means an input position (argument, variable or input
    field). A FieldNode without a selection set means the field was
    selected as a leaf.
    """

    def __init__(
        self,
        registry: TypeRegistry,
        scalars: ScalarMap,
        options: BuilderOptions,
    ):
        self.registry = registry
        self.scalars = scalars
        self.options = options
        self.selections = SelectionRenderer(
            self, ArgumentValidator(registry, options)
        )

    def resolve(
        self,
        type_node: TypeNode,
        sel: FieldNode | None,
        path: str,
        context: RenderContext,
    ) -> str:
        """Resolve a (possibly wrapped) type reference."""
        if isinstance(type_node, NonNullTypeNode):
            inner = type_node.type
            render = _identity
        else:
            inner = type_node
            render = nullable

        if isinstance(inner, ListTypeNode):
            element = self.resolve(inner.type, sel, path + "[]", context)
            return render(f"Array<{element}>")

        # Input types are referenced by name and rendered once by the
        # closure, which keeps recursive input types finite.
        name = inner.name.value
        if sel is None and isinstance(self.registry.get(name), InputObjectTypeDefinitionNode):
            context.defer_input_type(name)
            return render(name)

        return render(self.resolve_named(name, sel, path, context))

    def resolve_named(
        self,
        name: str,
        sel: FieldNode | None,
        path: str,
        context: RenderContext,
    ) -> str:
        """Resolve a named type, dispatching on its definition kind."""
        has_selection_set = sel is not None and sel.selection_set is not None
        definition = self.registry.get(name)

        if definition is None:
            # Built-in and user-supplied scalars aren't part of the model
            if not has_selection_set and self.scalars.has(name):
                return self.scalars.get(name)

            if not self.options.allow_unknown_types:
                raise UnknownTypeError(f"Can't find unknown type={name}", path)

            # Nothing requested below this, so pretend it's a scalar
            if not has_selection_set:
                logger.warning(f"Unknown type {name} at {path}, rendering as unknown")
                return f"/* can't find scalar type={json.dumps(name)} */ unknown"

            # Otherwise it's an object we know nothing about
            logger.warning(f"Unknown type {name} at {path}, rendering as empty object")
            definition = synthetic_object(name)

        if isinstance(definition, ScalarTypeDefinitionNode):
            if has_selection_set:
                return self._render_invalid_object(name, sel, path, context)
            ts_type = self.scalars.get(name)
            if ts_type is None:
                logger.warning(f"No TypeScript type for scalar {name}, using any")
                return f"/* can't find scalar={name} */ any"
            return ts_type

        if isinstance(definition, EnumTypeDefinitionNode):
            if has_selection_set:
                return self._render_invalid_object(name, sel, path, context)
            if not definition.values:
                raise EmptyEnumError(f"No values for enum {name}", path)
            return " | ".join(json.dumps(v.name.value) for v in definition.values)

        if isinstance(definition, InputObjectTypeDefinitionNode):
            if sel is not None:
                raise InvalidShapeError(
                    f"Can't select input object type={name} in an output position", path
                )
            return self.render_input_object(definition, path, context)

        if isinstance(definition, COMPOSITE_TYPES):
            if sel is None:
                raise MissingSelectionError(
                    f"Can't use output type={name} as an input type, use \"input ...\"", path
                )
            if sel.selection_set is None:
                if self.options.allow_invalid_shape:
                    logger.warning(f"Type {name} selected as a scalar at {path}")
                    return f"/* invalid shape, should be type={name} */ any"
                raise InvalidShapeError(
                    f"Can't select {name} as a scalar, add inner selection", path
                )
            return self.selections.render(
                definition, sel.selection_set.selections, path, context
            )

        raise WrongKindError(f"Unsupported kind={definition.kind} for type={name}", path)

    def lookup_composite(self, name: str, path: str) -> TypeDefinitionNode:
        """Find the object, interface or union a fragment is conditioned on."""
        definition = self.registry.get(name)
        if definition is None:
            if self.scalars.has(name):
                raise InvalidShapeError(f"Can't spread a fragment on scalar type={name}", path)
            if not self.options.allow_unknown_types:
                raise UnknownTypeError(f"Can't find unknown type={name}", path)
            logger.warning(f"Unknown fragment type {name} at {path}, rendering as empty object")
            return synthetic_object(name)
        if not isinstance(definition, COMPOSITE_TYPES):
            raise InvalidShapeError(
                f"Can't spread a fragment on {definition.kind} type={name}", path
            )
        return definition

    def render_input_object(
        self,
        definition: InputObjectTypeDefinitionNode,
        path: str,
        context: RenderContext,
    ) -> str:
        """Render the fields of an input object as a TypeScript record."""
        lines = [self.render_input_value(f, path, context) for f in definition.fields or ()]
        return wrap(lines)

    def render_input_value(
        self,
        node: InputValueDefinitionNode | VariableDefinitionNode,
        path: str,
        context: RenderContext,
    ) -> str:
        """Render an input field or operation variable as a record member.

        Nullable inputs are optional since GraphQL inserts nulls, and so are
        inputs with a default value.
        """
        if isinstance(node, VariableDefinitionNode):
            name = node.variable.name.value
        else:
            name = node.name.value
        expr = self.resolve(node.type, None, f"{path}.{name}", context)
        optional = not isinstance(node.type, NonNullTypeNode) or node.default_value is not None
        return f"{name}{'?' if optional else ''}: {expr};"

    def _render_invalid_object(
        self,
        name: str,
        sel: FieldNode,
        path: str,
        context: RenderContext,
    ) -> str:
        """Render an object selection made on a scalar or enum."""
        if not self.options.allow_invalid_shape:
            raise InvalidShapeError(
                f"Can't perform object selection, should be scalar={name}", path
            )
        logger.warning(f"Scalar {name} selected as an object at {path}")
        inner = self.selections.render(
            synthetic_object(""), sel.selection_set.selections, path, context
        )
        return f"/* invalid shape, should be scalar={name} */ {inner}"
