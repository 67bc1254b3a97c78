"""Renders selection sets against object, interface and union types."""

import json
import logging
from typing import TYPE_CHECKING, Sequence

from graphql import (
    FieldNode,
    InlineFragmentNode,
    InterfaceTypeDefinitionNode,
    ObjectTypeDefinitionNode,
    SelectionNode,
    TypeDefinitionNode,
    UnionTypeDefinitionNode,
)

from .arguments import ArgumentValidator
from .context import RenderContext
from .errors import (
    InconsistentUnionShapeError,
    InvalidUnionMemberError,
    MissingFieldError,
    UnsupportedSelectionError,
)
from .registry import ROOT_TYPE_NAMES
from .render import wrap

if TYPE_CHECKING:
    from .resolver import TypeResolver

logger = logging.getLogger(__name__)

# The discriminant field every composite type has, declared or not
TYPENAME = "__typename"

UNMARKED_TYPE_NAMES = {*ROOT_TYPE_NAMES.values(), "Subscription"}


def literal_union(names: list[str]) -> str:
    """Render names as a union of TypeScript string literals."""
    if not names:
        return "string"
    return " | ".join(json.dumps(n) for n in names)


class SelectionRenderer:
    """Builds the record type a selection set produces."""

    def __init__(self, resolver: "TypeResolver", arguments: ArgumentValidator):
        self.resolver = resolver
        self.arguments = arguments

    def render(
        self,
        definition: TypeDefinitionNode,
        selections: Sequence[SelectionNode],
        path: str,
        context: RenderContext,
    ) -> str:
        """Render selections against a composite type.

        Plain fields become one record. Inline fragments are rendered per
        branch and intersected with it: ``Record & (Branch1 | Branch2)``.
        """
        fields: list[FieldNode] = []
        fragments: list[InlineFragmentNode] = []
        for sel in selections:
            if isinstance(sel, FieldNode):
                fields.append(sel)
            elif isinstance(sel, InlineFragmentNode):
                fragments.append(sel)
            else:
                raise UnsupportedSelectionError(
                    f"Only fields and inline fragments are supported, found: {sel.kind}", path
                )

        if isinstance(definition, UnionTypeDefinitionNode):
            members = self._union_members(definition, path)
            lines = [
                f"{self._key(f)}: {self._render_union_field(definition, members, f, path, context)};"
                for f in fields
            ]
        else:
            lines = [
                f"{self._key(f)}: {self.render_field(definition, f, path, context)};"
                for f in fields
            ]

        name = definition.name.value
        record = wrap(lines)
        if name and name not in UNMARKED_TYPE_NAMES:
            record = f"/* {name} */ {record}"
        if not fragments:
            return record

        typename = next((f for f in fields if f.name.value == TYPENAME), None)
        branches = [
            self._render_fragment(definition, fragment, typename, path, context)
            for fragment in fragments
        ]
        return f"{record} & ({' | '.join(branches)})"

    def render_field(
        self,
        definition: TypeDefinitionNode,
        sel: FieldNode,
        path: str,
        context: RenderContext,
    ) -> str:
        """Render one field selected on an object or interface."""
        name = sel.name.value
        field_path = f"{path}.{name}"
        field = next(
            (f for f in getattr(definition, "fields", None) or () if f.name.value == name),
            None,
        )

        if field is None:
            if name == TYPENAME:
                return self._typename(definition)
            if self.resolver.options.allow_missing_fields:
                logger.warning(f"Missing field at {field_path}, rendering as unknown")
                return f"/* can't find path={field_path} */ unknown"
            raise MissingFieldError(f"Can't request missing field {name}", field_path)

        self.arguments.check(field.arguments, sel.arguments, field_path, context)
        return self.resolver.resolve(field.type, sel, field_path, context)

    def _render_union_field(
        self,
        definition: UnionTypeDefinitionNode,
        members: list[ObjectTypeDefinitionNode],
        sel: FieldNode,
        path: str,
        context: RenderContext,
    ) -> str:
        """Render a field common to every member of a union."""
        name = sel.name.value
        field_path = f"{path}.{name}"
        if name == TYPENAME:
            return literal_union([m.name.value for m in members])
        if not members:
            return self.render_field(definition, sel, path, context)

        results = [self.render_field(m, sel, path, context) for m in members]
        if len(set(results)) == 1:
            return results[0]

        if self.resolver.options.allow_unknown_types:
            logger.warning(f"Union members disagree on {field_path}, rendering as any")
            return f"/* inconsistent union field path={field_path} */ any"
        raise InconsistentUnionShapeError(
            f"Field {name} has a different shape across members of union "
            f"{definition.name.value}",
            field_path,
        )

    def _render_fragment(
        self,
        definition: TypeDefinitionNode,
        fragment: InlineFragmentNode,
        typename: FieldNode | None,
        path: str,
        context: RenderContext,
    ) -> str:
        """Render an inline fragment as a standalone selection on its type."""
        if fragment.type_condition is not None:
            condition = fragment.type_condition.name.value
        else:
            condition = definition.name.value
        fragment_path = f"{path}<{condition}>"
        target = self.resolver.lookup_composite(condition, fragment_path)

        # Each branch carries its own discriminant
        selections = list(fragment.selection_set.selections)
        if typename is not None and not any(
            isinstance(s, FieldNode) and s.name.value == TYPENAME for s in selections
        ):
            selections.insert(0, typename)

        return self.render(target, selections, fragment_path, context)

    def _union_members(
        self, definition: UnionTypeDefinitionNode, path: str
    ) -> list[ObjectTypeDefinitionNode]:
        members = []
        for member in definition.types or ():
            member_name = member.name.value
            member_def = self.resolver.registry.get(member_name)
            if not isinstance(member_def, ObjectTypeDefinitionNode):
                found = member_def.kind if member_def is not None else "nothing"
                raise InvalidUnionMemberError(
                    f"Union {definition.name.value} member {member_name} must be "
                    f"an object type, found {found}",
                    path,
                )
            members.append(member_def)
        return members

    def _typename(self, definition: TypeDefinitionNode) -> str:
        name = definition.name.value
        if isinstance(definition, InterfaceTypeDefinitionNode):
            return literal_union(self.resolver.registry.implementations(name))
        return literal_union([name] if name else [])

    @staticmethod
    def _key(sel: FieldNode) -> str:
        """Response key of a field: its alias if given, else its name."""
        return sel.alias.value if sel.alias else sel.name.value
