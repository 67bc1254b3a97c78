"""Registry of named type definitions from a parsed GraphQL model."""

import logging

from graphql import (
    DocumentNode,
    NameNode,
    ObjectTypeDefinitionNode,
    OperationType,
    TypeDefinitionNode,
)

from .errors import (
    DuplicateTypeError,
    RegistryFrozenError,
    UnsupportedOperationError,
    WrongKindError,
)

logger = logging.getLogger(__name__)

# Entry points into the model, e.g. "query Foo" starts at "type Query"
ROOT_TYPE_NAMES = {
    OperationType.QUERY: "Query",
    OperationType.MUTATION: "Mutation",
}


def synthetic_object(name: str) -> ObjectTypeDefinitionNode:
    """Create an empty object type definition that isn't part of the model."""
    return ObjectTypeDefinitionNode(
        name=NameNode(value=name),
        interfaces=(),
        directives=(),
        fields=(),
    )


class TypeRegistry:
    """Maps type names to their definitions.

    The registry is populated before rendering and frozen by the first
    render; further registration fails with RegistryFrozenError.
    """

    def __init__(self):
        self._types: dict[str, TypeDefinitionNode] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self):
        """Make the registry read-only."""
        self._frozen = True

    def register(self, definition: TypeDefinitionNode):
        """Add a single type definition. Raises on duplicate names."""
        if self._frozen:
            raise RegistryFrozenError(
                f"Can't add type {definition.name.value} after rendering started"
            )
        name = definition.name.value
        if name in self._types:
            raise DuplicateTypeError(name)
        self._types[name] = definition
        logger.debug(f"Registered {definition.kind} {name}")

    def register_document(self, document: DocumentNode) -> int:
        """Add every type definition found in a model document.

        Returns the number of definitions added.
        """
        count = 0
        for definition in document.definitions:
            if not isinstance(definition, TypeDefinitionNode) or not definition.name.value:
                continue
            self.register(definition)
            count += 1
        return count

    def get(self, name: str) -> TypeDefinitionNode | None:
        """Look up a type definition by name."""
        return self._types.get(name)

    def implementations(self, interface_name: str) -> list[str]:
        """Return the names of object types implementing an interface."""
        return [
            name
            for name, definition in self._types.items()
            if isinstance(definition, ObjectTypeDefinitionNode)
            and any(i.name.value == interface_name for i in definition.interfaces or ())
        ]

    def lookup_operation_root(self, operation: OperationType) -> ObjectTypeDefinitionNode:
        """Find the object type an operation starts from.

        A model without the root type gets an empty stand-in, so operations
        against it fail field by field instead of up front.
        """
        key = ROOT_TYPE_NAMES.get(operation)
        if key is None:
            raise UnsupportedOperationError(f"Unsupported operation: {operation.value}")

        definition = self._types.get(key)
        if definition is None:
            return synthetic_object(key)
        if not isinstance(definition, ObjectTypeDefinitionNode):
            raise WrongKindError(f"Unexpected type for {key!r}: {definition.kind}")
        return definition

    def __contains__(self, name: str) -> bool:
        return name in self._types

    def __len__(self) -> int:
        return len(self._types)
