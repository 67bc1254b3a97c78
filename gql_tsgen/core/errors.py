"""Exceptions raised while projecting GraphQL operations into TypeScript types.

Every error carries the diagnostic path accumulated during traversal, e.g.
``GetFoo.getFoo.items[].name``, so failures can be located without a stack
trace.
"""


class BuilderError(Exception):
    """Base class for all projection errors."""

    def __init__(self, message: str, path: str = ""):
        self.message = message
        self.path = path
        super().__init__(f"{message} (path={path})" if path else message)


class DuplicateTypeError(BuilderError):
    """A type with the same name is already registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Can't add duplicate type to model: {name}")


class RegistryFrozenError(BuilderError):
    """The model was changed after rendering started."""


class UnsupportedOperationError(BuilderError):
    """Only query and mutation operations can be rendered."""


class UnnamedOperationError(BuilderError):
    """Anonymous operations can't be given stable declaration names."""


class UnknownTypeError(BuilderError):
    """A referenced type is not in the model and unknown types are disallowed."""


class MissingSelectionError(BuilderError):
    """An output type was used where no selection is possible."""


class InvalidShapeError(BuilderError):
    """A scalar was selected as an object, or an object as a scalar."""


class EmptyEnumError(BuilderError):
    """An enum declares no values."""


class MissingFieldError(BuilderError):
    """A selected field is not declared on its parent type."""


class InconsistentUnionShapeError(BuilderError):
    """A field selected on a union resolves differently across its members."""


class InvalidUnionMemberError(BuilderError):
    """A union member is not a registered object type."""


class UnsupportedSelectionError(BuilderError):
    """Named fragment spreads are not supported, only inline fragments."""


class UnexpectedArgumentError(BuilderError):
    """An argument was supplied that the field does not declare."""


class ArgumentTypeMismatchError(BuilderError):
    """A supplied argument value can't satisfy the declared argument type."""


class UndeclaredVariableError(BuilderError):
    """An argument refers to a variable the operation does not declare."""


class MissingArgumentsError(BuilderError):
    """Required arguments were not supplied."""

    def __init__(self, missing: list[str], path: str = ""):
        self.missing = missing
        super().__init__(
            f"Can't select field, missing arguments={','.join(missing)}", path
        )


class UnknownInputTypeError(BuilderError):
    """An input type queued for rendering is not in the model."""


class WrongKindError(BuilderError):
    """A type was found, but it is not of the kind required here."""
