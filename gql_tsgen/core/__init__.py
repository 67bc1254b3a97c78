"""Core modules for projecting GraphQL operations into TypeScript types."""

from .builder import Builder, OperationOutput
from .context import RenderContext
from .errors import (
    ArgumentTypeMismatchError,
    BuilderError,
    DuplicateTypeError,
    EmptyEnumError,
    InconsistentUnionShapeError,
    InvalidShapeError,
    InvalidUnionMemberError,
    MissingArgumentsError,
    MissingFieldError,
    MissingSelectionError,
    RegistryFrozenError,
    UndeclaredVariableError,
    UnexpectedArgumentError,
    UnknownInputTypeError,
    UnknownTypeError,
    UnnamedOperationError,
    UnsupportedOperationError,
    UnsupportedSelectionError,
    WrongKindError,
)
from .hooks import (
    AddHeaderHook,
    FilterTypesHook,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
)
from .inputs import InputTypeClosure, InputTypesOutput
from .loader import collect_graphql_files, load_document
from .options import BuilderOptions
from .registry import TypeRegistry
from .runner import render_documents, run_all_builder
from .scalars import ScalarMap

__all__ = [
    # Builder
    "Builder",
    "BuilderOptions",
    "OperationOutput",
    "InputTypeClosure",
    "InputTypesOutput",
    "RenderContext",
    "ScalarMap",
    "TypeRegistry",
    # Hooks
    "PreGenerateHook",
    "PostGenerateHook",
    "AddHeaderHook",
    "FilterTypesHook",
    "HookRunner",
    # Loading and running
    "collect_graphql_files",
    "load_document",
    "render_documents",
    "run_all_builder",
    # Errors
    "BuilderError",
    "ArgumentTypeMismatchError",
    "DuplicateTypeError",
    "EmptyEnumError",
    "InconsistentUnionShapeError",
    "InvalidShapeError",
    "InvalidUnionMemberError",
    "MissingArgumentsError",
    "MissingFieldError",
    "MissingSelectionError",
    "RegistryFrozenError",
    "UndeclaredVariableError",
    "UnexpectedArgumentError",
    "UnknownInputTypeError",
    "UnknownTypeError",
    "UnnamedOperationError",
    "UnsupportedOperationError",
    "UnsupportedSelectionError",
    "WrongKindError",
]
