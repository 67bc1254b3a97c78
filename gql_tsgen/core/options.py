"""Tolerance switches for the type projection engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BuilderOptions:
    """Controls which model/query mismatches fail and which degrade.

    A degraded result is always rendered with an inline comment naming what
    was elided, e.g. ``/* can't find path=GetFoo.bar */ unknown``.
    """
    # Requesting an object as a scalar, or a scalar as an object
    allow_invalid_shape: bool = False
    # Requesting fields that are not declared on the model
    allow_missing_fields: bool = False
    # Omitting required arguments, e.g. getThing(foo: String!) without foo
    allow_missing_arguments: bool = False
    # Types referenced by the model that are never defined; also covers
    # union fields whose members disagree on the field's type
    allow_unknown_types: bool = True
    # Fail on arguments the field does not declare instead of ignoring them
    strict_arguments: bool = False

    @classmethod
    def loose(cls) -> "BuilderOptions":
        """Options that tolerate every shape problem in the query."""
        return cls(
            allow_invalid_shape=True,
            allow_missing_fields=True,
            allow_unknown_types=True,
        )
