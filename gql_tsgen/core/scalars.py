"""Scalar mappings from GraphQL scalar names to TypeScript types.

A GraphQL document only declares ``scalar Foo``; it knows nothing about how
the value looks on the client. The ScalarMap fills that gap.

Example usage:
    from gql_tsgen.core.scalars import ScalarMap

    scalars = ScalarMap()
    scalars.register("AWSDateTime", "string")
    scalars.get("Int")  # "number"
"""

# GraphQL's built-in scalars
DEFAULT_SCALARS = {
    "String": "string",
    "Int": "number",
    "Float": "number",
    "Boolean": "boolean",
    "ID": "string",
}


class ScalarMap:
    """Maps scalar names to TypeScript type expressions.

    Entries may be added or overridden at any time, including between renders.
    """

    def __init__(self):
        self._types: dict[str, str] = dict(DEFAULT_SCALARS)

    def register(self, scalar_name: str, ts_type: str):
        """Register (or override) the TypeScript type for a scalar."""
        self._types[scalar_name] = ts_type

    def get(self, scalar_name: str) -> str | None:
        """Get the TypeScript type for a scalar, or None if not registered."""
        return self._types.get(scalar_name)

    def has(self, scalar_name: str) -> bool:
        """Check if a scalar has a registered TypeScript type."""
        return scalar_name in self._types

    def __len__(self) -> int:
        return len(self._types)


def parse_scalar_option(value: str) -> tuple[str, str]:
    """Parse a ``Name:tsType`` command-line value.

    The TypeScript type defaults to ``any`` when omitted.
    """
    parts = value.split(":")
    if len(parts) > 2 or not parts[0]:
        raise ValueError(f"invalid scalar: {value}")
    ts_type = parts[1] if len(parts) == 2 and parts[1] else "any"
    return parts[0], ts_type
