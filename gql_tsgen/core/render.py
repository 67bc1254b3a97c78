"""Text layout helpers for emitted TypeScript."""


def join(raw: str | list[str], indent: str = "") -> str:
    """Join lines (or a multi-line string) with added indent.

    Every line gets a trailing newline and has trailing whitespace removed.
    """
    if isinstance(raw, list):
        raw = "".join(line + "\n" for line in raw)
    return "".join((indent + line).rstrip() + "\n" for line in raw.split("\n"))


def wrap(raw: str | list[str], indent: str = "  ") -> str:
    """Render lines as an indented ``{}`` block."""
    inner = join(raw, indent)
    if not inner.strip():
        return "{}"
    if inner.endswith("\n"):
        inner = inner[:-1]
    return f"{{\n{inner}}}"
