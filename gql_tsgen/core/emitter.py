"""Renders TypeScript declarations from Jinja2 templates.

Supports custom templates via the template_dir parameter:
    emitter = Emitter(template_dir="./my_templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

import json
from pathlib import Path
from typing import Any

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape


def lower_first(name: str) -> str:
    """Lowercase the first character, e.g. "GetComments" => "getComments"."""
    return name[:1].lower() + name[1:]


def ts_string(value: str) -> str:
    """Render a TypeScript string literal."""
    return json.dumps(value, ensure_ascii=False)


class Emitter:
    """Renders the declaration templates.

    Available templates to override:
        - operation.ts.j2: operation source constant, result and variables types
        - input_types.ts.j2: input type declarations
    """

    def __init__(self, template_dir: str | None = None):
        loaders = []
        if template_dir:
            template_path = Path(template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("gql_tsgen", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["lower_first"] = lower_first
        self.env.filters["ts_string"] = ts_string

    def render(self, template_name: str, **context: Any) -> str:
        """Render a template with the given context."""
        return self.env.get_template(template_name).render(context)
