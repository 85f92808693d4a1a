"""
Go Code Renderer - Generates Go row types and scan functions from table schemas.

For every table the output holds:
- A record struct with one field per column
- A function scanning one row into the struct
- A slice type and a function scanning all rows of a cursor
"""

from __future__ import annotations

from dataclasses import dataclass, field
from io import StringIO
from pathlib import Path
from typing import Final, Sequence, TextIO

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateError

from ..shared import GenerateOptions, RenderError, Table

# Template configuration
TEMPLATE_DIR: Final[Path] = Path(__file__).parent / "templates"

HEADER_TEMPLATE: Final[str] = "header.go.j2"
INTERFACE_TEMPLATE: Final[str] = "interface.go.j2"
TABLE_TEMPLATE: Final[str] = "table.go.j2"

# Import path of the concrete row cursor type
SQL_DRIVER_IMPORT: Final[str] = "database/sql"


@dataclass
class GeneratorContext:
    """Context for code generation with pre-compiled templates."""

    template_env: Environment = field(init=False)
    _templates: dict[str, Template] = field(init=False, default_factory=dict)

    def __post_init__(self) -> None:
        self.template_env = Environment(
            loader=FileSystemLoader(TEMPLATE_DIR),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
            auto_reload=False,
            autoescape=False,
        )
        for name in (HEADER_TEMPLATE, INTERFACE_TEMPLATE, TABLE_TEMPLATE):
            try:
                self._templates[name] = self.template_env.get_template(name)
            except TemplateError as e:
                raise RenderError(f"Failed to load template: {e}", name) from e

    def render_template(self, name: str, **context: object) -> str:
        try:
            return self._templates[name].render(**context)
        except TemplateError as e:
            raise RenderError(f"Failed to render template: {e}", name) from e


def imports_for(options: GenerateOptions) -> list[str]:
    """Go packages imported by the generated file."""
    if options.generate_interface:
        return ["time"]
    return [SQL_DRIVER_IMPORT, "time"]


def render(
    options: GenerateOptions,
    tables: Sequence[Table],
    output: TextIO,
    ctx: GeneratorContext | None = None,
) -> None:
    """Write Go source for ``tables`` to ``output``.

    Tables are emitted in the given order. The same options and tables
    always produce the same text.

    Raises:
        RenderError: If a template fails to render, or a table's row type
            does not match the interface option.
    """
    ctx = ctx or GeneratorContext()

    output.write(
        ctx.render_template(
            HEADER_TEMPLATE,
            package=options.package,
            imports=imports_for(options),
        )
    )

    if options.generate_interface:
        output.write(ctx.render_template(INTERFACE_TEMPLATE))

    for table in tables:
        # Scanners must take the cursor type the header imports or declares
        if table.row_type != options.row_type:
            raise RenderError(
                f"table '{table.name}' uses row type '{table.row_type}', "
                f"expected '{options.row_type}'",
                TABLE_TEMPLATE,
            )
        output.write(ctx.render_template(TABLE_TEMPLATE, table=table))


def render_to_string(
    options: GenerateOptions,
    tables: Sequence[Table],
    ctx: GeneratorContext | None = None,
) -> str:
    """Render Go source into a string."""
    buffer = StringIO()
    render(options, tables, buffer, ctx)
    return buffer.getvalue()
