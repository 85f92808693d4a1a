"""Go Code Renderer - Generates Go row types and scan functions from table schemas."""

from .main import (
    GeneratorContext,
    imports_for,
    render,
    render_to_string,
    SQL_DRIVER_IMPORT,
    TEMPLATE_DIR,
)

__all__ = [
    "GeneratorContext",
    "imports_for",
    "render",
    "render_to_string",
    "SQL_DRIVER_IMPORT",
    "TEMPLATE_DIR",
]
