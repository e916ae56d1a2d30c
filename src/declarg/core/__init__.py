"""Core layer — schema model, binding, validation and rendering.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* No validation library imports; field schemas are reached only
  through :class:`~declarg.core.protocols.FieldSchema`.
"""

from declarg.core.alias import resolve
from declarg.core.binder import bind
from declarg.core.help_text import generate_help
from declarg.core.models import (
    Failure,
    FieldFailure,
    IntermediateRecord,
    ParsedArgs,
    ParseResult,
    Schema,
    Success,
)
from declarg.core.parser import parse
from declarg.core.protocols import FieldSchema
from declarg.core.report import format_failures
from declarg.core.schema import define, normalize_schema
from declarg.core.validator import validate

__all__: list[str] = [
    "Failure",
    "FieldFailure",
    "FieldSchema",
    "IntermediateRecord",
    "ParseResult",
    "ParsedArgs",
    "Schema",
    "Success",
    "bind",
    "define",
    "format_failures",
    "generate_help",
    "normalize_schema",
    "parse",
    "resolve",
    "validate",
]
