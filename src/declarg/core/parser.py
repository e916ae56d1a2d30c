"""Parse pipeline — normalize, bind, validate.

This is the main entry point of the core layer.  It performs no I/O and
has no side effects: binding errors propagate as exceptions and
validation problems come back as a :class:`~declarg.core.models.Failure`.
"""

from __future__ import annotations

from collections.abc import Sequence

from declarg.core.binder import bind
from declarg.core.models import ParseResult, Schema
from declarg.core.schema import normalize_schema
from declarg.core.validator import validate


def parse(schema: Schema, argv: Sequence[str]) -> ParseResult:
    """Parse *argv* against *schema*.

    Raises
    ------
    SchemaDefinitionError
        If *schema* violates the naming or alias invariants.
    SequenceError
        If an option's value token looks like a long option.
    ExcessPositionalError
        If more positionals are given than declared.
    """
    normalized = normalize_schema(schema)
    record = bind(normalized, argv)
    return validate(normalized, record)
