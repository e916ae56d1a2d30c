"""Validator/coercer — turns an intermediate record into a typed result.

Fields are visited in a fixed order (options, then flags, then
positionals, each in declaration order) and every failure is collected;
validation never stops at the first problem.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Literal

from declarg.core import failure_kinds
from declarg.core.models import (
    Failure,
    FieldFailure,
    IntermediateRecord,
    ParsedArgs,
    ParseResult,
    Schema,
    Success,
)
from declarg.core.protocols import FieldSchema
from declarg.exceptions import CoercionError

lg = logging.getLogger(__name__)

_MISSING = object()


def _check_field(
    field_schema: FieldSchema,
    raw: Any,
    missing_message: str = "Required",
) -> tuple[Any, tuple[str, str] | None]:
    """Return ``(value, None)`` or ``(None, (kind, message))`` for one field.

    A string default is coerced like a command-line value; any other
    default is taken as already typed.
    """
    if raw is _MISSING:
        if not field_schema.has_default():
            if field_schema.is_optional():
                return None, None
            return None, (failure_kinds.REQUIRED, missing_message)
        raw = field_schema.default_value()
        if not isinstance(raw, str):
            return raw, None
    try:
        return field_schema.coerce(raw), None
    except CoercionError as exc:
        return None, (exc.kind, str(exc))


def _check_named(
    section: Literal["options", "flags"],
    fields: Mapping[str, FieldSchema],
    supplied: Mapping[str, Any],
    failures: list[FieldFailure],
    unbound: str | None = None,
) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for name, field_schema in fields.items():
        missing_message = (
            f"No value given for --{name}" if name == unbound else "Required"
        )
        value, problem = _check_field(
            field_schema, supplied.get(name, _MISSING), missing_message,
        )
        if problem is None:
            values[name] = value
        else:
            kind, message = problem
            failures.append(FieldFailure((section, name), kind, message))
    return values


def validate(schema: Schema, record: IntermediateRecord) -> ParseResult:
    """Coerce *record* against *schema*.

    Returns
    -------
    Success | Failure
        ``Success`` with the typed :class:`ParsedArgs`, or ``Failure``
        listing every field failure in declaration order.
    """
    failures: list[FieldFailure] = []

    if record.unbound_option is not None:
        lg.debug("option --%s reached end of input without a value", record.unbound_option)

    options = _check_named(
        "options", schema.options, record.options, failures, record.unbound_option,
    )
    flags = _check_named("flags", schema.flags, record.flags, failures)

    args: list[Any] = []
    for index, field_schema in enumerate(schema.args):
        if index >= len(record.args):
            # Positional slots must all be filled; defaults do not apply.
            failures.append(
                FieldFailure(("args", index), failure_kinds.REQUIRED, "Required"),
            )
            continue
        value, problem = _check_field(field_schema, record.args[index])
        if problem is None:
            args.append(value)
        else:
            kind, message = problem
            failures.append(FieldFailure(("args", index), kind, message))

    if failures:
        lg.debug("validation produced %d failure(s)", len(failures))
        return Failure(failures=tuple(failures))

    return Success(value=ParsedArgs(options=options, flags=flags, args=tuple(args)))
