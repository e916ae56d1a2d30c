"""Schema construction, invariant checks and normalization.

:func:`define` is the public constructor.  :func:`normalize_schema` runs
at the start of every parse call and returns a *new* schema carrying the
reserved ``help`` flag and ``h`` alias; the caller's schema object is
never touched, so repeated or concurrent parses with the same schema
are safe.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from declarg.core.models import Schema
from declarg.core.protocols import FieldSchema
from declarg.exceptions import SchemaDefinitionError

HELP_FLAG: str = "help"
HELP_ALIAS: str = "h"


class _HelpFlag:
    """Built-in boolean schema for the reserved ``help`` flag."""

    def coerce(self, raw: Any) -> bool:
        return bool(raw)

    def has_default(self) -> bool:
        return True

    def default_value(self) -> bool:
        return False

    def is_optional(self) -> bool:
        return True

    def description(self) -> str:
        return "Show this help message"

    def type_label(self) -> str:
        return "boolean"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _HelpFlag)

    def __hash__(self) -> int:
        return hash(_HelpFlag)


def define(
    *,
    options: Mapping[str, FieldSchema] | None = None,
    flags: Mapping[str, FieldSchema] | None = None,
    args: Iterable[FieldSchema] = (),
    alias: Mapping[str, str] | None = None,
) -> Schema:
    """Build a :class:`Schema`, copying every container.

    Raises
    ------
    SchemaDefinitionError
        If option and flag names overlap, or the alias table is invalid.
    """
    schema = Schema(
        options=dict(options or {}),
        flags=dict(flags or {}),
        args=tuple(args),
        alias=dict(alias or {}),
    )
    check_schema(schema)
    return schema


def check_schema(schema: Schema) -> None:
    """Raise :class:`SchemaDefinitionError` if *schema* breaks an invariant."""
    overlap = sorted(set(schema.options) & set(schema.flags))
    if overlap:
        raise SchemaDefinitionError(
            f"Names declared as both option and flag: {', '.join(overlap)}",
        )

    canonical = set(schema.options) | set(schema.flags)
    # ``help`` is injected at parse time unless an option takes the name.
    targets = canonical | {HELP_FLAG}
    for alt, target in schema.alias.items():
        if alt in canonical:
            raise SchemaDefinitionError(
                f"Alias {alt!r} shadows a declared option or flag.",
            )
        if target in schema.alias:
            raise SchemaDefinitionError(
                f"Alias {alt!r} points to another alias ({target!r}).",
                hint="Aliases resolve one level only; point it at the canonical name.",
            )
        if target not in targets:
            raise SchemaDefinitionError(
                f"Alias {alt!r} points to unknown name {target!r}.",
                hint="Alias targets must be declared options or flags.",
            )


def normalize_schema(schema: Schema) -> Schema:
    """Return a copy of *schema* with the reserved help entries injected.

    The ``help`` flag is added only if no option or flag already uses the
    name; the ``h`` alias only if ``h`` is free and ``help`` is a flag.
    """
    check_schema(schema)

    flags = dict(schema.flags)
    alias = dict(schema.alias)

    if HELP_FLAG not in schema.options and HELP_FLAG not in flags:
        flags[HELP_FLAG] = _HelpFlag()

    help_alias_free = (
        HELP_ALIAS not in alias
        and HELP_ALIAS not in schema.options
        and HELP_ALIAS not in flags
    )
    if help_alias_free and HELP_FLAG in flags:
        alias[HELP_ALIAS] = HELP_FLAG

    return Schema(
        options=dict(schema.options),
        flags=flags,
        args=tuple(schema.args),
        alias=alias,
    )
