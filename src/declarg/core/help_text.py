"""Help-text generation from a schema.

Pure rendering: the returned string is printed (or not) by the caller.
Type labels, descriptions and default/optional markers come from the
field schemas themselves via :class:`~declarg.core.protocols.FieldSchema`.
"""

from __future__ import annotations

from collections.abc import Mapping

from declarg.core.models import Schema
from declarg.core.protocols import FieldSchema
from declarg.core.schema import normalize_schema

_GUTTER = "  "


def _dashed(name: str) -> str:
    return f"-{name}" if len(name) == 1 else f"--{name}"


def _aliases_by_target(alias: Mapping[str, str]) -> dict[str, list[str]]:
    grouped: dict[str, list[str]] = {}
    for alt, target in sorted(alias.items()):
        grouped.setdefault(target, []).append(alt)
    return grouped


def _name_column(name: str, aliases: list[str]) -> str:
    return ", ".join([*(_dashed(a) for a in aliases), f"--{name}"])


def _annotation(field_schema: FieldSchema) -> str:
    """Return ``(default: X)`` / ``(optional)`` or an empty string."""
    if field_schema.has_default():
        return f"(default: {field_schema.default_value()!r})"
    if field_schema.is_optional():
        return "(optional)"
    return ""


def _detail(*parts: str) -> str:
    return " ".join(part for part in parts if part)


def _render_rows(rows: list[tuple[str, str]], prefix: str) -> list[str]:
    width = max(len(left) for left, _ in rows)
    return [
        f"{prefix}{_GUTTER}{left.ljust(width)}{_GUTTER}{right}".rstrip()
        for left, right in rows
    ]


def generate_help(schema: Schema, prefix: str = "") -> str:
    """Render *schema* as help text.

    The reserved ``help`` flag is included.  Empty sections are omitted.
    Every line starts with *prefix*.
    """
    schema = normalize_schema(schema)
    aliases = _aliases_by_target(schema.alias)
    lines: list[str] = []

    if schema.options:
        rows = [
            (
                f"{_name_column(name, aliases.get(name, []))} <{fs.type_label()}>",
                _detail(_annotation(fs), fs.description()),
            )
            for name, fs in schema.options.items()
        ]
        lines.append(f"{prefix}OPTIONS:")
        lines.extend(_render_rows(rows, prefix))

    if schema.flags:
        rows = [
            (_name_column(name, aliases.get(name, [])), fs.description())
            for name, fs in schema.flags.items()
        ]
        lines.append(f"{prefix}FLAGS:")
        lines.extend(_render_rows(rows, prefix))

    if schema.args:
        rows = [
            (f"{index} <{fs.type_label()}>", fs.description())
            for index, fs in enumerate(schema.args)
        ]
        lines.append(f"{prefix}ARGS:")
        lines.extend(_render_rows(rows, prefix))

    return "\n".join(lines) + "\n"
