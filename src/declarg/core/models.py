"""Domain models for declarg.

Schema and result models are **frozen** dataclasses — immutable value
objects with no behaviour beyond data access.  They carry zero I/O and
zero dependencies on external packages.  The one mutable model,
:class:`IntermediateRecord`, lives only for the duration of a single
binding pass.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

from declarg.core.protocols import FieldSchema


# ---------------------------------------------------------------------------
# Schema model
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Schema:
    """Declarative description of a command-line contract.

    Build instances with :func:`declarg.core.schema.define`, which checks
    the naming invariants.  The parser never mutates a schema; the
    implicit ``help`` flag is added to a normalized copy.
    """

    options: Mapping[str, FieldSchema] = field(default_factory=dict)
    """Canonical option name → value schema, in declaration order."""

    flags: Mapping[str, FieldSchema] = field(default_factory=dict)
    """Canonical flag name → boolean schema, in declaration order."""

    args: tuple[FieldSchema, ...] = ()
    """Positional value schemas; the length is the exact arity."""

    alias: Mapping[str, str] = field(default_factory=dict)
    """Alternate name → canonical option or flag name."""


# ---------------------------------------------------------------------------
# Binding output
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class IntermediateRecord:
    """Untyped result of binding raw tokens onto a schema."""

    flags: dict[str, bool] = field(default_factory=dict)
    options: dict[str, str] = field(default_factory=dict)
    args: list[str] = field(default_factory=list)

    unbound_option: str | None = None
    """Option still waiting for its value when the input ran out."""


# ---------------------------------------------------------------------------
# Parse results
# ---------------------------------------------------------------------------

FieldPath = tuple[Literal["options", "flags", "args"], str | int]


@dataclass(frozen=True, slots=True)
class ParsedArgs:
    """Fully typed parse output."""

    options: dict[str, Any]
    flags: dict[str, Any]
    args: tuple[Any, ...]


@dataclass(frozen=True, slots=True)
class FieldFailure:
    """A single field-level validation failure."""

    path: FieldPath
    """``("options", name)``, ``("flags", name)`` or ``("args", index)``."""

    kind: str
    """See :mod:`declarg.core.failure_kinds`; may be a validator code."""

    message: str = ""


@dataclass(frozen=True, slots=True)
class Success:
    """Parse outcome carrying the typed value."""

    value: ParsedArgs

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Failure:
    """Parse outcome carrying every field failure, in declaration order."""

    failures: tuple[FieldFailure, ...]

    @property
    def ok(self) -> bool:
        return False

    def __len__(self) -> int:
        return len(self.failures)


ParseResult = Success | Failure
