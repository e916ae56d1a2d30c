"""pydantic-backed implementation of :class:`~declarg.core.protocols.FieldSchema`.

This module is the **only** place in the codebase that runs pydantic
validation.  All pydantic exceptions are caught here and re-raised as
typed :class:`~declarg.exceptions.DeclargError` subclasses — nothing raw
escapes the infrastructure boundary.
"""

from __future__ import annotations

import types
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Literal, Union, get_args, get_origin

from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError

from declarg.core import failure_kinds
from declarg.exceptions import CoercionError, SchemaDefinitionError
from declarg.infra.types import TypeLabel

_UNSET: Any = object()

# Suffixes of pydantic error types that mean "not parseable as this type".
_INVALID_TYPE_SUFFIXES: tuple[str, ...] = ("_parsing", "_type")


def failure_kind(error_type: str) -> str:
    """Map a pydantic error type onto a declarg failure kind.

    Primitive parse errors (``int_parsing``, ``bool_type``, ...) become
    :data:`~declarg.core.failure_kinds.INVALID_TYPE`; constraint errors
    keep pydantic's own code (``literal_error``,
    ``string_pattern_mismatch``, ...).
    """
    if error_type.endswith(_INVALID_TYPE_SUFFIXES):
        return failure_kinds.INVALID_TYPE
    return error_type


def _enum_label(values: Any) -> str:
    return "enum: " + " ".join(f"[{value}]" for value in values)


def describe_type(annotation: Any) -> str:
    """Infer a help label such as ``"number"`` from a type annotation."""
    origin = get_origin(annotation)

    if origin is Annotated:
        base, *metadata = get_args(annotation)
        for item in metadata:
            if isinstance(item, TypeLabel):
                return item.label
        for item in metadata:
            pattern = getattr(item, "pattern", None)
            if pattern is not None:
                return f"regex({getattr(pattern, 'pattern', pattern)})"
        return describe_type(base)

    if origin is Literal:
        return _enum_label(get_args(annotation))

    if origin is Union or origin is types.UnionType:
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        return " | ".join(describe_type(member) for member in members)

    if origin is not None:
        return getattr(origin, "__name__", str(annotation))

    if isinstance(annotation, type):
        if issubclass(annotation, Enum):
            return _enum_label(member.value for member in annotation)
        if issubclass(annotation, bool):
            return "boolean"
        if issubclass(annotation, (int, float, Decimal)):
            return "number"
        if issubclass(annotation, str):
            return "string"
        return annotation.__name__

    return str(annotation)


class PydanticField:
    """Concrete :class:`FieldSchema` backed by :class:`pydantic.TypeAdapter`.

    Usage::

        age = PydanticField(int, default=1, description="your age")
        age.coerce("34")   # -> 34

    Prefer the :func:`option`, :func:`flag` and :func:`arg` factories.

    Parameters
    ----------
    annotation:
        Any type pydantic can validate (``int``, ``Literal["a", "b"]``,
        ``Annotated[str, StringConstraints(...)]``, ...).
    default:
        Value used when the field is absent.  A string default is
        coerced like a command-line value; anything else is returned as
        declared.
    optional:
        When ``True`` an absent field without default yields ``None``.
    description:
        Human description for help output.
    """

    def __init__(
        self,
        annotation: Any,
        *,
        default: Any = _UNSET,
        optional: bool = False,
        description: str = "",
    ) -> None:
        try:
            self._adapter: TypeAdapter[Any] = TypeAdapter(annotation)
        except PydanticSchemaGenerationError as exc:
            raise SchemaDefinitionError(
                f"Unsupported field type: {annotation!r}",
            ) from exc
        self.annotation: Any = annotation
        self._default: Any = default
        self._optional: bool = optional
        self._description: str = description

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.type_label()!r}, "
            f"default={'<unset>' if self._default is _UNSET else repr(self._default)}, "
            f"optional={self._optional})"
        )

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def coerce(self, raw: Any) -> Any:
        """Validate *raw* with pydantic (lax mode) and return the result.

        Raises
        ------
        CoercionError
            Carrying the first pydantic error, mapped by :func:`failure_kind`.
        """
        try:
            return self._adapter.validate_python(raw)
        except ValidationError as exc:
            first = exc.errors()[0]
            raise CoercionError(failure_kind(first["type"]), first["msg"]) from exc

    def has_default(self) -> bool:
        return self._default is not _UNSET

    def default_value(self) -> Any:
        return None if self._default is _UNSET else self._default

    def is_optional(self) -> bool:
        return self._optional

    def description(self) -> str:
        return self._description

    def type_label(self) -> str:
        return describe_type(self.annotation)


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

def option(
    annotation: Any = str,
    *,
    default: Any = _UNSET,
    optional: bool = False,
    description: str = "",
) -> PydanticField:
    """Declare a value-taking option (``--name value``)."""
    return PydanticField(
        annotation,
        default=default,
        optional=optional,
        description=description,
    )


def flag(*, default: bool = False, description: str = "") -> PydanticField:
    """Declare a boolean flag; presence means ``True``."""
    return PydanticField(bool, default=default, description=description)


def arg(annotation: Any = str, *, description: str = "") -> PydanticField:
    """Declare a positional argument."""
    return PydanticField(annotation, description=description)
