"""Infrastructure layer — the pydantic-backed schema validation adapter.

Every raw pydantic exception must be caught here and re-raised as a
:class:`~declarg.exceptions.DeclargError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
* Must satisfy :class:`~declarg.core.protocols.FieldSchema` structurally.
"""

from declarg.infra.pydantic_field import PydanticField, arg, describe_type, flag, option
from declarg.infra.types import AsBoolean, AsNumber, TypeLabel

__all__: list[str] = [
    "AsBoolean",
    "AsNumber",
    "PydanticField",
    "TypeLabel",
    "arg",
    "describe_type",
    "flag",
    "option",
]
