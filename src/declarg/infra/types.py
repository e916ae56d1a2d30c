"""Reusable annotated types that coerce command-line strings.

These are plain :data:`typing.Annotated` aliases understood by pydantic.
They accept only the textual forms a user would type and convert them
into Python values, so ``"01"`` or ``"1e3"`` are rejected as numbers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

from pydantic import AfterValidator, StringConstraints

NUMBER_PATTERN: str = r"^([1-9]+[0-9]*|0)(\.\d+)?$"
BOOLEAN_PATTERN: str = r"^(true|false)$"


@dataclass(frozen=True, slots=True)
class TypeLabel:
    """``Annotated`` marker overriding the label shown in help output.

    Pydantic ignores metadata it does not recognise, so the marker has no
    effect on validation.
    """

    label: str


def _to_number(value: str) -> int | float:
    return float(value) if "." in value else int(value)


def _to_boolean(value: str) -> bool:
    return value == "true"


AsNumber = Annotated[
    str,
    StringConstraints(pattern=NUMBER_PATTERN),
    AfterValidator(_to_number),
    TypeLabel("number"),
]
"""Non-negative decimal string converted to ``int`` or ``float``."""

AsBoolean = Annotated[
    str,
    StringConstraints(pattern=BOOLEAN_PATTERN),
    AfterValidator(_to_boolean),
    TypeLabel("boolean"),
]
"""Literal ``true``/``false`` string converted to ``bool``."""
