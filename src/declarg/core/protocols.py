"""Protocols (interfaces) consumed by the core layer.

These define the contract that schema-validation adapters must satisfy.
Core code depends ONLY on this protocol — never on a concrete validation
library — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Any, Protocol


class FieldSchema(Protocol):
    """Contract for a single declared field (option, flag or positional).

    Any object that implements these methods with the correct signatures
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def coerce(self, raw: Any) -> Any:
        """Validate *raw* and return the transformed value.

        *raw* is the token string for options and positionals, and
        ``True`` for a flag that was present.

        Implementations must map all backend-specific exceptions to
        :class:`~declarg.exceptions.CoercionError`.

        Raises
        ------
        CoercionError
            When *raw* does not satisfy the declared type.
        """
        ...  # pragma: no cover

    def has_default(self) -> bool:
        """Return ``True`` when a default value is declared."""
        ...  # pragma: no cover

    def default_value(self) -> Any:
        """Return the declared default value."""
        ...  # pragma: no cover

    def is_optional(self) -> bool:
        """Return ``True`` when the field may be omitted without a default."""
        ...  # pragma: no cover

    def description(self) -> str:
        """Return the human description, possibly empty."""
        ...  # pragma: no cover

    def type_label(self) -> str:
        """Return a short type label for help output (e.g. ``"number"``)."""
        ...  # pragma: no cover
