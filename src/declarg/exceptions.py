"""Custom exception hierarchy for declarg.

All exceptions that cross layer boundaries must inherit from
:class:`DeclargError`.  Raw third-party exceptions (e.g. from pydantic)
must NEVER propagate beyond the infrastructure layer — they must be
caught and re-raised as a typed subclass defined here.

Validation failures are *not* exceptions: they are accumulated into a
:class:`~declarg.core.models.Failure` result.  Only :class:`CoercionError`
travels between the collaborator and the validator, and the validator
always converts it into a failure entry.

Hierarchy
---------
DeclargError
├── SchemaDefinitionError
├── BindingError
│   ├── SequenceError
│   └── ExcessPositionalError
└── CoercionError
"""

from __future__ import annotations


class DeclargError(Exception):
    """Base exception for all declarg errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Schema definition -----------------------------------------------------

class SchemaDefinitionError(DeclargError):
    """Raised when a schema violates the naming or alias invariants."""


# --- Binding ---------------------------------------------------------------

class BindingError(DeclargError):
    """Raised when the raw argument sequence cannot be bound to the schema.

    Binding errors are fatal to the current parse call: no partial
    record is returned.
    """


class SequenceError(BindingError):
    """Raised when an option's value token itself looks like a long option."""

    def __init__(self, option: str, token: str) -> None:
        super().__init__(
            f"Option --{option} expects a value but got {token!r}.",
            hint=f"Use --{option}=<value> to pass a value starting with '--'.",
        )
        self.option: str = option
        self.token: str = token


class ExcessPositionalError(BindingError):
    """Raised when more positional tokens are supplied than declared."""

    def __init__(self, token: str, expected: int) -> None:
        super().__init__(
            f"Unexpected positional argument {token!r} "
            f"(expected at most {expected}).",
        )
        self.token: str = token
        self.expected: int = expected


# --- Coercion --------------------------------------------------------------

class CoercionError(DeclargError):
    """Raised by a field schema when a raw value cannot be coerced.

    Attributes
    ----------
    kind : str
        Failure kind reported to the caller (``"invalid_type"`` or a
        validator-specific code).
    """

    def __init__(self, kind: str, message: str) -> None:
        super().__init__(message)
        self.kind: str = kind
