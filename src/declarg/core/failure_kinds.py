"""Failure-kind constants reported by the validator.

Centralised here so that every failure path uses a well-known, tested
value.  Validator-specific codes (e.g. ``"literal_error"``) are passed
through unchanged and are not listed.
"""

from __future__ import annotations

REQUIRED: str = "required"
"""A field with no default and not declared optional was not supplied."""

INVALID_TYPE: str = "invalid_type"
"""A supplied value could not be parsed as the declared primitive type."""
