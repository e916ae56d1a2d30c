"""Shared pytest fixtures and configuration for the declarg test suite.

Guidelines
----------
* Core tests must be pure — no printing, no process exit.
* Only ``test_runner`` and ``test_scaffold`` exercise stdout/stderr and
  ``SystemExit``.
* Field schemas are real pydantic-backed fields unless a test needs to
  observe the collaborator contract, in which case a stub is used.
"""

from __future__ import annotations

import pytest

from declarg.core.models import Schema
from declarg.core.schema import define
from declarg.infra.pydantic_field import arg, flag, option
from declarg.infra.types import AsNumber


@pytest.fixture
def basic_schema() -> Schema:
    """``name`` (required), ``age`` (number, default 1), ``dry``, two args."""
    return define(
        options={
            "name": option(str, description="input your name"),
            "age": option(AsNumber, default=1, description="your age"),
        },
        flags={"dry": flag()},
        args=[arg(str), arg(AsNumber)],
    )
