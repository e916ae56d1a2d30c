"""CLI-facing wrapper around the parse pipeline.

:func:`run` is what a script calls with its ``sys.argv``.  It is the
only place that translates parse outcomes into printed output and a
process exit code:

* help requested (``--help``/``-h``, or empty argv in strict mode)
  → help on stdout, exit 0;
* binding error → ``Error:`` line (and hint) on stderr, exit 1;
* validation failures → one line per failure on stderr, exit 1;
* success → the typed :class:`~declarg.core.models.ParsedArgs`, no output.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import NoReturn

from declarg.cli import exit_codes
from declarg.cli.console import console, error_console
from declarg.core.binder import bind
from declarg.core.help_text import generate_help
from declarg.core.models import Failure, ParsedArgs, Schema
from declarg.core.report import format_failures
from declarg.core.schema import HELP_FLAG, normalize_schema
from declarg.core.validator import validate
from declarg.exceptions import BindingError, DeclargError

PARSE_ERROR_HEADER: str = "[declarg:error] ParseError"


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Behaviour switches for :func:`run`."""

    help: bool = True
    """Honour ``--help``/``-h`` by printing help and exiting 0."""

    help_with_no_args: bool = False
    """Print help and exit 0 when argv is empty."""


def print_help(schema: Schema) -> None:
    """Write the rendered help for *schema* to stdout."""
    console.print(generate_help(schema).rstrip("\n"))


def report_error(failure: Failure) -> None:
    """Write a ``ParseError`` header, then one line per failure, to stderr."""
    error_console.print(PARSE_ERROR_HEADER, style="bold red")
    for line in format_failures(failure.failures):
        error_console.print(line)


def report_exception(exc: DeclargError) -> None:
    """Write a declarg exception and its hint to stderr."""
    error_console.print(f"Error: {exc}", style="bold red")
    if exc.hint:
        error_console.print(f"Hint: {exc.hint}", style="yellow")


def _exit_with_help(schema: Schema) -> NoReturn:
    print_help(schema)
    sys.exit(exit_codes.SUCCESS)


def run(
    schema: Schema,
    argv: Sequence[str] | None = None,
    *,
    config: RunConfig = RunConfig(),
) -> ParsedArgs:
    """Parse *argv* (default ``sys.argv[1:]``) or exit the process.

    Help is checked after binding and before validation, so ``--help``
    works even when required options are missing.

    Raises
    ------
    SystemExit
        On help (code 0) and on any binding or validation error (code 1).
    """
    args = sys.argv[1:] if argv is None else list(argv)

    if config.help_with_no_args and not args:
        _exit_with_help(schema)

    normalized = normalize_schema(schema)
    try:
        record = bind(normalized, args)
    except BindingError as exc:
        report_exception(exc)
        sys.exit(exit_codes.GENERAL_ERROR)

    if config.help and record.flags.get(HELP_FLAG):
        _exit_with_help(schema)

    result = validate(normalized, record)
    if isinstance(result, Failure):
        report_error(result)
        sys.exit(exit_codes.GENERAL_ERROR)

    return result.value
