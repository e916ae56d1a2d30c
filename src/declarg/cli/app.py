"""Demo entry point for declarg (``python -m declarg`` / ``declarg-demo``).

Parses its arguments against :data:`SAMPLE_SCHEMA` and prints the typed
result, which makes the parser easy to try from a shell::

    python -m declarg --name mizchi --env a --dry -s xxx 1

:func:`cli` is the error boundary.  It catches
:class:`~declarg.exceptions.DeclargError`, ``KeyboardInterrupt``, and any
unexpected ``Exception``, and maps each to a well-defined exit code.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Annotated, Literal

from pydantic import AfterValidator, StringConstraints

from declarg.cli import exit_codes
from declarg.cli.console import console, error_console
from declarg.cli.runner import RunConfig, report_exception, run
from declarg.core.schema import define
from declarg.exceptions import DeclargError
from declarg.infra.pydantic_field import arg, flag, option
from declarg.infra.types import AsNumber

SAMPLE_SCHEMA = define(
    options={
        "name": option(str, description="input your name"),
        "env": option(Literal["a", "b"], description="env"),
        "age": option(AsNumber, default=1, description="your age"),
    },
    flags={
        "dry": flag(),
        "shortable": flag(description="shortable example"),
    },
    args=[
        arg(str, description="input your first name"),
        arg(
            Annotated[str, StringConstraints(pattern=r"^\d+$"), AfterValidator(int)],
            description="any integer",
        ),
    ],
    alias={"s": "shortable"},
)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demo against *argv* (default ``sys.argv[1:]``).

    Returns
    -------
    int
        OS process exit code.  Help and argument errors leave through
        :class:`SystemExit` raised by :func:`~declarg.cli.runner.run`.
    """
    parsed = run(SAMPLE_SCHEMA, argv, config=RunConfig(help_with_no_args=True))

    console.print("Parsed input", style="bold green")
    console.print(f"  options: {parsed.options}")
    console.print(f"  flags:   {parsed.flags}")
    console.print(f"  args:    {parsed.args}")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except DeclargError as exc:
        report_exception(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        error_console.print("\nAborted by user.", style="yellow")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        error_console.print(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
            style="bold red",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
