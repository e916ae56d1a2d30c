"""Error reporter — maps validation failures to display lines."""

from __future__ import annotations

from collections.abc import Iterable

from declarg.core.models import FieldFailure


def failure_label(failure: FieldFailure) -> str:
    """Return ``args[<i>]`` for positionals and ``--<name>`` otherwise."""
    section, key = failure.path
    if section == "args":
        return f"args[{key}]"
    return f"--{key}"


def format_failures(failures: Iterable[FieldFailure]) -> list[str]:
    """Return one ``<label>: <kind>`` line per failure, order preserved."""
    return [f"{failure_label(failure)}: {failure.kind}" for failure in failures]
