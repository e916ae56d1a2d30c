"""Rich console helpers for the CLI layer.

Consoles are created per call rather than at import time so that output
always targets the *current* ``sys.stdout``/``sys.stderr`` (which test
harnesses replace).  Text is printed without markup interpretation:
help and error lines contain literal brackets such as ``[a]`` or
``args[0]``.
"""

from __future__ import annotations

from rich.console import Console


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy over a fresh Rich console."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def print(self, *objects: object, style: str | None = None) -> None:
        """Render *objects* literally, without wrapping long lines."""
        Console(stderr=self._stderr).print(
            *objects,
            style=style,
            markup=False,
            highlight=False,
            soft_wrap=True,
        )


console = _ConsoleProxy(stderr=False)
"""Standard output — help text and demo results."""

error_console = _ConsoleProxy(stderr=True)
"""Standard error — error lines and hints."""
