"""Allow ``python -m declarg`` invocation.

This module simply delegates to the demo error-boundary entry point so
that ``python -m declarg`` behaves identically to the ``declarg-demo``
console script.
"""

from __future__ import annotations

from declarg.cli.app import cli

if __name__ == "__main__":
    cli()
