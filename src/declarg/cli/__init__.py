"""CLI layer — printing, process exit, and the demo entry point.

This package is the outermost layer of the library.  It may import
from ``core`` and ``infra``, but no other layer may import from
``cli``.  It is the only layer that writes to stdout/stderr or calls
:func:`sys.exit`.
"""
