"""Tokenizer/binder — maps raw argv tokens onto schema slots.

A single left-to-right scan with one piece of lookahead state, the
*pending option*: an option token written without ``=`` waits for the
next token to become its value.

Binding rules
-------------
* ``-x`` and ``--x`` are equivalent; the whole dash run is stripped.
* ``--key=value`` binds immediately and never waits for a value.
* Unknown option and flag names are dropped silently (lenient policy).
* A pending option's value may start with one dash but not with two.
* An option still pending at end of input is left unbound; validation
  reports it as missing.
* Positionals beyond the declared arity are a fatal binding error.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from declarg.core.alias import resolve
from declarg.core.models import IntermediateRecord, Schema
from declarg.exceptions import ExcessPositionalError, SequenceError

lg = logging.getLogger(__name__)


def bind(schema: Schema, argv: Sequence[str]) -> IntermediateRecord:
    """Bind *argv* onto *schema* and return the untyped record.

    Raises
    ------
    SequenceError
        If the token following a pending option starts with ``--``.
    ExcessPositionalError
        If more positional tokens are given than ``schema.args`` declares.
    """
    record = IntermediateRecord()
    pending: str | None = None

    for token in argv:
        if pending is not None:
            if token.startswith("--"):
                raise SequenceError(pending, token)
            record.options[pending] = token
            pending = None
            continue

        if token.startswith("-"):
            raw_key = token.lstrip("-")

            if "=" in raw_key:
                key, value = raw_key.split("=", 1)
                key = resolve(key, schema.alias)
                if key in schema.options:
                    record.options[key] = value
                else:
                    lg.debug("ignoring unknown option %r", token)
                continue

            key = resolve(raw_key, schema.alias)
            if key in schema.flags:
                record.flags[key] = True
            elif key in schema.options:
                lg.debug("awaiting value for --%s", key)
                pending = key
            else:
                lg.debug("ignoring unknown option %r", token)
            continue

        index = len(record.args)
        if index >= len(schema.args):
            raise ExcessPositionalError(token, len(schema.args))
        record.args.append(token)

    if pending is not None:
        lg.debug("option --%s has no value at end of input", pending)
        record.unbound_option = pending

    return record
