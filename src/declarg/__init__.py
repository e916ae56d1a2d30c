"""declarg — declarative command-line argument parsing.

Describe options, flags, positionals and aliases once; get typed values,
accumulated validation failures, and help text from the same schema.

Example::

    from declarg import AsNumber, arg, define, flag, option, run

    schema = define(
        options={"name": option(str), "age": option(AsNumber, default=1)},
        flags={"dry": flag()},
        args=[arg(str)],
    )
    parsed = run(schema)
"""

from declarg.cli.runner import RunConfig, print_help, report_error, run
from declarg.core import (
    Failure,
    FieldFailure,
    FieldSchema,
    ParsedArgs,
    ParseResult,
    Schema,
    Success,
    define,
    format_failures,
    generate_help,
    parse,
)
from declarg.exceptions import (
    BindingError,
    CoercionError,
    DeclargError,
    ExcessPositionalError,
    SchemaDefinitionError,
    SequenceError,
)
from declarg.infra import AsBoolean, AsNumber, PydanticField, TypeLabel, arg, flag, option
from declarg.version import __version__

__all__: list[str] = [
    "AsBoolean",
    "AsNumber",
    "BindingError",
    "CoercionError",
    "DeclargError",
    "ExcessPositionalError",
    "Failure",
    "FieldFailure",
    "FieldSchema",
    "ParseResult",
    "ParsedArgs",
    "PydanticField",
    "RunConfig",
    "Schema",
    "SchemaDefinitionError",
    "SequenceError",
    "Success",
    "TypeLabel",
    "__version__",
    "arg",
    "define",
    "flag",
    "format_failures",
    "generate_help",
    "option",
    "parse",
    "print_help",
    "report_error",
    "run",
]
