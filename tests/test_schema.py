"""Tests for schema construction and normalization (core/schema.py).

These tests verify:

* ``define`` copies containers and checks invariants
* Alias checks (unknown target, chains, shadowing)
* Injection of the reserved ``help`` flag and ``h`` alias
* Normalization never mutates the caller's schema and is idempotent
"""

from __future__ import annotations

import pytest

from declarg.core.models import Schema
from declarg.core.schema import HELP_ALIAS, HELP_FLAG, check_schema, define, normalize_schema
from declarg.exceptions import SchemaDefinitionError
from declarg.infra.pydantic_field import arg, flag, option


# ---------------------------------------------------------------------------
# define / check_schema
# ---------------------------------------------------------------------------

class TestDefine:
    def test_returns_schema(self) -> None:
        schema = define(options={"name": option()}, flags={"dry": flag()})
        assert isinstance(schema, Schema)
        assert list(schema.options) == ["name"]
        assert list(schema.flags) == ["dry"]

    def test_args_become_tuple(self) -> None:
        schema = define(args=[arg(), arg(int)])
        assert isinstance(schema.args, tuple)
        assert len(schema.args) == 2

    def test_copies_caller_mappings(self) -> None:
        options = {"name": option()}
        schema = define(options=options)
        options["other"] = option()
        assert "other" not in schema.options

    def test_empty_schema(self) -> None:
        schema = define()
        assert schema.options == {}
        assert schema.flags == {}
        assert schema.args == ()
        assert schema.alias == {}

    def test_preserves_declaration_order(self) -> None:
        schema = define(options={"b": option(), "a": option(), "c": option()})
        assert list(schema.options) == ["b", "a", "c"]


class TestInvariants:
    def test_option_flag_overlap_rejected(self) -> None:
        with pytest.raises(SchemaDefinitionError, match="both option and flag: x"):
            define(options={"x": option()}, flags={"x": flag()})

    def test_alias_to_unknown_rejected(self) -> None:
        with pytest.raises(SchemaDefinitionError, match="unknown name"):
            define(flags={"dry": flag()}, alias={"d": "dri"})

    def test_alias_chain_rejected(self) -> None:
        with pytest.raises(SchemaDefinitionError, match="another alias"):
            define(flags={"dry": flag()}, alias={"d": "x", "x": "dry"})

    def test_alias_shadowing_canonical_rejected(self) -> None:
        with pytest.raises(SchemaDefinitionError, match="shadows"):
            define(options={"name": option()}, flags={"n": flag()}, alias={"n": "name"})

    def test_alias_to_reserved_help_accepted(self) -> None:
        schema = define(flags={"dry": flag()}, alias={"?": "help"})
        assert schema.alias == {"?": "help"}
        assert HELP_FLAG in normalize_schema(schema).flags

    def test_alias_to_option_accepted(self) -> None:
        schema = define(options={"name": option()}, alias={"n": "name"})
        assert schema.alias == {"n": "name"}

    def test_check_schema_on_direct_construction(self) -> None:
        schema = Schema(options={"x": option()}, flags={"x": flag()})
        with pytest.raises(SchemaDefinitionError):
            check_schema(schema)


# ---------------------------------------------------------------------------
# normalize_schema
# ---------------------------------------------------------------------------

class TestNormalize:
    def test_injects_help_flag_and_alias(self) -> None:
        normalized = normalize_schema(define(flags={"dry": flag()}))
        assert HELP_FLAG in normalized.flags
        assert normalized.alias[HELP_ALIAS] == HELP_FLAG

    def test_help_flag_defaults_to_false(self) -> None:
        help_flag = normalize_schema(define()).flags[HELP_FLAG]
        assert help_flag.has_default()
        assert help_flag.default_value() is False
        assert help_flag.type_label() == "boolean"

    def test_does_not_mutate_caller_schema(self) -> None:
        schema = define(flags={"dry": flag()})
        normalize_schema(schema)
        assert HELP_FLAG not in schema.flags
        assert HELP_ALIAS not in schema.alias

    def test_idempotent(self) -> None:
        once = normalize_schema(define(options={"name": option()}))
        twice = normalize_schema(once)
        assert once == twice

    def test_user_help_flag_kept(self) -> None:
        own = flag(description="custom help")
        normalized = normalize_schema(define(flags={"help": own}))
        assert normalized.flags["help"] is own
        assert normalized.alias[HELP_ALIAS] == "help"

    def test_help_option_blocks_injection(self) -> None:
        normalized = normalize_schema(define(options={"help": option()}))
        assert HELP_FLAG not in normalized.flags
        assert HELP_ALIAS not in normalized.alias

    def test_user_h_alias_kept(self) -> None:
        schema = define(options={"host": option()}, alias={"h": "host"})
        normalized = normalize_schema(schema)
        assert normalized.alias["h"] == "host"
        assert HELP_FLAG in normalized.flags

    def test_h_flag_blocks_alias(self) -> None:
        normalized = normalize_schema(define(flags={"h": flag()}))
        assert HELP_ALIAS not in normalized.alias
        assert HELP_FLAG in normalized.flags

    def test_rejects_invalid_schema(self) -> None:
        with pytest.raises(SchemaDefinitionError):
            normalize_schema(Schema(flags={"dry": flag()}, alias={"d": "nope"}))
