"""Property-based tests for alias resolution, binding and defaults."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from declarg.core.alias import resolve
from declarg.core.binder import bind
from declarg.core.models import Success
from declarg.core.parser import parse
from declarg.core.schema import define, normalize_schema
from declarg.exceptions import BindingError, ExcessPositionalError
from declarg.infra.pydantic_field import arg, flag, option

# Alias keys and targets come from disjoint alphabets, so tables are
# always single-level.
alias_key = st.text(alphabet="abcde", min_size=1, max_size=3)
alias_target = st.text(alphabet="vwxyz", min_size=1, max_size=3)
alias_table = st.dictionaries(alias_key, alias_target, max_size=6)

option_names = st.lists(
    st.text(alphabet="mnopq", min_size=2, max_size=6),
    min_size=1,
    max_size=5,
    unique=True,
)

positional_token = st.text(alphabet="abcxyz0123", max_size=6)

vocabulary = st.sampled_from(
    ["--a", "--b", "-f", "--g", "-x", "--a=1", "--f=1", "--unknown", "val", "-v"],
)


class TestResolveProperties:
    @given(table=alias_table, name=st.one_of(alias_key, alias_target))
    def test_resolve_is_idempotent(self, table: dict[str, str], name: str) -> None:
        once = resolve(name, table)
        assert resolve(once, table) == once


class TestBindProperties:
    @given(
        names=option_names,
        values=st.lists(st.text(max_size=8), min_size=1, max_size=8),
    )
    def test_equals_tokens_never_leave_pending_option(
        self, names: list[str], values: list[str],
    ) -> None:
        schema = normalize_schema(define(options={n: option() for n in names}))
        argv = [f"--{names[i % len(names)]}={value}" for i, value in enumerate(values)]
        record = bind(schema, argv)

        expected: dict[str, str] = {}
        for token in argv:
            key, value = token[2:].split("=", 1)
            expected[key] = value
        assert record.options == expected
        assert record.unbound_option is None
        assert record.args == []

    @given(
        declared=st.integers(min_value=0, max_value=3),
        extra=st.integers(min_value=1, max_value=3),
        data=st.data(),
    )
    def test_excess_positionals_always_rejected(
        self, declared: int, extra: int, data: st.DataObject,
    ) -> None:
        schema = normalize_schema(define(args=[arg() for _ in range(declared)]))
        tokens = data.draw(
            st.lists(positional_token, min_size=declared + extra, max_size=declared + extra),
        )
        with pytest.raises(ExcessPositionalError) as exc_info:
            bind(schema, tokens)
        assert exc_info.value.token == tokens[declared]

    @given(argv=st.lists(vocabulary, max_size=12))
    def test_option_and_flag_slots_stay_disjoint(self, argv: list[str]) -> None:
        schema = normalize_schema(
            define(
                options={"a": option(), "b": option()},
                flags={"f": flag(), "g": flag()},
                args=[arg(), arg()],
                alias={"x": "a", "v": "f"},
            )
        )
        try:
            record = bind(schema, argv)
        except BindingError:
            return
        assert not set(record.options) & set(record.flags)
        assert set(record.options) <= {"a", "b"}
        assert set(record.flags) <= {"f", "g"}


class TestDefaultsProperties:
    @given(
        defaults=st.dictionaries(
            st.text(alphabet="mnopq", min_size=2, max_size=6),
            st.integers(),
            max_size=5,
        ),
        flag_defaults=st.dictionaries(
            st.text(alphabet="rstu", min_size=2, max_size=6),
            st.booleans(),
            max_size=4,
        ),
    )
    def test_empty_argv_returns_exact_defaults(
        self, defaults: dict[str, int], flag_defaults: dict[str, bool],
    ) -> None:
        schema = define(
            options={name: option(int, default=value) for name, value in defaults.items()},
            flags={name: flag(default=value) for name, value in flag_defaults.items()},
        )
        result = parse(schema, [])
        assert isinstance(result, Success)
        assert result.value.options == defaults
        assert result.value.flags == {**flag_defaults, "help": False}
        assert result.value.args == ()
