#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

import pytest

from ss_grammar import (
    CALL,
    EXTERN,
    LOAD,
    SET,
    VarRef,
    find_var_refs,
    is_directive,
    parse_call,
    parse_extern,
    parse_label,
    parse_load,
    parse_set,
    qualified_splits,
)


# -------------------------
# keywords
# -------------------------


@pytest.mark.parametrize(
    "trimmed, keyword, expected",
    [
        ("CALL main", CALL, True),
        ("CALL", CALL, True),
        ("CALLBACK:", CALL, False),
        ("SETUP:", SET, False),
        ("SET\tx 1", SET, True),
        ('LOAD"mathlib"', LOAD, True),
        ("LOADER", LOAD, False),
        ("EXTERN add", EXTERN, True),
        ("PUSH 1", CALL, False),
    ],
)
def test_is_directive(trimmed, keyword, expected):
    assert is_directive(trimmed, keyword) is expected


# -------------------------
# labels
# -------------------------


def test_label_name_is_trimmed_prefix():
    assert parse_label("main:") == "main"
    assert parse_label("my func :") == "my func"


def test_label_requires_name_and_colon():
    assert parse_label(":") is None
    assert parse_label("  :") is None
    assert parse_label("main") is None


# -------------------------
# LOAD
# -------------------------


@pytest.mark.parametrize(
    "trimmed, expected",
    [
        ('LOAD "mathlib"', "mathlib"),
        ('LOAD"mathlib"', "mathlib"),
        ('LOAD   "mathlib"   ', "mathlib"),
        ("LOAD mathlib", "mathlib"),
        ('LOAD "sub/lib"', "sub/lib"),
    ],
)
def test_parse_load_accepts_quoted_and_bare_names(trimmed, expected):
    assert parse_load(trimmed) == expected


@pytest.mark.parametrize(
    "trimmed",
    [
        "LOAD",
        'LOAD ""',
        'LOAD "mathlib',
        'LOAD "mathlib" extra',
        "LOAD math lib",
        'LOAD math"lib',
    ],
)
def test_parse_load_rejects_malformed_directives(trimmed):
    assert parse_load(trimmed) is None


# -------------------------
# CALL
# -------------------------


def test_parse_call_targets():
    assert parse_call("CALL greet") == "greet"
    assert parse_call("CALL   mathlib.add") == "mathlib.add"
    assert parse_call("CALL do_it_2") == "do_it_2"


@pytest.mark.parametrize(
    "trimmed",
    ["CALL", "CALL greet now", "CALL greet!", "CALL math-lib.add", "CALL .f", "CALL mathlib.", "CALL a..b", "CALL ."],
)
def test_parse_call_rejects_malformed_targets(trimmed):
    assert parse_call(trimmed) is None


def test_qualified_splits_longest_module_first():
    assert qualified_splits("greet") == []
    assert qualified_splits("mathlib.add") == [("mathlib", "add")]
    assert qualified_splits("a.b.c") == [("a.b", "c"), ("a", "b.c")]


# -------------------------
# SET / EXTERN
# -------------------------


def test_parse_set_takes_second_token_verbatim():
    assert parse_set("SET x 5") == "x"
    assert parse_set("SET 9lives") == "9lives"
    assert parse_set("SET") is None


def test_parse_extern_returns_all_names():
    assert parse_extern("EXTERN add sub  mul") == ["add", "sub", "mul"]
    assert parse_extern("EXTERN") == []


# -------------------------
# %VAR<...>
# -------------------------


def test_find_var_refs_reports_columns_of_whole_match():
    raw = "  OUT %VAR<x> %VAR<total_2>"

    assert find_var_refs(raw) == [
        VarRef(name="x", start=6, end=13),
        VarRef(name="total_2", start=14, end=27),
    ]
    assert raw[6:13] == "%VAR<x>"


@pytest.mark.parametrize("raw", ["%VAR<>", "%VAR<1x>", "%VAR<x", "%VAR<a-b>", "%var<x>"])
def test_find_var_refs_ignores_non_matches(raw):
    assert find_var_refs(raw) == []


def test_find_var_refs_recovers_after_bad_prefix():
    assert find_var_refs("%VAR<%VAR<y>") == [VarRef(name="y", start=5, end=12)]
