#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

import pytest

from conftest import has_error_code
from ss_diagnostics import DIAGNOSTIC_CODE_FAMILIES, Diagnostic, Severity

# Codes that produce warnings, not errors.
WARNING_CODES = {"STY-0010"}

TRIGGERS = {
    "SYN-0010": ["LOAD", "HALT"],
    "SYN-0020": ["CALL 1+2", "HALT"],
    "SYN-0030": ["SET", "HALT"],
    "SYN-0040": ["EXTERN f", "HALT"],
    "RES-0010": ['LOAD "nometa"', "HALT"],
    "RES-0011": ['LOAD "noimpl"', "HALT"],
    "RES-0020": ["CALL lib.f", "HALT"],
    "RES-0021": ['LOAD "full"', "CALL full.missing", "HALT"],
    "RES-0030": ["CALL missing", "HALT"],
    "RES-0040": ["OUT %VAR<nope>", "HALT"],
    "IO-0010": ['LOAD "dir"', "HALT"],
    "STY-0010": ["PUSH 1"],
}

ALL_CODES = [code for codes in DIAGNOSTIC_CODE_FAMILIES.values() for code in codes]


@pytest.fixture
def project_modules(temp_project, write_module):
    write_module("nometa", metadata=None, implementation="f:\n")
    write_module("noimpl", metadata="EXTERN f\n", implementation=None)
    write_module("full", metadata="EXTERN f\n", implementation="f:\n")
    write_module("dir", metadata="EXTERN f\n", implementation=None)
    (temp_project / "dir.stack").mkdir()


def test_every_registered_code_has_a_trigger():
    assert sorted(TRIGGERS) == sorted(ALL_CODES)


def test_codes_are_unique():
    assert len(ALL_CODES) == len(set(ALL_CODES))


@pytest.mark.parametrize("code", ALL_CODES)
def test_code_is_reachable(code, project_modules, validate_source):
    result = validate_source(TRIGGERS[code])

    assert has_error_code(result.diagnostics, code), [d.format() for d in result.diagnostics]
    matching = [d for d in result.diagnostics if d.code == code]
    expected = Severity.WARNING if code in WARNING_CODES else Severity.ERROR
    assert all(d.severity is expected for d in matching)


def test_format_uses_one_based_positions(tmp_path):
    path = tmp_path / "main.stack"
    diag = Diagnostic(
        severity=Severity.ERROR,
        message="Undefined function: greet",
        code="RES-0030",
        filename=str(path),
        line=2,
        column=0,
        end_line=2,
        end_column=10,
    )

    assert diag.format() == f"{path}:3:1: error: [RES-0030] Undefined function: greet"
    assert diag.is_error


def test_format_without_filename_or_code():
    diag = Diagnostic(severity=Severity.WARNING, message="No HALT instruction found")

    assert diag.format() == "warning: No HALT instruction found"
    assert not diag.is_error
