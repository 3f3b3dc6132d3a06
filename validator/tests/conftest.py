#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from __future__ import annotations

import sys
from pathlib import Path
from textwrap import dedent

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from ss_driver import StackScriptValidator


@pytest.fixture
def temp_project(tmp_path: Path) -> Path:
    return tmp_path


@pytest.fixture
def write_stack_file(temp_project: Path):
    """Write a file (e.g. 'mathlib.stackm') into the temporary project."""

    def _write(filename: str, content: str) -> Path:
        file_path = temp_project / filename
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(dedent(content), encoding="utf-8")
        return file_path

    return _write


@pytest.fixture
def write_module(write_stack_file):
    """
    Write the two files of a module. Pass None to leave a file out.

    Usage:
        def test_something(write_module):
            write_module("mathlib", metadata="EXTERN add", implementation="add:\\nADD\\n")
    """

    def _write(name: str, metadata: str | None = "", implementation: str | None = "") -> None:
        if metadata is not None:
            write_stack_file(f"{name}.stackm", metadata)
        if implementation is not None:
            write_stack_file(f"{name}.stack", implementation)

    return _write


@pytest.fixture
def validate_source(temp_project: Path):
    """Validate source text as the document 'main.stack' of the temporary project.

    Usage:
        def test_something(validate_source):
            result = validate_source(["CALL greet", "HALT"])
            assert result.has_errors()
    """

    def _validate(src: str | list[str], filename: str = "main.stack"):
        if isinstance(src, list):
            src = "\n".join(src)
        return StackScriptValidator().validate_source(src, temp_project / filename)

    return _validate


def messages(diagnostics) -> list[str]:
    return [d.message for d in diagnostics]


def has_error_code(diagnostics, code: str) -> bool:
    """Check if any diagnostic carries the given code ("RES-0030" or "[RES-0030]")."""
    code = code.strip("[]")
    return any(d.code == code for d in diagnostics)
