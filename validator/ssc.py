#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

import argparse
from typing import List, Optional

from ss_analysis import ValidationResult
from ss_context import LogLevel, ValidationContext
from ss_diagnostics import Diagnostic
from ss_document import TextDocument
from ss_driver import StackScriptValidator
from ss_lines import Line, scan_lines
from ss_logger import log_error


def print_diagnostics(result: ValidationResult, context: ValidationContext) -> None:
    for diag in result.diagnostics:
        print_diagnostic_with_snippet(diag, result.lines, context)


def print_diagnostic_with_snippet(diag: Diagnostic, lines: List[Line], context: Optional[ValidationContext] = None) -> None:
    # First line: header
    log_error(context, diag.format())

    if not (0 <= diag.line < len(lines)):
        return

    src_line = lines[diag.line].raw

    # Pretty "N | ..." formatting (1-based line numbers, aligned gutter)
    display_line = diag.line + 1
    width = max(5, len(str(display_line)))
    gutter = f"{display_line:>{width}} | "

    log_error(context, gutter + src_line)

    if diag.end_line == diag.line:
        end_col = max(diag.column, diag.end_column)
    else:
        end_col = len(src_line)

    caret_width = max(1, end_col - diag.column)
    caret_prefix = " " * width + " | " + " " * diag.column
    log_error(context, caret_prefix + "^" * caret_width)


def build_validation_context(args: argparse.Namespace) -> ValidationContext:
    """Build a ValidationContext from command-line arguments."""
    verbosity = getattr(args, 'verbosity', 0)
    if verbosity >= 2:
        log_level = LogLevel.DEBUG
    elif verbosity >= 1:
        log_level = LogLevel.INFO
    else:
        log_level = LogLevel.ERROR

    return ValidationContext(
        log_rich_format=getattr(args, 'log', False),
        log_level=log_level,
    )


def _load_document(path: str, context: ValidationContext) -> Optional[TextDocument]:
    try:
        return TextDocument.from_file(path, language_id=context.language_id, encoding=context.encoding)
    except (OSError, UnicodeDecodeError) as e:
        log_error(context, f"error: [SSC-0010] cannot read {path}: {e}")
        return None


def cmd_check(args: argparse.Namespace) -> int:
    """Validate one or more files and print their diagnostics."""
    context = build_validation_context(args)
    validator = StackScriptValidator(context)

    exit_code = 0
    for path in args.files:
        document = _load_document(path, context)
        if document is None:
            exit_code = 1
            continue
        result = validator.validate(document)
        print_diagnostics(result, context)
        if result.has_errors():
            exit_code = 1
    return exit_code


def cmd_lines(args: argparse.Namespace) -> int:
    """Dump the scanned lines of a file."""
    context = build_validation_context(args)
    document = _load_document(args.file, context)
    if document is None:
        return 1

    for line in scan_lines(document.get_text()):
        print(f"{line.index:>5} | {line.raw}")
    return 0


def cmd_sym(args: argparse.Namespace) -> int:
    """Dump the symbol table and modules of one validation pass."""
    context = build_validation_context(args)
    document = _load_document(args.file, context)
    if document is None:
        return 1

    result = StackScriptValidator(context).validate(document)
    print_diagnostics(result, context)

    print(f"=== {document.identity} ===")

    print("  functions:")
    if result.symbols.functions:
        for name in sorted(result.symbols.functions.keys()):
            sym = result.symbols.functions[name]
            origin = f" (from {sym.module})" if sym.module else ""
            print(f"    {name}{origin}")
    else:
        print("    <none>")

    print("  variables:")
    if result.symbols.variables:
        for name in sorted(result.symbols.variables.keys()):
            print(f"    {name}")
    else:
        print("    <none>")

    print("  modules:")
    if result.modules:
        for name, module in result.modules.items():
            print(f"    {name:<16} {module.status.name}")
    else:
        print("    <none>")

    return 0


def cmd_keywords(args: argparse.Namespace) -> int:
    """List keyword completion candidates."""
    context = build_validation_context(args)
    for item in context.keywords.completion_candidates():
        print(f"{item.label:<14} {context.keywords.category(item.label)}")
    return 0


def _add_file_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("file", help="StackScript source file")


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog="ssc", description="StackScript validator")
    subparsers = parser.add_subparsers(dest="command", required=True, help="Command to run")

    parser.add_argument("-v", "--verbose",
                        action='count',
                        default=0,
                        dest='verbosity',
                        help="Increase verbosity: -v=INFO, -vv=DEBUG")
    parser.add_argument("-l", "--log",
                        action='store_true',
                        default=False,
                        help="Enable rich log formatting (timestamps, levels)")

    p_check = subparsers.add_parser("check", help="Validate files", aliases=["validate"])
    p_check.add_argument("files", nargs="+", help="StackScript source files")
    p_check.set_defaults(func=cmd_check)

    p_lines = subparsers.add_parser("lines", help="Dump scanned lines")
    _add_file_arg(p_lines)
    p_lines.set_defaults(func=cmd_lines)

    p_sym = subparsers.add_parser("sym", help="Dump symbols and modules", aliases=["symbols"])
    _add_file_arg(p_sym)
    p_sym.set_defaults(func=cmd_sym)

    p_kw = subparsers.add_parser("keywords", help="List opcode completions")
    p_kw.set_defaults(func=cmd_keywords)

    args = parser.parse_args(argv)

    rc = args.func(args)
    raise SystemExit(rc)


if __name__ == "__main__":
    main()
