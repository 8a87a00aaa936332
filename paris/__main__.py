"""CLI entry point for the Paris interpreter.

Usage:
    python -m paris [-v|-vv|-vvv] <program_file>
    python -m paris [-v...] --emit-ast <program_file>
    python -m paris [-v...] --ast <ast_json_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  --emit-ast    Parse the given .paris file and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file

Debug information is written to `debug.txt` in the current directory when
verbosity is greater than zero. Every top-level statement is evaluated;
the value of each statement that is not a literal or a binding is echoed
to stdout. Syntax and evaluation errors are reported on stderr once the
program has finished, and the exit status is 1 if there were any.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from .ast import LITERALS, Node, Variable
from .ast_json import program_to_obj, program_from_obj
from .errors import EvaluationError
from .interpreter import Interpreter, Outcome
from .parser import parse_program
from .report import report_errors


def read_file(path: Path) -> str:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(1)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def echo(statements: List[Node], outcomes: List[Outcome]):
    for stmt, outcome in zip(statements, outcomes):
        if isinstance(outcome, EvaluationError):
            continue
        if isinstance(stmt, LITERALS) or isinstance(stmt, Variable):
            continue
        print(str(outcome), end='')


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog='paris', description="Paris language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='PARIS_FILE', help='emit AST JSON for the given .paris file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('program', nargs='?', help='Paris program file (.paris) to execute')
    args = parser.parse_args(argv)

    # Emit AST mode
    if args.emit_ast:
        program_file = Path(args.emit_ast)
        source = read_file(program_file)
        parsed = parse_program(source)
        if parsed.errors:
            report_errors(source, parsed.errors, str(program_file))
            sys.exit(1)
        obj = program_to_obj(parsed.statements)
        out_path = program_file.with_suffix(program_file.suffix + '.ast.json') if program_file.suffix != '' else program_file.with_name(program_file.name + '.ast.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(obj, out, ensure_ascii=False, indent=2)
        print(str(out_path))
        return

    # Execute from AST JSON; without the source only the raw spans can be reported
    if args.ast:
        ast_path = Path(args.ast)
        try:
            statements = program_from_obj(json.loads(read_file(ast_path)))
        except (ValueError, TypeError, KeyError) as e:
            print(f"Error: invalid AST file {ast_path}: {e}", file=sys.stderr)
            sys.exit(1)
        with Interpreter(debug_level=args.v) as interpreter:
            outcomes = interpreter.run(statements)
        echo(statements, outcomes)
        failed = [o for o in outcomes if isinstance(o, EvaluationError)]
        for e in failed:
            print(f"Runtime error at {e.span!r}: {e}", file=sys.stderr)
        if failed:
            sys.exit(1)
        return

    # Default: execute source file
    if not args.program:
        parser.error('missing program file; or use --emit-ast/--ast')
    program_file = Path(args.program)
    source = read_file(program_file)
    parsed = parse_program(source)
    with Interpreter(debug_level=args.v) as interpreter:
        outcomes = interpreter.run(parsed.statements)
    echo(parsed.statements, outcomes)
    errors = list(parsed.errors) + [o for o in outcomes if isinstance(o, EvaluationError)]
    if report_errors(source, errors, str(program_file)):
        sys.exit(1)


if __name__ == '__main__':
    main()
