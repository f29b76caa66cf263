"""Command-line driver: example runner, interactive loop and file runner."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional, TextIO

from lispy.config import get_log_level
from lispy.interpreter import Interpreter
from lispy.types.errors import LispyError
from lispy.types.expression import render


logger = logging.getLogger(__name__)

EXAMPLES = [
    "(+ (* 5 3) 20)",
    "(if (> 6 3) 20 (/ 5 0))",
    "(let x 3 (let x 7 (* x 4)))",
    "(let x 3 (* x 4))",
    "(let myfun (lambda (x y) (+ x y)) (myfun 4 5))",
    "(! 0)",
    "(>= 3 0)",
    "(<= 1 2)",
]

PROMPT = "> "


def format_error(error: LispyError) -> str:
    return f"error: {error.kind}: {error}"


def run_examples(out: Optional[TextIO] = None, examples: Iterable[str] = EXAMPLES) -> int:
    out = out or sys.stdout
    interp = Interpreter()
    for code in examples:
        result = interp.eval_line(code)
        text = render(result.value) if result.ok else format_error(result.error)
        print(f"{code} -> {text}", file=out)
    return 0


def repl(inp: Optional[TextIO] = None, out: Optional[TextIO] = None) -> int:
    inp = inp or sys.stdin
    out = out or sys.stdout
    interp = Interpreter()
    while True:
        out.write(PROMPT)
        out.flush()
        line = inp.readline()
        if not line:
            out.write("\n")
            return 0
        if not line.strip():
            continue
        result = interp.eval_line(line)
        if result.ok:
            print(render(result.value), file=out)
        else:
            logger.debug("Line failed: %r", line, exc_info=result.error)
            print(format_error(result.error), file=out)


def run_file(path: Path, out: Optional[TextIO] = None) -> int:
    out = out or sys.stdout
    interp = Interpreter()
    try:
        for value in interp.iter_eval(path.read_text(encoding="utf-8")):
            print(render(value), file=out)
    except LispyError as ex:
        print(format_error(ex), file=out)
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lispy", description="A minimal Lisp interpreter.")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--examples", action="store_true", help="run the built-in example programs")
    mode.add_argument("--repl", action="store_true", help="start an interactive session (default)")
    mode.add_argument("--file", type=Path, help="evaluate every form in a source file")
    parser.add_argument("--log-level", default=None, help="logging level (overrides LISPY_LOG_LEVEL)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=get_log_level(args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.examples:
        return run_examples()
    if args.file is not None:
        return run_file(args.file)
    return repl()
