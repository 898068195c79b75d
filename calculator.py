"""Line-by-line integer calculator.

Reads one infix expression per line from a file, converts it to postfix,
evaluates it and writes one result (or ERROR_TEXT) per line to another file.

    python calculator.py [input.txt [output.txt]]

Set DEBUG to log each line's postfix form, STRICT to reject stray characters.
"""
import logging
import os
import sys

from infix import ExpressionError, render, to_postfix
from postfix import evaluate

DEBUG = bool(os.getenv("DEBUG", False))
STRICT = bool(os.getenv("STRICT", False))
ERROR_TEXT = "Error: Invalid expression or division by zero"

log = logging.getLogger(__name__)


def calculate(line, strict=False):
    """
    >>> calculate("(1 + 2) * 3")
    9
    """
    tokens = to_postfix(line, strict)
    if log.isEnabledFor(logging.DEBUG):
        log.debug("%r -> %r", line, render(tokens))
    return evaluate(tokens)


def format_result(line, strict=False):
    try:
        return str(calculate(line, strict))
    except (ExpressionError, ZeroDivisionError) as e:
        log.debug("%r: %s", line, e)
        return ERROR_TEXT


def process_lines(lines, strict=False):
    """Yield one output line per input line; each line starts from scratch."""
    for line in lines:
        yield format_result(line.rstrip("\r\n"), strict)


def run(source, sink, strict=False):
    """Calculate every line of the file `source` into the file `sink`.

    Returns the number of lines written.
    """
    n = 0
    with open(source, encoding="utf-8", errors="replace") as fin, \
            open(sink, "w", encoding="utf-8") as fout:
        for out in process_lines(fin, strict):
            fout.write(out + "\n")
            n += 1
    return n


def main(argv=None):
    logging.basicConfig(
        level=logging.DEBUG if DEBUG else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    args = sys.argv[1:] if argv is None else argv
    source = args[0] if len(args) > 0 else "input.txt"
    sink = args[1] if len(args) > 1 else "output.txt"
    try:
        n = run(source, sink, STRICT)
    except OSError as e:
        log.error("Cannot process %s -> %s: %s", source, sink, e)
        print(f"File error. ({e})", file=sys.stderr)
        return 1
    log.debug("%d lines", n)
    print(f"Calculation complete. Check {sink}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
