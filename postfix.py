"""Evaluation of postfix token sequences over integers."""
import operator as op

from infix import OPERATORS, ExpressionError
from stack import Stack


def truncdiv(a, b):
    """Integer division rounding toward zero, like C.

    >>> truncdiv(7, 2), truncdiv(-7, 2), truncdiv(7, -2)
    (3, -3, -3)
    """
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


ARITH = {
    "+": op.add,
    "-": op.sub,
    "*": op.mul,
    "/": truncdiv,
}
assert frozenset(ARITH) == OPERATORS


def is_number(tok):
    return tok[:1].isdigit() or tok[:1] == "-" and tok[1:2].isdigit()


def apply_op(sym, a, b):
    """Return `a sym b`; raises ZeroDivisionError for `/` by 0."""
    return ARITH[sym](a, b)


def evaluate(tokens):
    """Evaluate postfix `tokens` (a token list or space separated text).

    Raises ZeroDivisionError on division by zero and ExpressionError on
    anything else that doesn't leave exactly one value behind.

    >>> evaluate(['3', '4', '2', '*', '+'])
    11
    >>> evaluate("1 2 + 3 *")
    9
    >>> evaluate("-4 3 /")
    -1
    """
    if isinstance(tokens, str):
        tokens = tokens.split()
    values = Stack()
    for tok in tokens:
        if is_number(tok):
            try:
                values.push(int(tok))
            except ValueError:
                raise ExpressionError(f"Bad number {tok!r}") from None
        elif tok in OPERATORS:
            b, a = values.pop(), values.pop()
            if a is None:
                raise ExpressionError(f"Not enough operands for {tok!r}")
            values.push(apply_op(tok, a, b))
        else:
            raise ExpressionError(f"Unexpected token {tok!r}")
    if len(values) != 1:
        raise ExpressionError(f"Expected one result, got {len(values)}")
    return values.pop()
