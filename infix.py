import re

from stack import Stack

OPERATORS = frozenset("+-*/")
TOKEN_REX = re.compile(r"\s+|(?P<num>[0-9]+)|(?P<op>[()+\-*/])|(?P<junk>.)")


class ExpressionError(ValueError):
    """A line that cannot be turned into a single integer."""


def precedence(op):
    if op in ("+", "-"):
        return 1
    if op in ("*", "/"):
        return 2
    return 0


def lex(s, strict=False):
    """Yield number and operator tokens of `s`; whitespace is dropped.

    Anything else is skipped too, unless `strict` is set.

    >>> list(lex("12 +(3*45) x"))
    ['12', '+', '(', '3', '*', '45', ')']
    """
    for m in TOKEN_REX.finditer(s):
        if tok := m.group("num") or m.group("op"):
            yield tok
        elif m.group("junk") is not None and strict:
            raise ExpressionError(f"Unexpected {m.group('junk')!r} @ {m.start()}")


def to_postfix(s, strict=False):
    """Convert the infix expression `s` to a list of postfix tokens.

    Operators of equal precedence associate to the left. An unmatched `)`
    is ignored; an unmatched `(` ends up in the output, where evaluation
    rejects it.

    >>> to_postfix("3 + 4 * 2")
    ['3', '4', '2', '*', '+']
    >>> to_postfix("8 - 3 - 2")
    ['8', '3', '-', '2', '-']
    >>> to_postfix("(1 + 2")
    ['1', '2', '+', '(']
    """
    ops = Stack()
    out = []
    for tok in lex(s, strict):
        if tok == "(":
            ops.push(tok)
        elif tok == ")":
            while ops and ops.peek() != "(":
                out.append(ops.pop())
            ops.pop()
        elif tok in OPERATORS:
            while ops and ops.peek() != "(" and precedence(ops.peek()) >= precedence(tok):
                out.append(ops.pop())
            ops.push(tok)
        else:
            out.append(tok)
    while ops:
        out.append(ops.pop())
    return out


def render(tokens):
    """Space separated postfix text, e.g. '1 2 + 3 *'."""
    return " ".join(tokens)
