"""Conversion of infix expressions to postfix notation."""

import string

_PRECEDENCE = {"(": 0, "+": 1, "-": 1, "*": 2, "/": 2, "^": 3}
_OPERANDS = frozenset(string.ascii_letters + string.digits)
_OPERATORS = frozenset("+-*/^")


def precedence(symbol: str) -> int:
    """Binding strength of an operator; -1 for anything that is not one."""
    return _PRECEDENCE.get(symbol, -1)


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Operators of equal precedence group to the left.  Whitespace is ignored;
    unknown characters and unbalanced parentheses raise ValueError.
    """
    stack: list[str] = []
    output: list[str] = []
    for symbol in expression:
        if symbol.isspace():
            continue
        if symbol in _OPERANDS:
            output.append(symbol)
        elif symbol == "(":
            stack.append(symbol)
        elif symbol == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unbalanced ')' in expression")
            stack.pop()
        elif symbol in _OPERATORS:
            while stack and precedence(symbol) <= precedence(stack[-1]):
                output.append(stack.pop())
            stack.append(symbol)
        else:
            raise ValueError(f"unexpected character {symbol!r} in expression")
    while stack:
        top = stack.pop()
        if top == "(":
            raise ValueError("unbalanced '(' in expression")
        output.append(top)
    return "".join(output)