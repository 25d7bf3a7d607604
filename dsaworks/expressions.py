"""Parenthesis matching, infix-to-postfix conversion and postfix evaluation."""

from __future__ import annotations

import string

_OPERATORS = ("+", "-", "*", "/")
_CLOSING = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_CLOSING.values())


def is_balanced(expression: str) -> bool:
    """True if every '(' in expression has a matching ')'."""
    depth = 0
    for symbol in expression:
        if symbol == "(":
            depth += 1
        elif symbol == ")":
            if depth == 0:
                return False
            depth -= 1
    return depth == 0


def is_balanced_extended(expression: str) -> bool:
    """True if (), [] and {} are all matched and properly nested."""
    stack: list[str] = []
    for symbol in expression:
        if symbol in _OPENING:
            stack.append(symbol)
        elif symbol in _CLOSING:
            if not stack or stack[-1] != _CLOSING[symbol]:
                return False
            stack.pop()
    return not stack


def precedence(symbol: str) -> int:
    """Binding strength of an operator: 2 for * and /, 1 for + and -, else 0."""
    if symbol in ("+", "-"):
        return 1
    if symbol in ("*", "/"):
        return 2
    return 0


def is_operand(symbol: str) -> bool:
    """True for any symbol that is not one of the four arithmetic operators."""
    return symbol not in _OPERATORS


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression of single-character operands to postfix."""
    stack: list[str] = []
    output: list[str] = []
    for symbol in infix:
        if is_operand(symbol):
            output.append(symbol)
            continue
        while stack and precedence(symbol) <= precedence(stack[-1]):
            output.append(stack.pop())
        stack.append(symbol)
    output.extend(reversed(stack))
    return "".join(output)


def _divide(x1: int, x2: int) -> int:
    if x2 == 0:
        raise ZeroDivisionError("division by zero in postfix expression")
    quotient = abs(x1) // abs(x2)
    return -quotient if (x1 < 0) != (x2 < 0) else quotient


def _apply(operator: str, x1: int, x2: int) -> int:
    if operator == "+":
        return x1 + x2
    if operator == "-":
        return x1 - x2
    if operator == "*":
        return x1 * x2
    return _divide(x1, x2)


def evaluate_postfix(postfix: str) -> int:
    """Evaluate a postfix expression of single-digit operands.

    Division truncates toward zero.
    """
    stack: list[int] = []
    for symbol in postfix:
        if is_operand(symbol):
            if symbol not in string.digits:
                raise ValueError(f"operand {symbol!r} is not a digit")
            stack.append(int(symbol))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {symbol!r} lacks operands")
        x2 = stack.pop()
        x1 = stack.pop()
        stack.append(_apply(symbol, x1, x2))
    if len(stack) != 1:
        raise ValueError("malformed postfix expression")
    return stack[0]