"""Arithmetic expressions: postfix evaluation, infix to postfix conversion
and infix evaluation, all on integers."""

from __future__ import annotations

import re
from typing import Callable

_DIGITS = "0123456789"
_PRIORITY = {"(": 0, "+": 1, "-": 1, "*": 2, "/": 2, "^": 3}
_LEXEME_PATTERN = re.compile(r"\d+|\S")


class ExpressionError(ValueError):
    """Raised for a malformed expression or an impossible operation."""


def _divide(dividend: int, divisor: int) -> int:
    if divisor == 0:
        raise ExpressionError("division by zero")
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def _power(base: int, exponent: int) -> int:
    if exponent >= 0:
        return base**exponent
    if base == 0:
        raise ExpressionError("zero raised to a negative power")
    return int(base**exponent)


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "+": lambda left, right: left + right,
    "-": lambda left, right: left - right,
    "*": lambda left, right: left * right,
    "/": _divide,
    "^": _power,
}


def _apply(operator: str, operands: list[int]) -> None:
    if len(operands) < 2:
        raise ExpressionError(f"operator {operator!r} lacks operands")
    right = operands.pop()
    left = operands.pop()
    operands.append(_OPERATIONS[operator](left, right))


def _single_result(operands: list[int]) -> int:
    if len(operands) != 1:
        raise ExpressionError("expression does not reduce to a single value")
    return operands[0]


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression whose operands are single digits."""
    operands: list[int] = []
    for char in expression:
        if char.isspace():
            continue
        if char in _DIGITS:
            operands.append(int(char))
        elif char in _OPERATIONS:
            _apply(char, operands)
        else:
            raise ExpressionError(f"unexpected character {char!r}")
    return _single_result(operands)


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of one-character operands to postfix.

    The items of the result are separated by single spaces.
    """
    output: list[str] = []
    pending: list[str] = []
    for char in expression:
        if char.isspace():
            continue
        if char.isascii() and char.isalnum():
            output.append(char)
        elif char == "(":
            pending.append(char)
        elif char == ")":
            while True:
                if not pending:
                    raise ExpressionError("unmatched ')'")
                top = pending.pop()
                if top == "(":
                    break
                output.append(top)
        elif char in _OPERATIONS:
            while pending and _PRIORITY[pending[-1]] >= _PRIORITY[char]:
                output.append(pending.pop())
            pending.append(char)
        else:
            raise ExpressionError(f"unexpected character {char!r}")
    while pending:
        top = pending.pop()
        if top == "(":
            raise ExpressionError("unmatched '('")
        output.append(top)
    return " ".join(output)


def evaluate_infix(expression: str) -> int:
    """Evaluate an infix expression of non-negative integers."""
    operands: list[int] = []
    operators: list[str] = []
    for lexeme in _LEXEME_PATTERN.findall(expression):
        if lexeme[0] in _DIGITS:
            operands.append(int(lexeme))
        elif lexeme == "(":
            operators.append(lexeme)
        elif lexeme == ")":
            while operators and operators[-1] != "(":
                _apply(operators.pop(), operands)
            if not operators:
                raise ExpressionError("unmatched ')'")
            operators.pop()
        elif lexeme in _OPERATIONS:
            while operators and _PRIORITY[lexeme] <= _PRIORITY[operators[-1]]:
                _apply(operators.pop(), operands)
            operators.append(lexeme)
        else:
            raise ExpressionError(f"unexpected character {lexeme!r}")
    while operators:
        operator = operators.pop()
        if operator == "(":
            raise ExpressionError("unmatched '('")
        _apply(operator, operands)
    return _single_result(operands)