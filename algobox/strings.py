"""String problems: spreadsheet column numbers, palindromes and postfix evaluation."""

from __future__ import annotations

import math
import string

_ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)
_OPERATORS = frozenset("+-*/^")


def title_to_number(title: str) -> int:
    """Return the column number of a spreadsheet column title such as ``"AB"``."""
    number = 0
    for letter in title:
        if letter not in string.ascii_uppercase:
            raise ValueError(f"invalid column letter: {letter!r}")
        number = number * 26 + (ord(letter) - ord("A") + 1)
    return number


def is_palindrome(text: str) -> bool:
    """Return True if the ASCII letters and digits of ``text`` read the same both ways.

    Letter case is ignored, as is every other character.
    """
    kept = [char.lower() for char in text if char in _ALPHANUMERIC]
    return kept == kept[::-1]


def _truncating_divide(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


def _apply(operator: str, right: int, left: int) -> float:
    if operator == "+":
        return float(left + right)
    if operator == "-":
        return float(left - right)
    if operator == "*":
        return float(left * right)
    if operator == "/":
        if right == 0:
            raise ZeroDivisionError("division by zero in postfix expression")
        return float(_truncating_divide(left, right))
    return math.pow(left, right)


def evaluate_postfix(expression: str) -> float:
    """Evaluate a postfix expression of single-digit operands.

    Operands of each operator are truncated to integers and division truncates
    toward zero. Characters that are neither digits nor ``+-*/^`` are ignored.
    """
    stack: list[float] = []
    for char in expression:
        if char in _OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"operator {char!r} lacks operands")
            right = int(stack.pop())
            left = int(stack.pop())
            stack.append(_apply(char, right, left))
        elif char in string.digits:
            stack.append(float(int(char)))
    if not stack:
        raise ValueError("expression holds no operands")
    return stack[-1]