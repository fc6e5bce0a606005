"""Infix-to-postfix conversion and evaluation of single-digit postfix expressions."""

from __future__ import annotations


def precedence(char: str) -> int:
    """Binding strength of an operator; -1 for anything that is not one."""
    if char == "^":
        return 3
    if char in ("/", "*"):
        return 2
    if char in ("+", "-"):
        return 1
    return -1


def _is_operand(char: str) -> bool:
    return char.isascii() and char.isalnum()


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix."""
    result: list[str] = []
    stack: list[str] = []
    for char in expression:
        if _is_operand(char):
            result.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                result.append(stack.pop())
            if not stack:
                raise ValueError("unbalanced ')'")
            stack.pop()
        elif char == "(":
            stack.append(char)
        else:
            while stack and precedence(char) <= precedence(stack[-1]):
                result.append(stack.pop())
            stack.append(char)
    result.extend(reversed(stack))
    return "".join(result)


def _truncating_divide(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("division by zero in expression")
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _power(a: int, b: int) -> int:
    if b >= 0:
        return a ** b
    if a == 0:
        raise ZeroDivisionError("zero raised to a negative power")
    return int(a ** b)


_OPERATIONS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_divide,
    "^": _power,
}


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands with integer arithmetic.

    Division truncates toward zero.
    """
    stack: list[int] = []
    for char in expression:
        if "0" <= char <= "9":
            stack.append(int(char))
            continue
        operation = _OPERATIONS.get(char)
        if operation is None:
            raise ValueError(f"unknown operator {char!r}")
        if len(stack) < 2:
            raise ValueError(f"operator {char!r} lacks operands")
        right = stack.pop()
        left = stack.pop()
        stack.append(operation(left, right))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]