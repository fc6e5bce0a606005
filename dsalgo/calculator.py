"""A four-function calculator driven by key presses."""

from __future__ import annotations

import math
from typing import Optional

_OPERATORS = frozenset("+-*/")


def _parse(text: str) -> float:
    cleaned = text.strip()
    if not cleaned or any(ch not in "0123456789.-" for ch in cleaned):
        raise ValueError(f"cannot read a number from {text!r}")
    return float(cleaned)


def _format(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"
    if value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(value).replace("e", "E")


def _divide(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


_APPLY = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _divide,
}


class Calculator:
    """Calculator state: the display text, a stored operand and a pending operator."""

    def __init__(self) -> None:
        self.display = "0"
        self.first: float = 0.0
        self.operator: Optional[str] = None
        self.result: Optional[float] = None

    def press_digit(self, digit: object) -> None:
        key = str(digit)
        if len(key) != 1 or not "0" <= key <= "9":
            raise ValueError(f"not a digit key: {digit!r}")
        self.display = key if self.display == "0" else self.display + key

    def press_point(self) -> None:
        if "." not in self.display:
            self.display += "."

    def backspace(self) -> None:
        self.display = self.display[:-1]
        if self.display == "":
            self.display = "0"

    def clear(self) -> None:
        self.display = "0"

    def clear_entry(self) -> None:
        self.display = ""

    def toggle_sign(self) -> None:
        if "-" in self.display:
            self.display = self.display[1:]
        else:
            self.display = "-" + self.display

    def press_operator(self, op: str) -> None:
        """Store the displayed number and the operator, then blank the display."""
        if op not in _OPERATORS:
            raise ValueError(f"unknown operator {op!r}")
        self.first = _parse(self.display)
        self.display = ""
        self.operator = op

    def equals(self) -> str:
        """Apply the pending operator to the stored and displayed numbers."""
        second = _parse(self.display)
        if self.operator is not None:
            self.result = _APPLY[self.operator](self.first, second)
            self.display = _format(self.result)
        return self.display