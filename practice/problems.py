# practice/problems.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from practice.configuration import Operator


class UnknownOperatorError(ValueError):
    """An operator outside + - * / reached code that dispatches on it."""

    def __init__(self, operator: object):
        super().__init__(f"unknown operator: {operator!r}")
        self.operator = operator


def as_operator(value: object) -> Operator:
    if isinstance(value, Operator):
        return value
    try:
        return Operator(value)
    except ValueError:
        raise UnknownOperatorError(value) from None


class Problem(BaseModel):
    """One arithmetic exercise. Immutable; a new exercise is a new Problem."""

    model_config = ConfigDict(frozen=True)

    operand1: int = Field(ge=0)
    operand2: int = Field(ge=0)
    operator: Operator
    answer: int

    @model_validator(mode="after")
    def _answer_matches(self) -> "Problem":
        a, b, op = self.operand1, self.operand2, self.operator
        if op is Operator.DIVISION:
            if b == 0:
                raise ValueError("divisor must not be zero")
            ok = a == b * self.answer
        elif op is Operator.ADDITION:
            ok = self.answer == a + b
        elif op is Operator.SUBTRACTION:
            ok = self.answer == a - b
        elif op is Operator.MULTIPLICATION:
            ok = self.answer == a * b
        else:
            raise UnknownOperatorError(op)
        if not ok:
            raise ValueError(f"answer {self.answer} does not match {a} {op.value} {b}")
        return self

    @property
    def display_width(self) -> int:
        # written-out answer plus the operator column and its space
        return len(str(self.answer)) + 2

    def __str__(self) -> str:
        return f"{self.operand1} {self.operator.value} {self.operand2}"


def padded_digits(problem: Problem) -> tuple[str, str]:
    """Both operands as digit strings, zero-padded on the left to equal length."""
    s1, s2 = str(problem.operand1), str(problem.operand2)
    width = max(len(s1), len(s2))
    return s1.zfill(width), s2.zfill(width)
