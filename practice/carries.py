# practice/carries.py
from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict

from practice.configuration import Operator
from practice.problems import Problem, padded_digits


class CarryTrace(BaseModel):
    model_config = ConfigDict(frozen=True)

    # carries[p] is True when a carry digit is written above place p (0 = ones).
    # The last entry is the carry that becomes a new leading digit.
    carries: Tuple[bool, ...] = ()

    @property
    def width(self) -> int:
        return max(0, len(self.carries) - 1)

    def has_carry_into(self, place: int) -> bool:
        return 0 <= place < len(self.carries) and self.carries[place]

    def carry_row(self) -> str:
        """Carry digits as written above the sum, e.g. ``"1 "`` for 18 + 7.

        Empty when nothing is carried. The leading carry only takes a column
        when there is one.
        """
        if not any(self.carries):
            return ""
        lead = "1" if self.carries[-1] else ""
        body = "".join("1" if self.carries[p] else " " for p in range(self.width - 1, -1, -1))
        return lead + body


def compute_carries(problem: Problem) -> CarryTrace:
    if problem.operator is not Operator.ADDITION:
        return CarryTrace()

    top, bottom = padded_digits(problem)
    width = len(top)
    carries = [False] * (width + 1)
    carry = 0
    for i in range(width - 1, -1, -1):
        total = int(top[i]) + int(bottom[i]) + carry
        carry = total // 10
        if carry:
            # position i holds place width-1-i; the carry lands one place up
            carries[width - i] = True
    return CarryTrace(carries=tuple(carries))
