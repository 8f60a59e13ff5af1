# practice/partial_sums.py
from __future__ import annotations

from typing import List, Tuple

from pydantic import BaseModel, ConfigDict

from practice.configuration import Operator
from practice.problems import Problem, padded_digits


class PartialSum(BaseModel):
    model_config = ConfigDict(frozen=True)

    numeral: str  # right-aligned to the problem's display width
    place: int

    @property
    def value(self) -> int:
        return int(self.numeral)


def compute_partial_sums(problem: Problem) -> Tuple[PartialSum, ...]:
    """Per-place sums for the multi-layer addition view, highest place first.

    123 + 456 gives 500, 70 and 9. Places whose digits add to zero are left out.
    """
    if problem.operator is not Operator.ADDITION:
        return ()

    top, bottom = padded_digits(problem)
    width = len(top)
    rows: List[PartialSum] = []
    for i in range(width):
        place = width - 1 - i
        digit_sum = int(top[i]) + int(bottom[i])
        if digit_sum > 0:
            numeral = str(digit_sum * 10**place).rjust(problem.display_width)
            rows.append(PartialSum(numeral=numeral, place=place))
    return tuple(rows)
