# practice/borrows.py
from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from practice.configuration import Operator
from practice.problems import Problem, padded_digits

# Borrow events are coloured from a small palette; group ids wrap around it.
DEFAULT_PALETTE_SIZE = 5


class BorrowDigit(BaseModel):
    """One column of the minuend as it looks after all borrowing.

    ``value_after_borrowing`` is the two-digit value a column shows once it has
    taken ten from its left neighbour. ``value_after_lending`` is what a lender
    is left with; a zero that only passes a borrow along ends up as ``"9"``.
    Group ids tie a borrowing column to the lenders that served it.
    """

    model_config = ConfigDict(frozen=True)

    original: str
    value_after_borrowing: Optional[str] = None
    value_after_lending: Optional[str] = None
    borrow_group_id: Optional[int] = None
    lend_group_id: Optional[int] = None

    @property
    def borrows(self) -> bool:
        return self.value_after_borrowing is not None

    @property
    def lends(self) -> bool:
        return self.value_after_lending is not None


class BorrowTrace(BaseModel):
    model_config = ConfigDict(frozen=True)

    # most-significant column first, like the written minuend
    digits: Tuple[BorrowDigit, ...] = ()
    # a borrow ran past the leftmost column (only for negative results)
    exhausted: bool = False

    def at_place(self, place: int) -> BorrowDigit:
        return self.digits[len(self.digits) - 1 - place]

    @property
    def borrow_count(self) -> int:
        return sum(1 for d in self.digits if d.borrows)


def compute_borrow_trace(problem: Problem, palette_size: int = DEFAULT_PALETTE_SIZE) -> BorrowTrace:
    """Column-by-column borrowing for a subtraction, right to left.

    A column smaller than the subtrahend digit below it borrows ten. The
    nearest nonzero column to its left lends one; every zero passed on the way
    lends as well and is left holding 9. 500 - 7 therefore shows 10 in the
    ones, 9 in the tens and 4 in the hundreds.
    """
    if palette_size < 1:
        raise ValueError("palette_size must be at least 1")
    if problem.operator is not Operator.SUBTRACTION:
        return BorrowTrace()

    top, bottom = padded_digits(problem)
    width = len(top)
    effective = [int(ch) for ch in top]
    after_borrowing: List[Optional[str]] = [None] * width
    after_lending: List[Optional[str]] = [None] * width
    borrow_group: List[Optional[int]] = [None] * width
    lend_group: List[Optional[int]] = [None] * width
    exhausted = False
    events = 0

    for i in range(width - 1, -1, -1):
        if effective[i] >= int(bottom[i]):
            continue

        group = events % palette_size
        events += 1
        after_borrowing[i] = str(effective[i] + 10)
        borrow_group[i] = group
        effective[i] += 10

        j = i - 1
        while j >= 0:
            if lend_group[j] is None:
                lend_group[j] = group
            if effective[j] > 0:
                effective[j] -= 1
                after_lending[j] = str(effective[j])
                break
            # a zero takes ten from further left and passes one on
            effective[j] = 9
            after_lending[j] = "9"
            j -= 1
        else:
            exhausted = True

    digits = tuple(
        BorrowDigit(
            original=top[k],
            value_after_borrowing=after_borrowing[k],
            value_after_lending=after_lending[k],
            borrow_group_id=borrow_group[k],
            lend_group_id=lend_group[k],
        )
        for k in range(width)
    )
    return BorrowTrace(digits=digits, exhausted=exhausted)
