# practice/hints.py
from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from practice.borrows import BorrowTrace, compute_borrow_trace
from practice.carries import CarryTrace, compute_carries
from practice.configuration import Operator
from practice.hint_state import HintState, shows_answer
from practice.partial_sums import PartialSum, compute_partial_sums
from practice.problems import Problem


class HintView(BaseModel):
    """What the practice screen should reveal for one hint level."""

    model_config = ConfigDict(frozen=True)

    state: HintState
    answer: Optional[int] = None
    carries: Optional[CarryTrace] = None
    carry_row: Optional[str] = None
    borrows: Optional[BorrowTrace] = None
    partial_sums: Optional[Tuple[PartialSum, ...]] = None


def build_hint_view(problem: Problem, state: HintState) -> HintView:
    state = HintState(state)
    if not shows_answer(state):
        return HintView(state=state)

    view = {"state": state, "answer": problem.answer}
    if state is HintState.STANDARD:
        if problem.operator is Operator.ADDITION:
            carries = compute_carries(problem)
            view["carries"] = carries
            view["carry_row"] = carries.carry_row()
        elif problem.operator is Operator.SUBTRACTION:
            view["borrows"] = compute_borrow_trace(problem)
    elif state is HintState.MULTI_LAYER and problem.operator is Operator.ADDITION:
        view["partial_sums"] = compute_partial_sums(problem)
    return HintView(**view)
