# practice/hint_state.py
from __future__ import annotations

from enum import Enum
from typing import Union

from practice.configuration import Operator
from practice.problems import as_operator


class HintState(str, Enum):
    NONE = "none"
    SHOW_ANSWER = "show_answer"
    STANDARD = "standard"
    MULTI_LAYER = "multi_layer"


def cycle_hint(state: HintState, operator: Union[Operator, str]) -> HintState:
    """Next hint level.

    none -> answer -> (multi-layer for addition) -> standard -> none. Raises
    UnknownOperatorError for anything outside + - * /.
    """
    op = as_operator(operator)
    state = HintState(state)
    if state is HintState.NONE:
        return HintState.SHOW_ANSWER
    if state is HintState.SHOW_ANSWER:
        return HintState.MULTI_LAYER if op is Operator.ADDITION else HintState.STANDARD
    if state is HintState.MULTI_LAYER:
        return HintState.STANDARD
    return HintState.NONE


def shows_answer(state: HintState) -> bool:
    return HintState(state) is not HintState.NONE
