# practice/session.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from practice.configuration import Configuration
from practice.generator import RandomSource, generate
from practice.hint_state import HintState, cycle_hint, shows_answer
from practice.problems import Problem
from practice.scratchpad import Scratchpad


class PracticeSession(BaseModel):
    """The current exercise with its hint level and scratch work.

    Every new problem starts from a clean slate: no hint and an empty
    scratchpad.
    """

    model_config = ConfigDict(frozen=True)

    problem: Problem
    hint_state: HintState = HintState.NONE
    scratchpad: Scratchpad = Scratchpad()
    problem_count: int = 1

    @classmethod
    def start(cls, config: Configuration, rng: Optional[RandomSource] = None) -> "PracticeSession":
        return cls(problem=generate(config, rng))

    def next_problem(
        self, config: Configuration, rng: Optional[RandomSource] = None
    ) -> "PracticeSession":
        return PracticeSession(problem=generate(config, rng), problem_count=self.problem_count + 1)

    def cycle_hint(self) -> "PracticeSession":
        return self.model_copy(
            update={"hint_state": cycle_hint(self.hint_state, self.problem.operator)}
        )

    def with_scratchpad(self, scratchpad: Scratchpad) -> "PracticeSession":
        return self.model_copy(update={"scratchpad": scratchpad})

    @property
    def show_answer(self) -> bool:
        return shows_answer(self.hint_state)
