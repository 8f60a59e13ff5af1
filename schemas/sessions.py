# schemas/sessions.py
from __future__ import annotations

from datetime import datetime
from typing import List, Tuple

from pydantic import BaseModel, Field

from practice.hint_state import HintState
from practice.problems import Problem
from practice.scratchpad import Scratchpad


class SessionOut(BaseModel):
    id: int
    created_at: datetime | None = None
    problem: Problem
    hint_state: HintState
    show_answer: bool
    scratchpad: Scratchpad
    problem_count: int


class StrokeIn(BaseModel):
    points: List[Tuple[float, float]] = Field(min_length=1)
