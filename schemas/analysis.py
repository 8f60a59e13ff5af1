# schemas/analysis.py
from __future__ import annotations

from typing import List

from pydantic import BaseModel

from practice.borrows import BorrowDigit
from practice.partial_sums import PartialSum


class CarryTraceOut(BaseModel):
    carries: List[bool]
    row: str


class BorrowTraceOut(BaseModel):
    digits: List[BorrowDigit]
    exhausted: bool


class PartialSumsOut(BaseModel):
    items: List[PartialSum]
    total: int
