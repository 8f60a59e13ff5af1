# routers/problems.py
from __future__ import annotations

import random

from fastapi import APIRouter, Depends

from deps.practice import get_configuration, get_rng
from practice.borrows import compute_borrow_trace
from practice.carries import compute_carries
from practice.configuration import Configuration
from practice.generator import generate
from practice.partial_sums import compute_partial_sums
from practice.problems import Problem
from schemas.analysis import BorrowTraceOut, CarryTraceOut, PartialSumsOut

router = APIRouter(tags=["problems"])


@router.post("/problems", response_model=Problem)
def new_problem(
    config: Configuration = Depends(get_configuration),
    rng: random.Random = Depends(get_rng),
):
    return generate(config, rng)


# Analyses are pure functions of the posted problem; an empty result means the
# view does not apply to that operator.


@router.post("/analysis/carries", response_model=CarryTraceOut)
def analyse_carries(problem: Problem):
    trace = compute_carries(problem)
    return {"carries": list(trace.carries), "row": trace.carry_row()}


@router.post("/analysis/borrows", response_model=BorrowTraceOut)
def analyse_borrows(problem: Problem):
    trace = compute_borrow_trace(problem)
    return {"digits": list(trace.digits), "exhausted": trace.exhausted}


@router.post("/analysis/partial-sums", response_model=PartialSumsOut)
def analyse_partial_sums(problem: Problem):
    items = compute_partial_sums(problem)
    return {"items": list(items), "total": sum(p.value for p in items)}
