# routers/sessions.py
from __future__ import annotations

import logging
import random
from typing import Callable

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm.exc import StaleDataError

from db import SessionLocal
from deps.practice import get_configuration, get_rng
from models import PracticeSessionRecord
from practice.configuration import Configuration
from practice.hints import HintView, build_hint_view
from practice.session import PracticeSession
from schemas.sessions import SessionOut, StrokeIn

logger = logging.getLogger("calcu-later.sessions")

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _out(record: PracticeSessionRecord, session: PracticeSession) -> SessionOut:
    return SessionOut(
        id=record.id,
        created_at=record.created_at,
        problem=session.problem,
        hint_state=session.hint_state,
        show_answer=session.show_answer,
        scratchpad=session.scratchpad,
        problem_count=session.problem_count,
    )


# optimistic-lock retries before a busy session is reported as a conflict
_MAX_ATTEMPTS = 3


def _update(session_id: int, change: Callable[[PracticeSession], PracticeSession]) -> SessionOut:
    for attempt in range(1, _MAX_ATTEMPTS + 1):
        with SessionLocal() as db:
            record = db.get(PracticeSessionRecord, session_id, with_for_update=True)
            if not record:
                raise HTTPException(status_code=404, detail="Session not found")
            session = change(record.to_session())
            record.store(session)
            try:
                db.commit()
            except StaleDataError:
                db.rollback()
                logger.warning(
                    "session %s changed underneath update (attempt %d/%d)",
                    session_id, attempt, _MAX_ATTEMPTS,
                )
                continue
            db.refresh(record)
            return _out(record, session)
    raise HTTPException(status_code=409, detail="Session is busy, try again")


@router.post("", response_model=SessionOut, status_code=201)
def start_session(
    config: Configuration = Depends(get_configuration),
    rng: random.Random = Depends(get_rng),
):
    session = PracticeSession.start(config, rng)
    with SessionLocal() as db:
        record = PracticeSessionRecord()
        record.store(session)
        db.add(record)
        db.commit()
        db.refresh(record)
        logger.info("session %s started with %s", record.id, session.problem)
        return _out(record, session)


@router.get("/{session_id}", response_model=SessionOut)
def get_session(session_id: int):
    with SessionLocal() as db:
        record = db.get(PracticeSessionRecord, session_id)
        if not record:
            raise HTTPException(status_code=404, detail="Session not found")
        return _out(record, record.to_session())


@router.post("/{session_id}/next", response_model=SessionOut)
def next_problem(
    session_id: int,
    config: Configuration = Depends(get_configuration),
    rng: random.Random = Depends(get_rng),
):
    out = _update(session_id, lambda s: s.next_problem(config, rng))
    logger.info("session %s moved to %s", session_id, out.problem)
    return out


@router.post("/{session_id}/hint", response_model=SessionOut)
def cycle_hint(session_id: int):
    return _update(session_id, lambda s: s.cycle_hint())


@router.get("/{session_id}/hint", response_model=HintView)
def current_hint(session_id: int):
    with SessionLocal() as db:
        record = db.get(PracticeSessionRecord, session_id)
        if not record:
            raise HTTPException(status_code=404, detail="Session not found")
        session = record.to_session()
    return build_hint_view(session.problem, session.hint_state)


# --- Scratch work ------------------------------------------------------------------


@router.post("/{session_id}/scratch/strokes", response_model=SessionOut)
def add_stroke(session_id: int, req: StrokeIn):
    return _update(session_id, lambda s: s.with_scratchpad(s.scratchpad.add_stroke(req.points)))


@router.post("/{session_id}/scratch/undo", response_model=SessionOut)
def undo_stroke(session_id: int):
    return _update(session_id, lambda s: s.with_scratchpad(s.scratchpad.undo()))


@router.delete("/{session_id}/scratch", response_model=SessionOut)
def clear_scratch(session_id: int):
    return _update(session_id, lambda s: s.with_scratchpad(s.scratchpad.clear()))
