from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import JSON, BigInteger, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from db import Base
from practice.configuration import Operator
from practice.hint_state import HintState
from practice.problems import Problem
from practice.scratchpad import Scratchpad
from practice.session import PracticeSession


def _now() -> datetime:
    return datetime.now(UTC)


class Setting(Base):
    __tablename__ = "settings"
    key: Mapped[str] = mapped_column(String(64), primary_key=True)
    value: Mapped[str] = mapped_column(String(255))


class PracticeSessionRecord(Base):
    __tablename__ = "practice_sessions"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_now, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_now, onupdate=_now
    )
    # 64-bit: nine-digit divisors times a quotient up to 19 overflow INTEGER on Postgres
    operand1: Mapped[int] = mapped_column(BigInteger)
    operand2: Mapped[int] = mapped_column(BigInteger)
    operator: Mapped[str] = mapped_column(String(1))
    answer: Mapped[int] = mapped_column(BigInteger)
    hint_state: Mapped[str] = mapped_column(String(16), default=HintState.NONE.value)
    scratch: Mapped[dict] = mapped_column(JSON, default=dict)  # Scratchpad.model_dump()
    problem_count: Mapped[int] = mapped_column(Integer, default=1)
    # bumped on every UPDATE; a stale write raises StaleDataError instead of losing a change
    version_id: Mapped[int] = mapped_column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version_id}

    def to_session(self) -> PracticeSession:
        return PracticeSession(
            problem=Problem(
                operand1=self.operand1,
                operand2=self.operand2,
                operator=Operator(self.operator),
                answer=self.answer,
            ),
            hint_state=HintState(self.hint_state),
            scratchpad=Scratchpad.model_validate(self.scratch or {}),
            problem_count=self.problem_count,
        )

    def store(self, session: PracticeSession) -> None:
        p = session.problem
        self.operand1 = p.operand1
        self.operand2 = p.operand2
        self.operator = p.operator.value
        self.answer = p.answer
        self.hint_state = session.hint_state.value
        self.scratch = session.scratchpad.model_dump(mode="json")
        self.problem_count = session.problem_count
