# practice/scratchpad.py
from __future__ import annotations

from typing import Iterable, Optional, Tuple

from pydantic import BaseModel, ConfigDict

Point = Tuple[float, float]
Stroke = Tuple[Point, ...]


class Scratchpad(BaseModel):
    """Free-hand working as a log of finished strokes plus the one being drawn."""

    model_config = ConfigDict(frozen=True)

    strokes: Tuple[Stroke, ...] = ()
    current: Optional[Stroke] = None

    def begin(self, point: Point) -> "Scratchpad":
        return self.finish().model_copy(update={"current": (tuple(point),)})

    def extend(self, point: Point) -> "Scratchpad":
        if self.current is None:
            return self
        return self.model_copy(update={"current": self.current + (tuple(point),)})

    def finish(self) -> "Scratchpad":
        if self.current is None:
            return self
        return Scratchpad(strokes=self.strokes + (self.current,))

    def add_stroke(self, points: Iterable[Point]) -> "Scratchpad":
        stroke = tuple(tuple(p) for p in points)
        if not stroke:
            return self.finish()
        base = self.finish()
        return Scratchpad(strokes=base.strokes + (stroke,))

    def undo(self) -> "Scratchpad":
        if self.current is not None:
            return self.model_copy(update={"current": None})
        return Scratchpad(strokes=self.strokes[:-1])

    def clear(self) -> "Scratchpad":
        return Scratchpad()

    @property
    def is_empty(self) -> bool:
        return not self.strokes and self.current is None
