# practice/configuration.py
from __future__ import annotations

from enum import Enum
from typing import FrozenSet

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_DIGITS = 2
# Multiplication keeps both operands at three digits or fewer.
MULTIPLICATION_DIGIT_CAP = 3


class Operator(str, Enum):
    ADDITION = "+"
    SUBTRACTION = "-"
    MULTIPLICATION = "*"
    DIVISION = "/"


DEFAULT_OPERATIONS: FrozenSet[Operator] = frozenset({Operator.ADDITION, Operator.SUBTRACTION})


class Configuration(BaseModel):
    """Knobs for one round of problem generation.

    Built by the settings layer and handed to the generator. Digit counts below
    one are lifted to one and an empty operation set means addition only, so a
    Configuration is always usable.
    """

    model_config = ConfigDict(frozen=True)

    digits_operand1: int = DEFAULT_DIGITS
    digits_operand2: int = DEFAULT_DIGITS
    allow_negative_results: bool = False
    enabled_operations: FrozenSet[Operator] = DEFAULT_OPERATIONS

    @field_validator("digits_operand1", "digits_operand2")
    @classmethod
    def _at_least_one_digit(cls, v: int) -> int:
        return max(1, v)

    @field_validator("enabled_operations")
    @classmethod
    def _addition_when_empty(cls, v: FrozenSet[Operator]) -> FrozenSet[Operator]:
        return v or frozenset({Operator.ADDITION})
