# schemas/settings.py
from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel

from practice.configuration import Configuration, Operator


class SettingsOut(BaseModel):
    digits_operand1: int
    digits_operand2: int
    allow_negative_results: bool
    enabled_operations: List[Operator]

    @classmethod
    def from_configuration(cls, config: Configuration) -> "SettingsOut":
        return cls(
            digits_operand1=config.digits_operand1,
            digits_operand2=config.digits_operand2,
            allow_negative_results=config.allow_negative_results,
            # keep + - * / order for stable output
            enabled_operations=[op for op in Operator if op in config.enabled_operations],
        )


class SettingsUpdate(BaseModel):
    # digit counts may arrive as raw text-field contents
    digits_operand1: Optional[Union[int, str]] = None
    digits_operand2: Optional[Union[int, str]] = None
    allow_negative_results: Optional[bool] = None
    enabled_operations: Optional[List[Operator]] = None
