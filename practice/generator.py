# practice/generator.py
from __future__ import annotations

import random
from typing import Callable, Dict, Optional, Protocol

from practice.configuration import MULTIPLICATION_DIGIT_CAP, Configuration, Operator
from practice.problems import Problem, UnknownOperatorError

# Quotients for division are drawn from [1, 20).
DIVISION_QUOTIENT_RANGE = (1, 20)


class RandomSource(Protocol):
    def randrange(self, start: int, stop: int) -> int: ...


def _draw(rng: RandomSource, digits: int) -> int:
    return rng.randrange(10 ** (digits - 1), 10**digits)


def _addition(config: Configuration, rng: RandomSource, n1: int, n2: int) -> Problem:
    return Problem(operand1=n1, operand2=n2, operator=Operator.ADDITION, answer=n1 + n2)


def _subtraction(config: Configuration, rng: RandomSource, n1: int, n2: int) -> Problem:
    if not config.allow_negative_results:
        n1, n2 = max(n1, n2), min(n1, n2)
    return Problem(operand1=n1, operand2=n2, operator=Operator.SUBTRACTION, answer=n1 - n2)


def _multiplication(config: Configuration, rng: RandomSource, n1: int, n2: int) -> Problem:
    # own pair, capped so products stay readable
    d1 = min(max(1, config.digits_operand1), MULTIPLICATION_DIGIT_CAP)
    d2 = min(max(1, config.digits_operand2), MULTIPLICATION_DIGIT_CAP)
    m1, m2 = _draw(rng, d1), _draw(rng, d2)
    return Problem(operand1=m1, operand2=m2, operator=Operator.MULTIPLICATION, answer=m1 * m2)


def _division(config: Configuration, rng: RandomSource, n1: int, n2: int) -> Problem:
    # built backwards from divisor and quotient so the result is exact
    d2 = max(1, config.digits_operand2)
    divisor = rng.randrange(1, 10**d2)
    if divisor == 0:
        divisor = 1
    quotient = rng.randrange(*DIVISION_QUOTIENT_RANGE)
    return Problem(
        operand1=divisor * quotient, operand2=divisor, operator=Operator.DIVISION, answer=quotient
    )


_BUILDERS: Dict[Operator, Callable[[Configuration, RandomSource, int, int], Problem]] = {
    Operator.ADDITION: _addition,
    Operator.SUBTRACTION: _subtraction,
    Operator.MULTIPLICATION: _multiplication,
    Operator.DIVISION: _division,
}


def available_operators(config: Configuration) -> list[Operator]:
    """Enabled operators in + - * / order; addition alone when none are enabled."""
    ops = [op for op in Operator if op in config.enabled_operations]
    return ops or [Operator.ADDITION]


def generate(config: Configuration, rng: Optional[RandomSource] = None) -> Problem:
    """Draw one Problem for ``config``.

    ``rng`` needs only ``randrange(start, stop)``; ``random.Random`` instances
    and the ``random`` module both qualify. Addition and subtraction use the
    pair drawn from the configured digit counts. Multiplication and division
    draw their own operands.
    """
    if rng is None:
        rng = random
    d1 = max(1, config.digits_operand1)
    d2 = max(1, config.digits_operand2)
    n1 = _draw(rng, d1)
    n2 = _draw(rng, d2)

    ops = available_operators(config)
    operator = ops[rng.randrange(0, len(ops))]

    builder = _BUILDERS.get(operator)
    if builder is None:
        raise UnknownOperatorError(operator)
    return builder(config, rng, n1, n2)
