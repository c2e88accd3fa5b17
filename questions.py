# Question generator: single-digit operands (1-10), operator from the closed +, -, * set.
from __future__ import annotations

import random
from typing import Optional

from schemas.questions import Operator, Question

OPERAND_MIN = 1
OPERAND_MAX = 10
OPERATORS = tuple(Operator)


def calculate_answer(a: int, b: int, symbol: str) -> int:
    # unknown symbols are a programming error, not user input; let it propagate
    return Operator.parse(symbol).apply(a, b)


def generate(rng: Optional[random.Random] = None) -> Question:
    rng = rng or random
    a = rng.randint(OPERAND_MIN, OPERAND_MAX)
    b = rng.randint(OPERAND_MIN, OPERAND_MAX)
    op = rng.choice(OPERATORS)
    return Question(operand1=a, operand2=b, operator=op, correct_answer=op.apply(a, b))
