# schemas/questions.py
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class InvalidOperatorError(ValueError):
    """Raised for an operator outside the closed +, -, * set."""


class Operator(str, Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"

    @classmethod
    def parse(cls, symbol: str) -> "Operator":
        try:
            return cls(symbol)
        except ValueError:
            raise InvalidOperatorError(f"Invalid operator: {symbol!r}") from None

    def apply(self, a: int, b: int) -> int:
        if self is Operator.ADD:
            return a + b
        if self is Operator.SUB:
            return a - b
        if self is Operator.MUL:
            return a * b
        raise InvalidOperatorError(f"Invalid operator: {self!r}")


class Question(BaseModel):
    operand1: int = Field(ge=1, le=10)
    operand2: int = Field(ge=1, le=10)
    operator: Operator
    correct_answer: int

    def prompt(self, index: int) -> str:
        return f"Question {index}: {self.operand1} {self.operator.value} {self.operand2} = ?"
