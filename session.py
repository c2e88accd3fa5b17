from __future__ import annotations

from pydantic import BaseModel


class SessionState(BaseModel):
    """Counters for every quiz run in this process. Nothing resets them short of a restart."""

    correct_answers: int = 0
    total_questions: int = 0

    def record(self, correct: bool) -> None:
        self.total_questions += 1
        if correct:
            self.correct_answers += 1

    @property
    def percentage(self) -> float:
        if self.total_questions == 0:
            return 0.0
        return 100 * self.correct_answers / self.total_questions
