from __future__ import annotations

import random
import re
import sys
from typing import Callable, Optional, TextIO

from questions import generate
from session import SessionState

_INT_RE = re.compile(r"^[+-]?\d+$")
_INVALID_NUMBER_MSG = "Invalid input. Please enter a valid number."
_NOT_POSITIVE_MSG = "Invalid input. Please enter a positive number."


def parse_int(text: Optional[str]) -> Optional[int]:
    if text is None:
        return None
    s = text.strip()
    if _INT_RE.fullmatch(s) is None:
        return None
    return int(s)


def run_quiz(
    state: SessionState,
    ask: Callable[[str], str] = input,
    out: TextIO = sys.stdout,
    rng: Optional[random.Random] = None,
) -> int:
    """
    Ask the user how many questions to play, then ask them one by one.

    Every question counts toward the session totals, including ones answered with
    garbage. Returns how many questions were asked; 0 when the question count itself
    is unusable, in which case the session is left untouched.
    """
    print("\nStarting the quiz...", file=out)
    num_questions = parse_int(ask("Enter the number of questions: "))
    if num_questions is None:
        print(_INVALID_NUMBER_MSG, file=out)
        return 0
    if num_questions <= 0:
        print(_NOT_POSITIVE_MSG, file=out)
        return 0

    for i in range(1, num_questions + 1):
        q = generate(rng)
        print(q.prompt(i), file=out)
        answer = parse_int(ask("Your answer: "))

        if answer is None:
            print(_INVALID_NUMBER_MSG, file=out)
            state.record(False)
        elif answer == q.correct_answer:
            print("Correct!", file=out)
            state.record(True)
        else:
            print(f"Wrong! The correct answer is {q.correct_answer}", file=out)
            state.record(False)

    print("\nQuiz completed!", file=out)
    return num_questions
