from __future__ import annotations

import logging
import random
import sys
from enum import Enum
from typing import Callable, List, Optional, TextIO

from quiz import parse_int, run_quiz
from schemas.scores import ScoreOut
from session import SessionState
from store import ScoreStore

logger = logging.getLogger("mathquiz.menu")

MENU_TEXT = """
Menu:
1. Start Quiz
2. View Score Summary
3. View All Past Scores
4. Exit"""

_ROW_FMT = "{:<5} {:<15} {:<15} {:<10} {:<20}"


class MenuState(str, Enum):
    MAIN_MENU = "main_menu"
    IN_QUIZ = "in_quiz"
    VIEWING = "viewing"
    EXITING = "exiting"


def format_summary(state: SessionState) -> List[str]:
    lines = [
        "",
        "Score Summary:",
        f"Total Questions: {state.total_questions}",
        f"Correct Answers: {state.correct_answers}",
    ]
    if state.total_questions > 0:
        lines.append(f"Score Percentage: {state.percentage:.2f}%")
    else:
        lines.append("No questions answered yet.")
    return lines


def format_scores(scores: List[ScoreOut]) -> List[str]:
    lines = [
        "",
        "All Past Scores:",
        _ROW_FMT.format("ID", "Total Questions", "Correct Answers", "Percentage", "Timestamp"),
    ]
    for s in scores:
        ts = s.timestamp.strftime("%Y-%m-%d %H:%M:%S") if s.timestamp else ""
        lines.append(
            _ROW_FMT.format(
                s.id, s.total_questions, s.correct_answers, f"{s.percentage:.2f}", ts
            )
        )
    return lines


class MenuController:
    def __init__(
        self,
        store: ScoreStore,
        state: Optional[SessionState] = None,
        ask: Callable[[str], str] = input,
        out: TextIO = sys.stdout,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.store = store
        self.state = state if state is not None else SessionState()
        self.ask = ask
        self.out = out
        self.rng = rng
        self.current = MenuState.MAIN_MENU

    def _print_lines(self, lines: List[str]) -> None:
        for line in lines:
            print(line, file=self.out)

    def _exit(self) -> MenuState:
        self.current = MenuState.EXITING
        print("Thank you for using the Math Quiz Application!", file=self.out)
        self.store.close()
        return self.current

    def handle(self, raw_choice: str) -> MenuState:
        """Run one menu choice and return the state the controller lands in."""
        if self.current is MenuState.EXITING:
            return self.current

        choice = parse_int(raw_choice)
        if choice is None:
            print("Invalid input. Please enter a number.", file=self.out)
            return self.current

        if choice == 1:
            self.current = MenuState.IN_QUIZ
            run_quiz(self.state, ask=self.ask, out=self.out, rng=self.rng)
            # session totals, not just this run; 0/0 after an aborted first run is a no-op save
            self.store.save(self.state.total_questions, self.state.correct_answers)
        elif choice == 2:
            self.current = MenuState.VIEWING
            self._print_lines(format_summary(self.state))
        elif choice == 3:
            self.current = MenuState.VIEWING
            self._print_lines(format_scores(self.store.list_all()))
        elif choice == 4:
            return self._exit()
        else:
            print("Invalid choice. Please try again.", file=self.out)

        self.current = MenuState.MAIN_MENU
        return self.current

    def run(self) -> int:
        while self.current is not MenuState.EXITING:
            print(MENU_TEXT, file=self.out)
            try:
                self.handle(self.ask("Enter your choice: "))
            except EOFError:
                # stdin closed: leave the same way option 4 does
                logger.debug("end of input, exiting")
                print(file=self.out)
                self._exit()
        return 0
