from __future__ import annotations

import logging
import sys
from typing import List, Optional, TextIO

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from db import DATABASE_URL, Base, make_engine, make_sessionmaker
from models import Score
from schemas.scores import ScoreOut

logger = logging.getLogger("mathquiz.store")


class ScoreStore:
    """
    Score history backed by the local ``Scores`` table.

    One engine and one session are opened here and kept until ``close()``.
    Database failures never escape this class: each one is reported on ``err``
    (stderr by default) and the call returns an empty result (None / [] / False).
    """

    def __init__(
        self,
        url: str = DATABASE_URL,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ) -> None:
        self.url = url
        self._out = out
        self._err = err
        self._engine = None
        self._session = None
        self._closed = False
        try:
            self._engine = make_engine(url)
            self._session = make_sessionmaker(self._engine)()
        except SQLAlchemyError as e:
            self._report("Error connecting to the database", e)

    @property
    def closed(self) -> bool:
        return self._closed

    def _report(self, what: str, exc: BaseException) -> None:
        print(f"{what}: {exc}", file=self._err or sys.stderr)
        logger.debug("%s (url=%s)", what, self.url, exc_info=exc)

    def _rollback(self) -> None:
        if self._session is None:
            return
        try:
            self._session.rollback()
        except SQLAlchemyError:
            logger.debug("rollback failed", exc_info=True)

    def _require_session(self):
        if self._closed:
            raise SQLAlchemyError("database connection is closed")
        if self._session is None:
            raise SQLAlchemyError("database connection is not available")
        return self._session

    def initialize(self) -> bool:
        try:
            self._require_session()
            Base.metadata.create_all(self._engine, tables=[Score.__table__])
        except SQLAlchemyError as e:
            self._report("Error initializing the database", e)
            return False
        return True

    def save(self, total: int, correct: int) -> Optional[ScoreOut]:
        if total < 0 or correct < 0 or correct > total:
            raise ValueError(f"inconsistent score: correct={correct} total={total}")
        if total == 0:
            print("No questions answered. Score will not be saved.", file=self._out)
            return None

        percentage = 100 * correct / total
        try:
            db = self._require_session()
            row = Score(total_questions=total, correct_answers=correct, percentage=percentage)
            db.add(row)
            db.commit()
            db.refresh(row)
            saved = ScoreOut.model_validate(row)
        except SQLAlchemyError as e:
            self._rollback()
            self._report("Error saving score to database", e)
            return None

        logger.info("saved score id=%s %s/%s", saved.id, correct, total)
        print("Score saved successfully.", file=self._out)
        return saved

    def list_all(self) -> List[ScoreOut]:
        try:
            db = self._require_session()
            rows = db.scalars(select(Score).order_by(Score.id.desc())).all()
            return [ScoreOut.model_validate(r) for r in rows]
        except SQLAlchemyError as e:
            self._rollback()
            self._report("Error retrieving scores", e)
            return []

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            if self._session is not None:
                self._session.close()
            if self._engine is not None:
                self._engine.dispose()
        except SQLAlchemyError as e:
            self._report("Error closing the database connection", e)
