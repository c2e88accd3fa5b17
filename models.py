from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Float, Integer, func
from sqlalchemy.orm import Mapped, mapped_column

from db import Base


class Score(Base):
    # table/column names kept as-is so existing MathQuizDB.db files stay readable
    __tablename__ = "Scores"
    __table_args__ = {"sqlite_autoincrement": True}
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    total_questions: Mapped[int] = mapped_column("totalQuestions", Integer)
    correct_answers: Mapped[int] = mapped_column("correctAnswers", Integer)
    percentage: Mapped[float] = mapped_column(Float)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.current_timestamp()
    )
