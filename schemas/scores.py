from datetime import datetime

from pydantic import BaseModel, ConfigDict


class ScoreOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    total_questions: int
    correct_answers: int
    percentage: float
    # filled by the database on insert
    timestamp: datetime | None = None
