"""Interview prep question with a coaching tip."""

from typing import Literal

from models.schemas.base import CamelModel

QuestionType = Literal["technical", "behavioral", "situational"]


class InterviewQuestion(CamelModel):
    question: str
    type: QuestionType
    tip: str = ""
