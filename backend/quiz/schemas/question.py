"""Question Schemas — request body and response shapes for /questions.

Invariants:
    - QuestionCreate.text: stripped, non-empty
    - QuestionResponse omits answers (list endpoint); QuestionDetailResponse includes them
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from quiz.db.base import MAX_ID
from quiz.schemas.answer import AnswerResponse


class QuestionCreate(BaseModel):
    """Question creation. id 0 or absent lets storage assign one; an explicit id may collide (422)."""
    id: int | None = Field(None, ge=0, le=MAX_ID)
    text: str = Field(min_length=1)

    @field_validator("id")
    @classmethod
    def zero_id_is_unset(cls, v: int | None) -> int | None:
        return v or None

    @field_validator("text")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("text cannot be empty or whitespace")
        return v


class QuestionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    text: str
    created_at: datetime
    updated_at: datetime


class QuestionDetailResponse(QuestionResponse):
    answers: list[AnswerResponse] = []
