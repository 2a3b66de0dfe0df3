"""Answer Schemas — request body and response shapes for answers.

Invariants:
    - AnswerCreate.text: stripped, non-empty; id 0 is treated as absent
    - AnswerCreate.question_id optional; the route rejects a value that
      disagrees with the path id
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from quiz.db.base import MAX_ID


class AnswerCreate(BaseModel):
    id: int | None = Field(None, ge=0, le=MAX_ID)
    question_id: int | None = Field(None, ge=0, le=MAX_ID)
    user_id: UUID
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


class AnswerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    question_id: int
    user_id: UUID
    text: str
    created_at: datetime
    updated_at: datetime
