"""Request schemas — text normalisation and optional identifiers."""

import uuid

import pytest
from pydantic import ValidationError

from quiz.db.base import MAX_ID
from quiz.schemas.answer import AnswerCreate
from quiz.schemas.question import QuestionCreate


def test_question_text_is_stripped():
    assert QuestionCreate(text="  Why?  ").text == "Why?"


def test_question_whitespace_text_rejected():
    with pytest.raises(ValidationError):
        QuestionCreate(text="   ")


def test_question_id_optional_and_zero_means_unset():
    assert QuestionCreate(text="Q").id is None
    assert QuestionCreate(id=0, text="Q").id is None
    assert QuestionCreate(id=7, text="Q").id == 7


def test_question_id_rejects_negative_and_out_of_range():
    with pytest.raises(ValidationError):
        QuestionCreate(id=-1, text="Q")
    with pytest.raises(ValidationError):
        QuestionCreate(id=MAX_ID + 1, text="Q")


def test_long_text_accepted():
    assert len(QuestionCreate(text="x" * 20_000).text) == 20_000


def test_answer_question_id_optional():
    answer = AnswerCreate(text="A", user_id=uuid.uuid4())
    assert answer.question_id is None


def test_answer_requires_user_id():
    with pytest.raises(ValidationError):
        AnswerCreate(text="A")


def test_answer_rejects_non_uuid_user_id():
    with pytest.raises(ValidationError):
        AnswerCreate(text="A", user_id="user-1")


def test_answer_zero_id_is_unset():
    answer = AnswerCreate(id=0, question_id=0, text="A", user_id=uuid.uuid4())
    assert answer.id is None
    assert answer.question_id == 0
