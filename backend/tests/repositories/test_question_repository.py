"""QuestionRepository — insert, absence as None, eager ordered answers, soft delete.

Invariants:
    - Absent and soft-deleted questions come back as None, not as errors
    - with_answers orders answers by created_at ascending and skips deleted ones
    - Soft delete cascades to the question's live answers
"""

import uuid

import pytest

from quiz.core.errors import DuplicateError
from quiz.models.answer import Answer
from quiz.models.question import Question
from quiz.repositories import AnswerRepository, QuestionRepository


@pytest.fixture
def questions():
    return QuestionRepository()


@pytest.fixture
def answers():
    return AnswerRepository()


async def test_insert_assigns_id_and_timestamps(db, questions):
    async with db.ambient() as ctx:
        question = await questions.insert(ctx, Question(text="Why?"))
    assert question.id > 0
    assert question.created_at <= question.updated_at
    assert question.deleted_at is None


async def test_insert_with_existing_id_raises_duplicate(db, questions):
    async with db.ambient() as ctx:
        await questions.insert(ctx, Question(id=5, text="First"))
    with pytest.raises(DuplicateError) as exc_info:
        async with db.ambient() as ctx:
            await questions.insert(ctx, Question(id=5, text="Second"))
    assert exc_info.value.entity_id == 5


async def test_get_one_absent_returns_none(db, questions):
    async with db.ambient() as ctx:
        assert await questions.get_one(ctx, 999999) is None


async def test_get_one_with_answers_orders_by_created_at(
    db, questions, seed_question, insert_answer, at,
):
    await insert_answer(seed_question.id, "C", at(30))
    await insert_answer(seed_question.id, "A", at(10))
    await insert_answer(seed_question.id, "B", at(20))

    async with db.ambient() as ctx:
        question = await questions.get_one(ctx, seed_question.id, with_answers=True)

    assert [a.text for a in question.answers] == ["A", "B", "C"]


async def test_get_one_with_answers_skips_deleted_answers(
    db, questions, answers, seed_question, insert_answer, at,
):
    kept = await insert_answer(seed_question.id, "kept", at(1))
    gone = await insert_answer(seed_question.id, "gone", at(2))
    async with db.ambient() as ctx:
        assert await answers.delete(ctx, gone.id) is True

    async with db.ambient() as ctx:
        question = await questions.get_one(ctx, seed_question.id, with_answers=True)
    assert [a.id for a in question.answers] == [kept.id]


async def test_get_all_returns_empty_list_not_none(db, questions):
    async with db.ambient() as ctx:
        assert await questions.get_all(ctx) == []


async def test_get_all_excludes_soft_deleted(db, questions):
    async with db.ambient() as ctx:
        first = await questions.insert(ctx, Question(text="one"))
        second = await questions.insert(ctx, Question(text="two"))
    async with db.ambient() as ctx:
        await questions.delete(ctx, first.id)
    async with db.ambient() as ctx:
        remaining = await questions.get_all(ctx)
    assert [q.id for q in remaining] == [second.id]


async def test_delete_reports_affected_rows(db, questions, seed_question):
    async with db.ambient() as ctx:
        assert await questions.delete(ctx, seed_question.id) is True
    async with db.ambient() as ctx:
        assert await questions.delete(ctx, seed_question.id) is False
        assert await questions.delete(ctx, 424242) is False
    async with db.ambient() as ctx:
        assert await questions.get_one(ctx, seed_question.id) is None


async def test_delete_cascades_to_answers(db, questions, answers, seed_question):
    async with db.ambient() as ctx:
        answer = await answers.insert(ctx, Answer(
            question_id=seed_question.id, user_id=uuid.uuid4(), text="A",
        ))
    async with db.ambient() as ctx:
        await questions.delete(ctx, seed_question.id)
    async with db.ambient() as ctx:
        assert await answers.get_one(ctx, answer.id) is None
