"""Repositories — SQLAlchemy implementations of the core store protocols.

Invariants:
    - Statements run only on ctx.session; repositories never open sessions
    - Writes end with ctx.persist(); the context decides commit vs flush
    - Soft-deleted rows (deleted_at IS NOT NULL) never leave a read
"""

from quiz.repositories.question_repository import QuestionRepository  # noqa: F401
from quiz.repositories.answer_repository import AnswerRepository  # noqa: F401
