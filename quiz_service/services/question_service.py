"""
Question service.

Questions are readable by anyone; creating one requires a caller, and
only the owner may update or delete it. Mutations re-fetch the stored
question and check ownership before touching the store.
"""

from typing import List

from ..domain.entities import Question, validate_question_title
from ..domain.exceptions import ValidationException
from ..domain.policies import ensure_owner
from ..logging_config import get_logger
from ..repositories.interfaces import QuestionRepository

logger = get_logger(__name__)


class QuestionService:
    """Orchestrates question validation, ownership checks and persistence."""

    def __init__(self, question_repository: QuestionRepository) -> None:
        self._questions = question_repository

    def create_question(
        self,
        genre_id: int,
        owner_id: str,
        title: str,
        body: str,
        explanation: str,
        credential: str,
    ) -> Question:
        """
        Create a question owned by the caller.

        Args:
            genre_id: Genre the question belongs to
            owner_id: Caller's user id, recorded as owner
            title: Non-blank title, at most 200 characters
            body: Question text
            explanation: Explanation shown after answering
            credential: Caller's bearer credential

        Raises:
            ValidationException: If genre_id, owner_id or title is invalid
        """
        if not genre_id:
            raise ValidationException("genre_id", "genre_id is required")
        validate_question_title(title)

        question = Question.new(genre_id, owner_id, title, body, explanation)
        question.validate()

        return self._questions.create(question, credential)

    def update_question(
        self,
        question_id: int,
        title: str,
        body: str,
        explanation: str,
        caller_id: str,
        credential: str,
    ) -> Question:
        """
        Replace title, body and explanation of a question the caller owns.

        Raises:
            DomainException: NOT_FOUND if the question does not exist,
                FORBIDDEN if the caller is not its owner
            ValidationException: If the new title is invalid
        """
        existing = self._questions.get_by_id(question_id)
        ensure_owner(existing.owner_id, caller_id, "update this question")
        validate_question_title(title)

        existing.revise(title, body, explanation)
        updated = self._questions.update(existing, credential)
        logger.info(f"Question updated: id {question_id} by {caller_id}")
        return updated

    def delete_question(self, question_id: int, caller_id: str, credential: str) -> None:
        """
        Delete a question the caller owns.

        Raises:
            DomainException: NOT_FOUND if the question does not exist,
                FORBIDDEN if the caller is not its owner
        """
        existing = self._questions.get_by_id(question_id)
        ensure_owner(existing.owner_id, caller_id, "delete this question")

        self._questions.delete(question_id, credential)

    def get_question(self, question_id: int) -> Question:
        return self._questions.get_by_id(question_id)

    def get_all_questions(self) -> List[Question]:
        return self._questions.get_all()

    def get_questions_by_user(self, user_id: str, credential: str) -> List[Question]:
        return self._questions.get_by_user_id(user_id, credential)
