"""
Answer service.

Records answer submissions. Answers are events: created once, never
updated or deleted through this service.
"""

from typing import List

from ..domain.entities import Answer
from ..domain.exceptions import ValidationException
from ..repositories.interfaces import AnswerRepository


class AnswerService:
    def __init__(self, answer_repository: AnswerRepository) -> None:
        self._answers = answer_repository

    def create_answer(
        self, question_id: int, choice_id: int, caller_id: str, credential: str
    ) -> Answer:
        """
        Record that the caller picked ``choice_id`` for ``question_id``.

        Args:
            question_id: Answered question
            choice_id: Picked choice
            caller_id: Caller's user id, recorded on the answer
            credential: Caller's bearer credential

        Returns:
            The stored answer, timestamped at creation

        Raises:
            ValidationException: If either id is missing
        """
        if not question_id:
            raise ValidationException("question_id", "question_id is required")
        if not choice_id:
            raise ValidationException("choice_id", "choice_id is required")

        answer = Answer.new(caller_id, question_id, choice_id)
        answer.validate()

        return self._answers.create(answer, credential)

    def get_answers_by_user(self, user_id: str) -> List[Answer]:
        return self._answers.get_by_user_id(user_id)

    def get_answers_by_question(self, question_id: int) -> List[Answer]:
        return self._answers.get_by_question_id(question_id)
