"""
Choice service.

Thin orchestration over the choice repository. Choices carry no owner, so
no ownership check is applied here; the caller's credential is forwarded
and the store's row-level policy decides.
"""

from typing import List

from ..domain.entities import Choice
from ..repositories.interfaces import ChoiceRepository


class ChoiceService:
    def __init__(self, choice_repository: ChoiceRepository) -> None:
        self._choices = choice_repository

    def get_choices(self, question_id: int) -> List[Choice]:
        """All choices of a question, in store order."""
        return self._choices.get_by_question_id(question_id)

    def create_choice(
        self, question_id: int, text: str, is_correct: bool, credential: str
    ) -> Choice:
        """Persist a new choice. The parent question is not re-verified."""
        choice = Choice(question_id=question_id, text=text, is_correct=is_correct)
        return self._choices.create(choice, credential)

    def update_choice(
        self,
        choice_id: int,
        question_id: int,
        text: str,
        is_correct: bool,
        credential: str,
    ) -> Choice:
        choice = Choice(id=choice_id, question_id=question_id, text=text, is_correct=is_correct)
        return self._choices.update(choice, credential)

    def delete_choice(self, choice_id: int, credential: str) -> None:
        self._choices.delete(choice_id, credential)
