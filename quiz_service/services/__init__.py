"""Application services orchestrating domain rules and repositories."""

from .answer_service import AnswerService
from .auth_service import AuthService
from .choice_service import ChoiceService
from .genre_service import GenreService
from .question_service import QuestionService

__all__ = [
    "AnswerService",
    "AuthService",
    "ChoiceService",
    "GenreService",
    "QuestionService",
]
