"""
Repository layer.

Protocols describing what the services need from storage, and their
Supabase implementations.
"""

from .interfaces import (AnswerRepository, ChoiceRepository, GenreRepository,
                         QuestionRepository, UserRepository)
from .supabase_repository import (SupabaseAnswerRepository,
                                  SupabaseChoiceRepository,
                                  SupabaseGenreRepository,
                                  SupabaseQuestionRepository)
from .supabase_user_repository import SupabaseUserRepository

__all__ = [
    "AnswerRepository",
    "ChoiceRepository",
    "GenreRepository",
    "QuestionRepository",
    "UserRepository",
    "SupabaseAnswerRepository",
    "SupabaseChoiceRepository",
    "SupabaseGenreRepository",
    "SupabaseQuestionRepository",
    "SupabaseUserRepository",
]
