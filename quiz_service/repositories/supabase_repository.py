"""
Supabase (PostgREST) implementations of the content repositories.

One adapter per repository contract. Every call builds its client from
the shared factory: reads use the project API key alone, caller-scoped
writes forward the caller's bearer credential so row-level security is
evaluated as that user.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from supabase import Client

from ..domain.entities import Answer, Choice, Genre, Question, utc_now
from ..domain.exceptions import DomainException, ErrorCode
from ..infrastructure.supabase_client import SupabaseClientFactory
from ..logging_config import get_logger

logger = get_logger(__name__)

GENRES_TABLE = "genres"
QUESTIONS_TABLE = "questions"
CHOICES_TABLE = "choices"
ANSWERS_TABLE = "answers"


class EmptyResultError(RuntimeError):
    """Raised when a write returns no representation of the written row."""


# ==================== ROW MAPPING ====================


def _as_int(value: Any) -> int:
    if value is None or value == "":
        return 0
    return int(value)


def _as_str(value: Any) -> str:
    return "" if value is None else str(value)


def _as_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value)
    return utc_now()


def row_to_genre(row: Dict[str, Any]) -> Genre:
    return Genre(id=_as_int(row.get("id")), name=_as_str(row.get("name")))


def row_to_question(row: Dict[str, Any]) -> Question:
    return Question(
        id=_as_int(row.get("id")),
        genre_id=_as_int(row.get("genre_id")),
        owner_id=_as_str(row.get("user_id")),
        title=_as_str(row.get("title")),
        body=_as_str(row.get("body")),
        explanation=_as_str(row.get("explanation")),
        created_at=_as_datetime(row.get("created_at")),
        views=_as_int(row.get("views")),
        correct_count=_as_int(row.get("correct_count")),
        incorrect_count=_as_int(row.get("incorrect_count")),
    )


def row_to_choice(row: Dict[str, Any]) -> Choice:
    return Choice(
        id=_as_int(row.get("id")),
        question_id=_as_int(row.get("question_id")),
        text=_as_str(row.get("text")),
        is_correct=bool(row.get("is_correct")),
    )


def row_to_answer(row: Dict[str, Any]) -> Answer:
    return Answer(
        id=_as_int(row.get("id")),
        user_id=_as_str(row.get("user_id")),
        question_id=_as_int(row.get("question_id")),
        choice_id=_as_int(row.get("choice_id")),
        answered_at=_as_datetime(row.get("answered_at")),
    )


def _first_row(data: Optional[List[Dict[str, Any]]], operation: str) -> Dict[str, Any]:
    if not data:
        raise EmptyResultError(f"no row returned from {operation}")
    return data[0]


class _SupabaseRepository:
    """Shared plumbing: holds the client factory, nothing else."""

    def __init__(self, clients: SupabaseClientFactory) -> None:
        self._clients = clients

    def _client(self, credential: Optional[str] = None) -> Client:
        return self._clients.for_caller(credential)


# ==================== GENRES ====================


class SupabaseGenreRepository(_SupabaseRepository):
    """GenreRepository backed by the ``genres`` table."""

    def create(self, genre: Genre, credential: Optional[str] = None) -> Genre:
        response = (
            self._client(credential)
            .table(GENRES_TABLE)
            .insert({"name": genre.name})
            .execute()
        )
        created = row_to_genre(_first_row(response.data, "create genre"))
        logger.info(f"Genre created: {created.name} (id: {created.id})")
        return created

    def find_by_id(self, genre_id: int) -> Genre:
        response = (
            self._client().table(GENRES_TABLE).select("*").eq("id", genre_id).execute()
        )
        if not response.data:
            raise DomainException(ErrorCode.NOT_FOUND, "genre not found")
        return row_to_genre(response.data[0])

    def find_all(self) -> List[Genre]:
        response = self._client().table(GENRES_TABLE).select("*").order("id").execute()
        return [row_to_genre(row) for row in response.data or []]

    def find_by_name(self, name: str) -> Genre:
        response = (
            self._client().table(GENRES_TABLE).select("*").eq("name", name).execute()
        )
        if not response.data:
            raise DomainException(ErrorCode.NOT_FOUND, "genre not found")
        return row_to_genre(response.data[0])


# ==================== QUESTIONS ====================


class SupabaseQuestionRepository(_SupabaseRepository):
    """QuestionRepository backed by the ``questions`` table."""

    def create(self, question: Question, credential: Optional[str] = None) -> Question:
        payload = {
            "genre_id": question.genre_id,
            "user_id": question.owner_id,
            "title": question.title,
            "body": question.body,
            "explanation": question.explanation,
            "created_at": question.created_at.isoformat(),
        }
        response = self._client(credential).table(QUESTIONS_TABLE).insert(payload).execute()
        created = row_to_question(_first_row(response.data, "create question"))
        logger.info(f"Question created: id {created.id} by {created.owner_id}")
        return created

    def get_by_id(self, question_id: int) -> Question:
        response = (
            self._client().table(QUESTIONS_TABLE).select("*").eq("id", question_id).execute()
        )
        if not response.data:
            raise DomainException(ErrorCode.NOT_FOUND, "question not found")
        return row_to_question(response.data[0])

    def get_by_user_id(self, user_id: str, credential: Optional[str] = None) -> List[Question]:
        response = (
            self._client(credential)
            .table(QUESTIONS_TABLE)
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [row_to_question(row) for row in response.data or []]

    def update(self, question: Question, credential: Optional[str] = None) -> Question:
        response = (
            self._client(credential)
            .table(QUESTIONS_TABLE)
            .update(
                {
                    "title": question.title,
                    "body": question.body,
                    "explanation": question.explanation,
                }
            )
            .eq("id", question.id)
            .execute()
        )
        # Row-level security hides rows the caller may not touch
        if not response.data:
            raise DomainException(ErrorCode.NOT_FOUND, "question not found")
        return row_to_question(response.data[0])

    def delete(self, question_id: int, credential: Optional[str] = None) -> None:
        self._client(credential).table(QUESTIONS_TABLE).delete().eq("id", question_id).execute()
        logger.info(f"Question deleted: id {question_id}")

    def get_all(self) -> List[Question]:
        response = (
            self._client()
            .table(QUESTIONS_TABLE)
            .select("*")
            .order("created_at", desc=True)
            .execute()
        )
        return [row_to_question(row) for row in response.data or []]


# ==================== CHOICES ====================


class SupabaseChoiceRepository(_SupabaseRepository):
    """ChoiceRepository backed by the ``choices`` table."""

    def get_by_question_id(self, question_id: int) -> List[Choice]:
        response = (
            self._client()
            .table(CHOICES_TABLE)
            .select("*")
            .eq("question_id", question_id)
            .order("id")
            .execute()
        )
        return [row_to_choice(row) for row in response.data or []]

    def create(self, choice: Choice, credential: Optional[str] = None) -> Choice:
        payload = {
            "question_id": choice.question_id,
            "text": choice.text,
            "is_correct": choice.is_correct,
        }
        response = self._client(credential).table(CHOICES_TABLE).insert(payload).execute()
        return row_to_choice(_first_row(response.data, "create choice"))

    def update(self, choice: Choice, credential: Optional[str] = None) -> Choice:
        response = (
            self._client(credential)
            .table(CHOICES_TABLE)
            .update(
                {
                    "question_id": choice.question_id,
                    "text": choice.text,
                    "is_correct": choice.is_correct,
                }
            )
            .eq("id", choice.id)
            .execute()
        )
        if not response.data:
            raise DomainException(ErrorCode.NOT_FOUND, "choice not found")
        return row_to_choice(response.data[0])

    def delete(self, choice_id: int, credential: Optional[str] = None) -> None:
        self._client(credential).table(CHOICES_TABLE).delete().eq("id", choice_id).execute()


# ==================== ANSWERS ====================


class SupabaseAnswerRepository(_SupabaseRepository):
    """AnswerRepository backed by the ``answers`` table."""

    def create(self, answer: Answer, credential: Optional[str] = None) -> Answer:
        payload = {
            "user_id": answer.user_id,
            "question_id": answer.question_id,
            "choice_id": answer.choice_id,
            "answered_at": answer.answered_at.isoformat(),
        }
        response = self._client(credential).table(ANSWERS_TABLE).insert(payload).execute()
        return row_to_answer(_first_row(response.data, "create answer"))

    def get_by_user_id(self, user_id: str) -> List[Answer]:
        response = (
            self._client()
            .table(ANSWERS_TABLE)
            .select("*")
            .eq("user_id", user_id)
            .order("answered_at", desc=True)
            .execute()
        )
        return [row_to_answer(row) for row in response.data or []]

    def get_by_question_id(self, question_id: int) -> List[Answer]:
        response = (
            self._client()
            .table(ANSWERS_TABLE)
            .select("*")
            .eq("question_id", question_id)
            .order("answered_at", desc=True)
            .execute()
        )
        return [row_to_answer(row) for row in response.data or []]
