"""
Domain entities for quiz content.

Core business objects representing genres, questions, choices, answers
and users. These entities are framework-agnostic: they know nothing about
HTTP or the storage backend, and validate their own invariants.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from .exceptions import ValidationException

GENRE_NAME_MAX_LENGTH = 50
QUESTION_TITLE_MAX_LENGTH = 200


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def validate_genre_name(name: str) -> None:
    """
    Validate a genre name.

    Raises:
        ValidationException: If the name is blank or too long
    """
    if not name or not name.strip():
        raise ValidationException("name", "genre name is required")
    if len(name) > GENRE_NAME_MAX_LENGTH:
        raise ValidationException(
            "name", f"genre name must be at most {GENRE_NAME_MAX_LENGTH} characters"
        )


def validate_question_title(title: str) -> None:
    """
    Validate a question title.

    Raises:
        ValidationException: If the title is blank or too long
    """
    if not title or not title.strip():
        raise ValidationException("title", "title is required")
    if len(title) > QUESTION_TITLE_MAX_LENGTH:
        raise ValidationException(
            "title", f"title must be at most {QUESTION_TITLE_MAX_LENGTH} characters"
        )


@dataclass
class Genre:
    """A quiz category. Names are unique across genres."""

    name: str
    id: Optional[int] = None

    def validate(self) -> None:
        validate_genre_name(self.name)


@dataclass
class Question:
    """
    A quiz question owned by the user who created it.

    Only ``title``, ``body`` and ``explanation`` are ever mutated after
    creation, and only by the owner. The counters start at zero and are
    maintained by the store.
    """

    genre_id: int
    owner_id: str
    title: str
    body: str = ""
    explanation: str = ""
    created_at: datetime = field(default_factory=utc_now)
    views: int = 0
    correct_count: int = 0
    incorrect_count: int = 0
    id: Optional[int] = None

    @classmethod
    def new(
        cls, genre_id: int, owner_id: str, title: str, body: str, explanation: str
    ) -> "Question":
        """Build a fresh question with zeroed counters and the current timestamp."""
        return cls(
            genre_id=genre_id,
            owner_id=owner_id,
            title=title,
            body=body,
            explanation=explanation,
            created_at=utc_now(),
        )

    def validate(self) -> None:
        if not self.genre_id:
            raise ValidationException("genre_id", "genre_id is required")
        if not self.owner_id:
            raise ValidationException("user_id", "user_id is required")
        validate_question_title(self.title)

    def revise(self, title: str, body: str, explanation: str) -> None:
        """Replace the editable text fields."""
        self.title = title
        self.body = body
        self.explanation = explanation


@dataclass
class Choice:
    """One answer option of a question; ``is_correct`` is trusted as supplied."""

    question_id: int
    text: str
    is_correct: bool = False
    id: Optional[int] = None


@dataclass(frozen=True)
class Answer:
    """An immutable record of a user picking a choice for a question."""

    user_id: str
    question_id: int
    choice_id: int
    answered_at: datetime = field(default_factory=utc_now)
    id: Optional[int] = None

    @classmethod
    def new(cls, user_id: str, question_id: int, choice_id: int) -> "Answer":
        return cls(
            user_id=user_id,
            question_id=question_id,
            choice_id=choice_id,
            answered_at=utc_now(),
        )

    def validate(self) -> None:
        if not self.user_id:
            raise ValidationException("user_id", "user_id is required")
        if not self.question_id:
            raise ValidationException("question_id", "question_id is required")
        if not self.choice_id:
            raise ValidationException("choice_id", "choice_id is required")


@dataclass(frozen=True)
class User:
    """An account of the identity provider."""

    id: str
    email: str
    username: str = ""

    def validate(self) -> None:
        if not self.email:
            raise ValidationException("email", "email is required")
        if not self.id:
            raise ValidationException("id", "id is required")


@dataclass(frozen=True)
class AuthResult:
    """Credentials issued by the identity provider; never persisted."""

    user: User
    access_token: str
    refresh_token: str
    expires_at: int

    @property
    def user_id(self) -> str:
        return self.user.id
