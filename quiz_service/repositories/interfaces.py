"""
Repository contracts for quiz content and accounts.

Each resource type has one Protocol. Operations that act on behalf of a
caller take that caller's bearer ``credential`` so the store's row-level
policy evaluates the request as that user; reads that any caller may
perform take none.

Lookups of a single record raise ``DomainException(NOT_FOUND)`` when the
record does not exist. Any other failure is an infrastructure error and
propagates unchanged.
"""

from typing import List, Optional, Protocol

from ..domain.entities import Answer, AuthResult, Choice, Genre, Question, User


class GenreRepository(Protocol):
    """Contract for genre persistence."""

    def create(self, genre: Genre, credential: Optional[str] = None) -> Genre: ...

    def find_by_id(self, genre_id: int) -> Genre: ...

    def find_all(self) -> List[Genre]: ...

    def find_by_name(self, name: str) -> Genre: ...


class QuestionRepository(Protocol):
    """Contract for question persistence."""

    def create(self, question: Question, credential: Optional[str] = None) -> Question: ...

    def get_by_id(self, question_id: int) -> Question: ...

    def get_by_user_id(
        self, user_id: str, credential: Optional[str] = None
    ) -> List[Question]: ...

    def update(self, question: Question, credential: Optional[str] = None) -> Question: ...

    def delete(self, question_id: int, credential: Optional[str] = None) -> None: ...

    def get_all(self) -> List[Question]: ...


class ChoiceRepository(Protocol):
    """Contract for choice persistence."""

    def get_by_question_id(self, question_id: int) -> List[Choice]: ...

    def create(self, choice: Choice, credential: Optional[str] = None) -> Choice: ...

    def update(self, choice: Choice, credential: Optional[str] = None) -> Choice: ...

    def delete(self, choice_id: int, credential: Optional[str] = None) -> None: ...


class AnswerRepository(Protocol):
    """Contract for answer persistence. Answers are append-only."""

    def create(self, answer: Answer, credential: Optional[str] = None) -> Answer: ...

    def get_by_user_id(self, user_id: str) -> List[Answer]: ...

    def get_by_question_id(self, question_id: int) -> List[Answer]: ...


class UserRepository(Protocol):
    """Contract for the identity provider."""

    def create(self, email: str, password: str, username: str) -> User: ...

    def authenticate(self, email: str, password: str) -> AuthResult: ...

    def find_by_email(self, email: str) -> Optional[User]: ...

    def logout(self, credential: str) -> None: ...
