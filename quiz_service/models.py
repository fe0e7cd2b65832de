"""
Pydantic models for request/response schemas.

Request fields default to their zero value so that missing input reaches
the services, which report it as a validation error on the named field.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel

from .domain.entities import Answer, AuthResult, Choice, Genre, Question, User

# Request Models


class SignUpRequest(BaseModel):
    """Model for user registration."""

    email: str = ""
    password: str = ""
    username: str = ""


class SignInRequest(BaseModel):
    """Model for user sign in."""

    email: str = ""
    password: str = ""


class CreateGenreRequest(BaseModel):
    name: str = ""


class CreateQuestionRequest(BaseModel):
    """Model for creating a question."""

    genre_id: int = 0
    title: str = ""
    body: str = ""
    explanation: str = ""


class UpdateQuestionRequest(BaseModel):
    """Model for replacing the editable fields of a question."""

    title: str = ""
    body: str = ""
    explanation: str = ""


class CreateChoiceRequest(BaseModel):
    question_id: int = 0
    text: str = ""
    is_correct: bool = False


class UpdateChoiceRequest(BaseModel):
    question_id: int = 0
    text: str = ""
    is_correct: bool = False


class CreateAnswerRequest(BaseModel):
    question_id: int = 0
    choice_id: int = 0


# Response Models


class GenreResponse(BaseModel):
    id: int
    name: str

    @classmethod
    def from_entity(cls, genre: Genre) -> "GenreResponse":
        return cls(id=genre.id or 0, name=genre.name)


class QuestionResponse(BaseModel):
    """Model for question data in responses."""

    id: int
    genre_id: int
    user_id: str
    title: str
    body: str
    explanation: str
    created_at: datetime
    views: int
    correct_count: int
    incorrect_count: int

    @classmethod
    def from_entity(cls, question: Question) -> "QuestionResponse":
        return cls(
            id=question.id or 0,
            genre_id=question.genre_id,
            user_id=question.owner_id,
            title=question.title,
            body=question.body,
            explanation=question.explanation,
            created_at=question.created_at,
            views=question.views,
            correct_count=question.correct_count,
            incorrect_count=question.incorrect_count,
        )


class ChoiceResponse(BaseModel):
    id: int
    question_id: int
    text: str
    is_correct: bool

    @classmethod
    def from_entity(cls, choice: Choice) -> "ChoiceResponse":
        return cls(
            id=choice.id or 0,
            question_id=choice.question_id,
            text=choice.text,
            is_correct=choice.is_correct,
        )


class ChoicesResponse(BaseModel):
    """Model for the choices of one question."""

    choices: List[ChoiceResponse]


class AnswerResponse(BaseModel):
    id: int
    user_id: str
    question_id: int
    choice_id: int
    answered_at: datetime

    @classmethod
    def from_entity(cls, answer: Answer) -> "AnswerResponse":
        return cls(
            id=answer.id or 0,
            user_id=answer.user_id,
            question_id=answer.question_id,
            choice_id=answer.choice_id,
            answered_at=answer.answered_at,
        )


class UserResponse(BaseModel):
    """Model for user data in responses."""

    id: str
    email: str
    username: str

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(id=user.id, email=user.email, username=user.username)


class AuthResponse(BaseModel):
    """Model for authentication response with user and session tokens."""

    token: str
    refresh_token: str
    user: UserResponse
    expires_at: int

    @classmethod
    def from_result(cls, result: AuthResult) -> "AuthResponse":
        return cls(
            token=result.access_token,
            refresh_token=result.refresh_token,
            user=UserResponse.from_entity(result.user),
            expires_at=result.expires_at,
        )


class MessageResponse(BaseModel):
    """Generic message response."""

    message: str


class ConnectionTestResponse(BaseModel):
    status: str
    message: str
    timestamp: int


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str
    message: str
