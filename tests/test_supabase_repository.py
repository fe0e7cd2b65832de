"""
Tests for the Supabase content repositories.

The client factory is a MagicMock; assertions cover the PostgREST calls
made, the credential each client is built with, and row mapping.
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from quiz_service.domain.entities import Answer, Choice, Genre, Question
from quiz_service.domain.exceptions import DomainException, ErrorCode
from quiz_service.repositories.supabase_repository import (
    EmptyResultError, SupabaseAnswerRepository, SupabaseChoiceRepository,
    SupabaseGenreRepository, SupabaseQuestionRepository, row_to_question)

QUESTION_ROW = {
    "id": 10,
    "genre_id": 2,
    "user_id": "owner-1",
    "title": "Capital of France?",
    "body": "Pick one",
    "explanation": "Paris",
    "created_at": "2024-05-01T12:30:00+00:00",
    "views": 4,
    "correct_count": 2,
    "incorrect_count": 1,
}


@pytest.fixture
def mock_client():
    """Create a mock Supabase client."""
    return MagicMock()


@pytest.fixture
def clients(mock_client):
    """Mock client factory returning the same mock client for every call."""
    factory = MagicMock()
    factory.for_caller.return_value = mock_client
    return factory


def _table(mock_client):
    return mock_client.table.return_value


class TestRowMapping:
    def test_question_row(self):
        question = row_to_question(QUESTION_ROW)

        assert question.id == 10
        assert question.owner_id == "owner-1"
        assert question.created_at == datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
        assert (question.views, question.correct_count, question.incorrect_count) == (4, 2, 1)

    def test_missing_columns_default_to_zero_values(self):
        question = row_to_question({"id": 1, "genre_id": 1, "user_id": "u", "title": "t"})

        assert question.body == ""
        assert question.views == 0


class TestSupabaseGenreRepository:
    def test_create_uses_caller_credential(self, clients, mock_client):
        _table(mock_client).insert.return_value.execute.return_value.data = [
            {"id": 3, "name": "Music"}
        ]
        repo = SupabaseGenreRepository(clients)

        genre = repo.create(Genre(name="Music"), "token-1")

        assert genre == Genre(id=3, name="Music")
        clients.for_caller.assert_called_once_with("token-1")
        mock_client.table.assert_called_once_with("genres")
        _table(mock_client).insert.assert_called_once_with({"name": "Music"})

    def test_create_without_returned_row(self, clients, mock_client):
        _table(mock_client).insert.return_value.execute.return_value.data = []
        repo = SupabaseGenreRepository(clients)

        with pytest.raises(EmptyResultError):
            repo.create(Genre(name="Music"), "token-1")

    def test_find_by_name_not_found(self, clients, mock_client):
        _table(mock_client).select.return_value.eq.return_value.execute.return_value.data = []
        repo = SupabaseGenreRepository(clients)

        with pytest.raises(DomainException) as exc_info:
            repo.find_by_name("Nope")

        assert exc_info.value.code is ErrorCode.NOT_FOUND
        _table(mock_client).select.return_value.eq.assert_called_once_with("name", "Nope")

    def test_find_all(self, clients, mock_client):
        _table(mock_client).select.return_value.order.return_value.execute.return_value.data = [
            {"id": 1, "name": "A"},
            {"id": 2, "name": "B"},
        ]
        repo = SupabaseGenreRepository(clients)

        assert [g.name for g in repo.find_all()] == ["A", "B"]
        clients.for_caller.assert_called_once_with(None)


class TestSupabaseQuestionRepository:
    def test_create_payload(self, clients, mock_client):
        _table(mock_client).insert.return_value.execute.return_value.data = [QUESTION_ROW]
        repo = SupabaseQuestionRepository(clients)
        question = Question(
            genre_id=2,
            owner_id="owner-1",
            title="Capital of France?",
            body="Pick one",
            explanation="Paris",
            created_at=datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc),
        )

        created = repo.create(question, "token-owner")

        assert created.id == 10
        payload = _table(mock_client).insert.call_args[0][0]
        assert payload["user_id"] == "owner-1"
        assert payload["created_at"] == "2024-05-01T12:30:00+00:00"
        assert "id" not in payload
        clients.for_caller.assert_called_once_with("token-owner")

    def test_get_by_id_not_found(self, clients, mock_client):
        _table(mock_client).select.return_value.eq.return_value.execute.return_value.data = []
        repo = SupabaseQuestionRepository(clients)

        with pytest.raises(DomainException) as exc_info:
            repo.get_by_id(99)
        assert exc_info.value.code is ErrorCode.NOT_FOUND

    def test_update_sends_text_fields_only(self, clients, mock_client):
        _table(mock_client).update.return_value.eq.return_value.execute.return_value.data = [
            QUESTION_ROW
        ]
        repo = SupabaseQuestionRepository(clients)
        question = row_to_question(QUESTION_ROW)

        repo.update(question, "token-owner")

        _table(mock_client).update.assert_called_once_with(
            {"title": "Capital of France?", "body": "Pick one", "explanation": "Paris"}
        )
        _table(mock_client).update.return_value.eq.assert_called_once_with("id", 10)

    def test_update_hidden_row_is_not_found(self, clients, mock_client):
        _table(mock_client).update.return_value.eq.return_value.execute.return_value.data = []
        repo = SupabaseQuestionRepository(clients)

        with pytest.raises(DomainException) as exc_info:
            repo.update(row_to_question(QUESTION_ROW), "token-owner")
        assert exc_info.value.code is ErrorCode.NOT_FOUND

    def test_delete(self, clients, mock_client):
        repo = SupabaseQuestionRepository(clients)

        repo.delete(10, "token-owner")

        _table(mock_client).delete.return_value.eq.assert_called_once_with("id", 10)
        clients.for_caller.assert_called_once_with("token-owner")

    def test_infrastructure_errors_propagate(self, clients, mock_client):
        _table(mock_client).select.return_value.order.return_value.execute.side_effect = (
            ConnectionError("timeout")
        )
        repo = SupabaseQuestionRepository(clients)

        with pytest.raises(ConnectionError):
            repo.get_all()


class TestSupabaseChoiceRepository:
    def test_get_by_question_id(self, clients, mock_client):
        select = _table(mock_client).select.return_value
        select.eq.return_value.order.return_value.execute.return_value.data = [
            {"id": 1, "question_id": 5, "text": "A", "is_correct": False},
            {"id": 2, "question_id": 5, "text": "B", "is_correct": True},
        ]
        repo = SupabaseChoiceRepository(clients)

        choices = repo.get_by_question_id(5)

        assert choices[1] == Choice(id=2, question_id=5, text="B", is_correct=True)
        select.eq.assert_called_once_with("question_id", 5)

    def test_update_missing_choice(self, clients, mock_client):
        _table(mock_client).update.return_value.eq.return_value.execute.return_value.data = []
        repo = SupabaseChoiceRepository(clients)

        with pytest.raises(DomainException) as exc_info:
            repo.update(Choice(id=9, question_id=5, text="A"), "token-1")
        assert exc_info.value.code is ErrorCode.NOT_FOUND


class TestSupabaseAnswerRepository:
    def test_create(self, clients, mock_client):
        answered_at = datetime(2024, 5, 2, 8, 0, tzinfo=timezone.utc)
        _table(mock_client).insert.return_value.execute.return_value.data = [
            {
                "id": 4,
                "user_id": "user-1",
                "question_id": 10,
                "choice_id": 2,
                "answered_at": "2024-05-02T08:00:00+00:00",
            }
        ]
        repo = SupabaseAnswerRepository(clients)

        answer = repo.create(Answer("user-1", 10, 2, answered_at), "token-1")

        assert answer.id == 4
        assert answer.answered_at == answered_at
        mock_client.table.assert_called_once_with("answers")
