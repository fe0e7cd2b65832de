"""
Tests for the Supabase Auth user repository.

Tests sign up, sign in, the admin email lookup, and sign out.
"""

import time
from unittest.mock import MagicMock, Mock

import pytest
from supabase import AuthApiError

from quiz_service.domain.exceptions import DomainException, ErrorCode
from quiz_service.repositories.supabase_user_repository import (
    ADMIN_PAGE_SIZE, DEFAULT_SESSION_TTL_SECONDS, SupabaseUserRepository)


@pytest.fixture
def mock_client():
    return MagicMock()


@pytest.fixture
def mock_admin_client():
    return MagicMock()


@pytest.fixture
def clients(mock_client, mock_admin_client):
    factory = MagicMock()
    factory.for_caller.return_value = mock_client
    factory.for_admin.return_value = mock_admin_client
    factory.has_service_role = True
    return factory


@pytest.fixture
def repo(clients):
    return SupabaseUserRepository(clients)


def _user(user_id="user-1", email="alice@example.com", metadata=None):
    user = Mock()
    user.id = user_id
    user.email = email
    user.user_metadata = metadata if metadata is not None else {"username": "alice"}
    return user


def _session(expires_at=1900000000):
    session = Mock()
    session.access_token = "access-token"
    session.refresh_token = "refresh-token"
    session.expires_at = expires_at
    return session


class TestCreate:
    def test_sign_up_sends_username_metadata(self, repo, mock_client):
        mock_client.auth.sign_up.return_value = Mock(user=_user(), session=None)

        user = repo.create("alice@example.com", "secret1", "alice")

        assert user.id == "user-1"
        assert user.username == "alice"
        mock_client.auth.sign_up.assert_called_once_with(
            {
                "email": "alice@example.com",
                "password": "secret1",
                "options": {"data": {"username": "alice"}},
            }
        )

    def test_already_registered_maps_to_user_exists(self, repo, mock_client):
        mock_client.auth.sign_up.side_effect = AuthApiError(
            "User already registered", 422, "user_already_exists"
        )

        with pytest.raises(DomainException) as exc_info:
            repo.create("alice@example.com", "secret1", "alice")

        assert exc_info.value.code is ErrorCode.USER_EXISTS

    def test_other_provider_errors_propagate(self, repo, mock_client):
        mock_client.auth.sign_up.side_effect = AuthApiError(
            "Signups not allowed for this instance", 422, "signup_disabled"
        )

        with pytest.raises(AuthApiError):
            repo.create("alice@example.com", "secret1", "alice")


class TestAuthenticate:
    def test_returns_session_credentials(self, repo, mock_client):
        mock_client.auth.sign_in_with_password.return_value = Mock(
            user=_user(), session=_session()
        )

        result = repo.authenticate("alice@example.com", "secret1")

        assert result.access_token == "access-token"
        assert result.refresh_token == "refresh-token"
        assert result.expires_at == 1900000000
        assert result.user.username == "alice"

    def test_expiry_falls_back_to_one_day(self, repo, mock_client):
        mock_client.auth.sign_in_with_password.return_value = Mock(
            user=_user(), session=_session(expires_at=None)
        )

        before = int(time.time())
        result = repo.authenticate("alice@example.com", "secret1")

        assert before + DEFAULT_SESSION_TTL_SECONDS <= result.expires_at
        assert result.expires_at <= int(time.time()) + DEFAULT_SESSION_TTL_SECONDS

    def test_rejected_credentials_propagate(self, repo, mock_client):
        mock_client.auth.sign_in_with_password.side_effect = AuthApiError(
            "Invalid login credentials", 400, "invalid_credentials"
        )

        with pytest.raises(AuthApiError):
            repo.authenticate("alice@example.com", "wrong")


class TestFindByEmail:
    def test_finds_case_insensitively(self, repo, mock_admin_client):
        mock_admin_client.auth.admin.list_users.return_value = [
            _user("user-9", "bob@example.com", {}),
            _user("user-1", "Alice@Example.com"),
        ]

        user = repo.find_by_email("alice@example.com")

        assert user.id == "user-1"
        mock_admin_client.auth.admin.list_users.assert_called_once_with(
            page=1, per_page=ADMIN_PAGE_SIZE
        )

    def test_pages_until_short_page(self, repo, mock_admin_client):
        full_page = [_user(f"user-{i}", f"u{i}@example.com", {}) for i in range(ADMIN_PAGE_SIZE)]
        mock_admin_client.auth.admin.list_users.side_effect = [full_page, []]

        assert repo.find_by_email("nobody@example.com") is None
        assert mock_admin_client.auth.admin.list_users.call_count == 2

    def test_without_service_role(self, repo, clients):
        clients.has_service_role = False

        assert repo.find_by_email("alice@example.com") is None
        clients.for_admin.assert_not_called()


class TestLogout:
    def test_revokes_session(self, repo, mock_client):
        repo.logout("access-token")

        mock_client.auth.admin.sign_out.assert_called_once_with("access-token")
