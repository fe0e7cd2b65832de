# Test configuration
import os

import pytest

# Set test environment variables BEFORE importing app modules
os.environ["SUPABASE_URL"] = "http://localhost:54321"
os.environ["SUPABASE_ANON_KEY"] = "test-anon-key"
os.environ["SUPABASE_SERVICE_ROLE_KEY"] = ""
os.environ["SUPABASE_JWT_SECRET"] = ""
os.environ["STATIC_DIR"] = "/nonexistent-static-dir"
os.environ["LOG_LEVEL"] = "WARNING"

from tests.fakes import (InMemoryAnswerRepository,  # noqa: E402
                         InMemoryChoiceRepository, InMemoryGenreRepository,
                         InMemoryQuestionRepository, InMemoryUserRepository)


@pytest.fixture
def genre_repo():
    return InMemoryGenreRepository()


@pytest.fixture
def question_repo():
    return InMemoryQuestionRepository()


@pytest.fixture
def choice_repo():
    return InMemoryChoiceRepository()


@pytest.fixture
def answer_repo():
    return InMemoryAnswerRepository()


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()
