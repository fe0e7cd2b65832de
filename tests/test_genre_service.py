"""Tests for GenreService."""

import pytest

from quiz_service.domain.entities import Genre
from quiz_service.domain.exceptions import (DomainException, ErrorCode,
                                            ValidationException)
from quiz_service.services.genre_service import GenreService


@pytest.fixture
def service(genre_repo):
    return GenreService(genre_repo)


class TestCreateGenre:
    def test_creates_genre_with_caller_credential(self, service, genre_repo):
        genre = service.create_genre("History", "token-1")

        assert genre.id == 1
        assert genre.name == "History"
        assert genre_repo.credentials == ["token-1"]

    @pytest.mark.parametrize("name", ["", "   ", "g" * 51])
    def test_invalid_name_never_reaches_store(self, service, genre_repo, name):
        with pytest.raises(ValidationException) as exc_info:
            service.create_genre(name, "token-1")

        assert exc_info.value.field == "name"
        assert genre_repo.genres == {}

    def test_duplicate_name_is_rejected(self, service, genre_repo):
        service.create_genre("Science", "token-1")

        with pytest.raises(DomainException) as exc_info:
            service.create_genre("Science", "token-2")

        assert exc_info.value.code is ErrorCode.GENRE_EXISTS
        assert len(genre_repo.genres) == 1

    def test_name_match_is_exact(self, service, genre_repo):
        service.create_genre("Science", "token-1")
        service.create_genre("science", "token-1")

        assert len(genre_repo.genres) == 2

    def test_lookup_failure_propagates(self, genre_repo):
        class BrokenRepository(type(genre_repo)):
            def find_by_name(self, name):
                raise ConnectionError("store unreachable")

        service = GenreService(BrokenRepository())

        with pytest.raises(ConnectionError):
            service.create_genre("Music", "token-1")


class TestReadGenres:
    def test_get_all_genres(self, service, genre_repo):
        genre_repo.create(Genre(name="A"))
        genre_repo.create(Genre(name="B"))

        assert [g.name for g in service.get_all_genres()] == ["A", "B"]

    def test_get_genre_not_found(self, service):
        with pytest.raises(DomainException) as exc_info:
            service.get_genre(99)
        assert exc_info.value.code is ErrorCode.NOT_FOUND
