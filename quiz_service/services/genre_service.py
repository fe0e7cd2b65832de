"""
Genre service.

Creation of uniquely named genres and unrestricted reads.
"""

from typing import List

from ..domain.entities import Genre, validate_genre_name
from ..domain.exceptions import DomainException, ErrorCode, is_not_found
from ..logging_config import get_logger
from ..repositories.interfaces import GenreRepository

logger = get_logger(__name__)


class GenreService:
    """Orchestrates genre validation, uniqueness and persistence."""

    def __init__(self, genre_repository: GenreRepository) -> None:
        self._genres = genre_repository

    def create_genre(self, name: str, credential: str) -> Genre:
        """
        Create a new genre.

        Args:
            name: Genre name, at most 50 characters
            credential: Caller's bearer credential

        Returns:
            The created genre with its assigned id

        Raises:
            ValidationException: If the name is blank or too long
            DomainException: GENRE_EXISTS if a genre with that exact name exists
        """
        validate_genre_name(name)

        try:
            existing = self._genres.find_by_name(name)
        except DomainException as e:
            if not is_not_found(e):
                raise
            existing = None

        if existing is not None:
            logger.info(f"Genre already exists: {name}")
            raise DomainException(ErrorCode.GENRE_EXISTS, "genre already exists")

        return self._genres.create(Genre(name=name), credential)

    def get_all_genres(self) -> List[Genre]:
        return self._genres.find_all()

    def get_genre(self, genre_id: int) -> Genre:
        return self._genres.find_by_id(genre_id)
