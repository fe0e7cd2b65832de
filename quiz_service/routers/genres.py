"""Genre endpoints."""

from typing import List

from fastapi import APIRouter, Depends, status

from ..dependencies import (Caller, ServiceContainer, get_container,
                            get_current_caller)
from ..models import CreateGenreRequest, GenreResponse

router = APIRouter(prefix="/genres", tags=["Genres"])


@router.get("", response_model=List[GenreResponse], summary="List genres")
def list_genres(container: ServiceContainer = Depends(get_container)):
    return [GenreResponse.from_entity(genre) for genre in container.genres.get_all_genres()]


@router.post(
    "",
    response_model=GenreResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create genre",
)
def create_genre(
    body: CreateGenreRequest,
    caller: Caller = Depends(get_current_caller),
    container: ServiceContainer = Depends(get_container),
):
    """
    Create a genre with a unique name.

    Returns 409 if a genre with the same name already exists.
    """
    genre = container.genres.create_genre(body.name, caller.token)
    return GenreResponse.from_entity(genre)


@router.get("/{genre_id}", response_model=GenreResponse, summary="Get genre")
def get_genre(genre_id: int, container: ServiceContainer = Depends(get_container)):
    return GenreResponse.from_entity(container.genres.get_genre(genre_id))
