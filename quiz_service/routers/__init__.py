"""API routers for the quiz service."""

from . import answers, auth, choices, genres, health, questions

__all__ = ["answers", "auth", "choices", "genres", "health", "questions"]
