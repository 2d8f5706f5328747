from __future__ import annotations

from typing import Any


class MovieCastError(Exception):
    """Base class for moviecast errors."""


class MovieNotFoundError(MovieCastError, KeyError):
    """Raised when querying the cast of a movie that was never released (or was removed).

    A released movie with an empty cast is *not* an error; its cast is simply empty.
    """

    def __init__(self, movie: Any) -> None:
        super().__init__(movie)
        self.movie = movie

    def __str__(self) -> str:
        return f"Movie is not released: {self.movie!s}"


# HTTP 404 detail prefix for a movie that is not released; distinguishes it from a route miss.
UNKNOWN_MOVIE_DETAIL = "Unknown movie"
