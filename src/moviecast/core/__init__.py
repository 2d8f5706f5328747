from __future__ import annotations

from .errors import MovieCastError, MovieNotFoundError
from .registry import REGISTRY, MovieRegistry
from .settings import Settings, setup_logging
from .types import Actor, Credit, Movie, as_actor, as_movie

__all__ = [
    "Movie",
    "Actor",
    "Credit",
    "as_movie",
    "as_actor",
    "MovieCastError",
    "MovieNotFoundError",
    "MovieRegistry",
    "REGISTRY",
    "Settings",
    "setup_logging",
]
