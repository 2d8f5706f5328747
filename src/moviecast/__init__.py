from __future__ import annotations

from .core.errors import MovieCastError, MovieNotFoundError
from .core.registry import REGISTRY, MovieRegistry
from .core.types import Actor, Credit, Movie
from .runtime.server import MovieCastServer, run
from .sdk.client import MovieCastClient

__all__ = [
    "run",
    "Movie",
    "Actor",
    "Credit",
    "MovieRegistry",
    "REGISTRY",
    "MovieCastError",
    "MovieNotFoundError",
    "MovieCastClient",
    "MovieCastServer",
]
