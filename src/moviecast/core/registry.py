from __future__ import annotations

import logging
import threading
from collections.abc import Hashable, Iterable
from typing import Generic, TypeVar

from .errors import MovieNotFoundError
from .types import Actor, Movie

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=Hashable)
A = TypeVar("A", bound=Hashable)


class MovieRegistry(Generic[M, A]):
    """In-memory mapping of movies to the set of actors credited in them.

    Notes:
    - A movie is "released" iff it is a key, even when its cast is empty.
    - Queries return frozenset snapshots; the backing sets never leave the registry.
    - `movies_for` scans every cast (O(movies x cast size)). There is no reverse
      index, which keeps `release` a plain replace instead of an old/new cast diff.
    - One re-entrant lock guards the whole mapping so the HTTP surface can call
      in from its worker threads.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._casts: dict[M, set[A]] = {}
        self._revision = 0

    def __contains__(self, movie: object) -> bool:
        with self._lock:
            return movie in self._casts

    def __len__(self) -> int:
        with self._lock:
            return len(self._casts)

    def revision(self) -> int:
        with self._lock:
            return self._revision

    def release(self, movie: M, actors: Iterable[A]) -> None:
        """Insert `movie`, or replace its whole cast if it is already released."""
        cast = set(actors)
        with self._lock:
            replaced = movie in self._casts
            self._casts[movie] = cast
            self._revision += 1
        logger.debug("release %s (%d actors, replaced=%s)", movie, len(cast), replaced)

    def remove(self, movie: M) -> bool:
        with self._lock:
            if self._casts.pop(movie, None) is None:
                return False
            self._revision += 1
        logger.debug("remove %s", movie)
        return True

    def tag(self, movie: M, actor: A) -> frozenset[A]:
        """Credit `actor` in `movie`, releasing the movie with an empty cast first if needed.

        Returns the cast as it stands right after the write.
        """
        with self._lock:
            cast = self._casts.setdefault(movie, set())
            if actor in cast:
                return frozenset(cast)
            cast.add(actor)
            self._revision += 1
            snapshot = frozenset(cast)
        logger.debug("tag %s in %s", actor, movie)
        return snapshot

    def is_released(self, movie: M) -> bool:
        return movie in self

    def actors_for(self, movie: M) -> frozenset[A]:
        with self._lock:
            cast = self._casts.get(movie)
            if cast is None:
                raise MovieNotFoundError(movie)
            return frozenset(cast)

    def movies_for(self, actor: A) -> frozenset[M]:
        with self._lock:
            return frozenset(movie for movie, cast in self._casts.items() if actor in cast)

    def all_actors(self) -> frozenset[A]:
        with self._lock:
            out: set[A] = set()
            for cast in self._casts.values():
                out.update(cast)
            return frozenset(out)

    def total_credits(self) -> int:
        with self._lock:
            return sum(len(cast) for cast in self._casts.values())

    def movies(self) -> list[M]:
        with self._lock:
            return list(self._casts)

    def credits(self) -> list[tuple[M, A]]:
        with self._lock:
            return [(movie, actor) for movie, cast in self._casts.items() for actor in cast]

    def reset(self) -> None:
        with self._lock:
            self._casts.clear()
            self._revision += 1
        logger.debug("reset")


REGISTRY: MovieRegistry[Movie, Actor] = MovieRegistry()
