from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Movie:
    """Identity of a released movie.

    Notes:
    - Equality, hashing and ordering are structural, so two separately built
      `Movie("Titanic")` values collide as the same registry key.
    - The registry never looks inside; `title` is only used for display and sorting.
    """

    title: str

    def __str__(self) -> str:
        return self.title


@dataclass(frozen=True, order=True)
class Actor:
    """Identity of a credited actor (same value semantics as `Movie`)."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, order=True)
class Credit:
    movie: Movie
    actor: Actor


def _clean_label(value: str, *, field: str) -> str:
    s = value.strip()
    if not s:
        raise ValueError(f"{field} must be a non-empty string")
    return s


def as_movie(value: Movie | str) -> Movie:
    """Coerce to a `Movie` with a stripped, non-empty title."""
    if isinstance(value, Movie):
        value = value.title
    if isinstance(value, str):
        return Movie(_clean_label(value, field="title"))
    raise TypeError(f"Expected Movie or str, got {type(value).__name__}")


def as_actor(value: Actor | str) -> Actor:
    if isinstance(value, Actor):
        value = value.name
    if isinstance(value, str):
        return Actor(_clean_label(value, field="name"))
    raise TypeError(f"Expected Actor or str, got {type(value).__name__}")
