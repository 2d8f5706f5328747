from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ..core.types import Actor, Credit, Movie


def movie_titles(movies: Iterable[Movie]) -> list[str]:
    # Sorted so list responses don't reorder between polls.
    return [m.title for m in sorted(movies)]


def actor_names(actors: Iterable[Actor]) -> list[str]:
    return [a.name for a in sorted(actors)]


def movie_to_list_item(movie: Movie, cast: frozenset[Actor]) -> dict[str, Any]:
    return {
        "title": movie.title,
        "actorCount": len(cast),
    }


def credit_to_item(credit: Credit) -> dict[str, str]:
    return {"movie": credit.movie.title, "actor": credit.actor.name}


def parse_name_list(value: Any, *, field: str) -> list[str]:
    """Validate a JSON array of strings from a request body."""
    if not isinstance(value, list):
        raise ValueError(f"{field} must be a list of strings")
    out: list[str] = []
    for item in value:
        if not isinstance(item, str):
            raise ValueError(f"{field} must be a list of strings")
        out.append(item)
    return out
