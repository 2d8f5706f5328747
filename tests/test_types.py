from __future__ import annotations

import dataclasses

import pytest

from moviecast.core.types import Actor, Credit, Movie, as_actor, as_movie


def test_value_equality_and_hashing() -> None:
    assert Movie("Titanic") == Movie("Titanic")
    assert hash(Movie("Titanic")) == hash(Movie("Titanic"))
    assert Actor("Winslet") == Actor("Winslet")
    assert len({Actor("Winslet"), Actor("Winslet")}) == 1
    assert Credit(Movie("Titanic"), Actor("Winslet")) == Credit(Movie("Titanic"), Actor("Winslet"))


def test_values_are_immutable_and_ordered() -> None:
    m = Movie("Titanic")
    with pytest.raises(dataclasses.FrozenInstanceError):
        m.title = "Other"  # type: ignore[misc]

    assert sorted([Movie("b"), Movie("a")]) == [Movie("a"), Movie("b")]
    assert str(Actor("Winslet")) == "Winslet"


def test_coercion_helpers() -> None:
    assert as_movie("  Heat ") == Movie("Heat")
    assert as_movie(Movie("Heat")) == Movie("Heat")
    assert as_movie(Movie(" Heat ")) == Movie("Heat")
    assert as_actor(Actor("Pacino\t")) == Actor("Pacino")
    assert as_actor("Pacino") == Actor("Pacino")

    with pytest.raises(ValueError):
        as_movie("   ")
    with pytest.raises(ValueError):
        as_actor("")
    with pytest.raises(ValueError):
        as_movie(Movie("  "))
    with pytest.raises(TypeError):
        as_movie(42)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        as_actor(None)  # type: ignore[arg-type]
