from __future__ import annotations

import time

import pytest

from moviecast.core.settings import Settings, normalize_base_url


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MOVIECAST_URL", "localhost:9000/")
    monkeypatch.setenv("MOVIECAST_SAMPLE", "true")
    monkeypatch.setenv("MOVIECAST_LOG_LEVEL", "debug")

    s = Settings.from_env()
    assert s.server_url == "http://localhost:9000"
    assert s.seed_sample is True
    assert s.log_level == "DEBUG"


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("MOVIECAST_URL", "MOVIECAST_SAMPLE", "MOVIECAST_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)

    assert Settings.from_env() == Settings()
    assert normalize_base_url("  ") == ""


def test_sample_catalog_seeds_process_registry(monkeypatch: pytest.MonkeyPatch) -> None:
    from moviecast.api import create_api_app
    from moviecast.core.registry import REGISTRY
    from moviecast.core.types import Actor, Movie

    monkeypatch.setenv("MOVIECAST_SAMPLE", "1")
    REGISTRY.reset()
    try:
        create_api_app()
        assert Movie("Titanic") in REGISTRY.movies_for(Actor("Leonardo DiCaprio"))
    finally:
        REGISTRY.reset()


def test_run_auto_attaches_to_existing_server(monkeypatch: pytest.MonkeyPatch) -> None:
    """A second run() pointed at a live server returns a client instead of a new server."""

    import moviecast
    from moviecast.runtime.server import MovieCastServer, _serves_moviecast
    from moviecast.sdk.client import MovieCastClient

    monkeypatch.delenv("MOVIECAST_URL", raising=False)

    server = moviecast.run(host="127.0.0.1", port=0, new_server=True, log_level="warning")
    assert isinstance(server, MovieCastServer)

    base = f"http://{server.host}:{server.port}"
    deadline = time.time() + 5.0
    while not _serves_moviecast(base) and time.time() < deadline:
        time.sleep(0.05)

    attached = moviecast.run(host=server.host, port=server.port)
    assert isinstance(attached, MovieCastClient)
    assert attached.base_url == base


def test_server_handle_writes_into_process_registry() -> None:
    from moviecast.core.errors import MovieNotFoundError
    from moviecast.core.registry import REGISTRY
    from moviecast.core.types import Actor, Movie
    from moviecast.runtime.server import MovieCastServer

    server = MovieCastServer(host="127.0.0.1", port=0, url="http://127.0.0.1:0/")
    REGISTRY.reset()
    try:
        server.release(" Inception ", ["DiCaprio", Actor("Hardy")])
        server.tag(Movie("Titanic"), "DiCaprio")

        assert REGISTRY.actors_for(Movie("Inception")) == {Actor("DiCaprio"), Actor("Hardy")}
        assert server.movies_for("DiCaprio") == {Movie("Inception"), Movie("Titanic")}
        assert server.actors_for("Titanic") == {Actor("DiCaprio")}
        assert server.all_actors() == {Actor("DiCaprio"), Actor("Hardy")}
        assert server.total_credits() == 3
        assert server.movies() == [Movie("Inception"), Movie("Titanic")]

        assert server.remove("Titanic") is True
        with pytest.raises(MovieNotFoundError):
            server.actors_for("Titanic")
    finally:
        REGISTRY.reset()
