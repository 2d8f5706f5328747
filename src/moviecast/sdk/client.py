from __future__ import annotations

import contextlib
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from ..core.errors import UNKNOWN_MOVIE_DETAIL, MovieNotFoundError
from ..core.types import Actor, Credit, Movie, as_actor, as_movie

if TYPE_CHECKING:
    import httpx


def _segment(value: str) -> str:
    # Titles are free text ('/', '?', '#'); the server routes them as `:path` params.
    return quote(value, safe="")


def _is_unknown_movie(res: httpx.Response) -> bool:
    # A bare route miss also answers 404, with FastAPI's generic "Not Found" detail.
    try:
        detail = res.json().get("detail")
    except ValueError:
        return False
    return isinstance(detail, str) and detail.startswith(UNKNOWN_MOVIE_DETAIL)


class MovieCastClient:
    """HTTP client for a running moviecast server.

    Mirrors `MovieRegistry` method for method, with the same return types.
    Pass `http_client` to reuse an existing `httpx.Client` (e.g. a FastAPI
    `TestClient`); it is not closed by this object.
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000",
        *,
        http_client: httpx.Client | None = None,
        timeout_s: float = 10.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._http = http_client
        self._timeout_s = timeout_s

    @contextlib.contextmanager
    def _client(self) -> Iterator[httpx.Client]:
        if self._http is not None:
            yield self._http
            return

        # httpx is a lightweight dependency used for requests.
        import httpx

        with httpx.Client(base_url=self.base_url, timeout=self._timeout_s) as client:
            yield client

    @staticmethod
    def _check(res: httpx.Response, what: str) -> Any:
        if res.status_code >= 400:
            raise RuntimeError(f"{what} failed: {res.status_code} {res.text}")
        return res.json()

    def release(self, movie: Movie | str, actors: Iterable[Actor | str]) -> None:
        m = as_movie(movie)
        names = sorted({as_actor(a).name for a in actors})
        with self._client() as client:
            res = client.put(f"/api/movies/{_segment(m.title)}", json={"actors": names})
            self._check(res, "Release")

    def remove(self, movie: Movie | str) -> bool:
        m = as_movie(movie)
        with self._client() as client:
            data = self._check(client.delete(f"/api/movies/{_segment(m.title)}"), "Remove")
        return bool(data.get("removed"))

    def tag(self, movie: Movie | str, actor: Actor | str) -> None:
        m = as_movie(movie)
        a = as_actor(actor)
        with self._client() as client:
            res = client.post(f"/api/movies/{_segment(m.title)}/actors", json={"actor": a.name})
            self._check(res, "Tag")

    def actors_for(self, movie: Movie | str) -> frozenset[Actor]:
        m = as_movie(movie)
        with self._client() as client:
            res = client.get(f"/api/movies/{_segment(m.title)}/actors")
            if res.status_code == 404 and _is_unknown_movie(res):
                raise MovieNotFoundError(m)
            data = self._check(res, "Actors lookup")
        return frozenset(Actor(str(n)) for n in data)

    def movies_for(self, actor: Actor | str) -> frozenset[Movie]:
        a = as_actor(actor)
        with self._client() as client:
            data = self._check(client.get(f"/api/actors/{_segment(a.name)}/movies"), "Movies lookup")
        return frozenset(Movie(str(t)) for t in data)

    def all_actors(self) -> frozenset[Actor]:
        with self._client() as client:
            data = self._check(client.get("/api/actors"), "Actors listing")
        return frozenset(Actor(str(n)) for n in data)

    def total_credits(self) -> int:
        with self._client() as client:
            data = self._check(client.get("/api/credits"), "Credits lookup")
        return int(data.get("total", 0))

    def credits(self) -> list[Credit]:
        with self._client() as client:
            data = self._check(client.get("/api/credits"), "Credits lookup")
        return [Credit(Movie(str(c.get("movie"))), Actor(str(c.get("actor")))) for c in data.get("credits", [])]

    def movies(self) -> list[Movie]:
        with self._client() as client:
            data = self._check(client.get("/api/movies"), "Movies listing")
        return [Movie(str(item.get("title"))) for item in data]

    def revision(self) -> int:
        with self._client() as client:
            data = self._check(client.get("/api/events"), "Events poll")
        return int(data.get("revision", 0))

    def reset(self) -> None:
        with self._client() as client:
            self._check(client.post("/api/reset"), "Reset")
