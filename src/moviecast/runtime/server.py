from __future__ import annotations

import logging
import socket
import threading
import time
from collections.abc import Iterable
from dataclasses import dataclass

import uvicorn

from ..core.registry import REGISTRY
from ..core.settings import Settings, normalize_base_url
from ..core.types import Actor, Movie, as_actor, as_movie
from ..sdk.client import MovieCastClient
from .app import create_app

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MovieCastServer:
    """Handle on a server started in this process.

    Writes and queries go straight to the process-wide `REGISTRY` the server is
    serving, so there is no HTTP round trip. Use `client()` for the remote view.
    """

    host: str
    port: int
    url: str

    def client(self) -> MovieCastClient:
        return MovieCastClient(self.url.rstrip("/"))

    def release(self, movie: Movie | str, actors: Iterable[Actor | str]) -> None:
        """Release (add/replace) a movie with its full cast."""
        REGISTRY.release(as_movie(movie), {as_actor(a) for a in actors})

    def remove(self, movie: Movie | str) -> bool:
        return REGISTRY.remove(as_movie(movie))

    def tag(self, movie: Movie | str, actor: Actor | str) -> None:
        REGISTRY.tag(as_movie(movie), as_actor(actor))

    def actors_for(self, movie: Movie | str) -> frozenset[Actor]:
        return REGISTRY.actors_for(as_movie(movie))

    def movies_for(self, actor: Actor | str) -> frozenset[Movie]:
        return REGISTRY.movies_for(as_actor(actor))

    def all_actors(self) -> frozenset[Actor]:
        return REGISTRY.all_actors()

    def total_credits(self) -> int:
        return REGISTRY.total_credits()

    def movies(self) -> list[Movie]:
        return sorted(REGISTRY.movies())


def _serves_moviecast(base_url: str, *, timeout_s: float = 0.2) -> bool:
    """True if a moviecast server answers `/healthz` at `base_url`."""

    import httpx

    try:
        with httpx.Client(base_url=base_url, timeout=timeout_s) as client:
            r = client.get("/healthz")
            return r.status_code == 200 and bool(r.json().get("ok"))
    except (httpx.HTTPError, ValueError):
        return False


def run(
    *,
    host: str = "127.0.0.1",
    port: int = 0,
    log_level: str = "info",
    access_log: bool = False,
    new_server: bool = False,
    connect_timeout_s: float = 0.2,
) -> MovieCastServer | MovieCastClient:
    """Serve the process registry over HTTP, or attach to a server that already does.

    Behavior:
    - Unless `new_server=True`, a live server at MOVIECAST_URL, or at an explicit
      http://{host}:{port}, is reused and a `MovieCastClient` is returned.
    - Otherwise uvicorn starts on a daemon thread and a `MovieCastServer` is returned.
      `port=0` picks a free port.
    """

    if not new_server:
        candidates = [Settings.from_env().server_url]
        if port != 0:
            candidates.append(normalize_base_url(f"{host}:{port}"))
        for base_url in filter(None, candidates):
            if _serves_moviecast(base_url, timeout_s=connect_timeout_s):
                logger.info("Attaching to existing server at %s", base_url)
                return MovieCastClient(base_url)

    if port == 0:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.bind((host, 0))
            port = int(s.getsockname()[1])

    config = uvicorn.Config(create_app(), host=host, port=port, log_level=log_level, access_log=access_log)
    server = uvicorn.Server(config)
    threading.Thread(target=server.run, daemon=True).start()

    # Give it a moment so a subsequent client request doesn't race with startup.
    time.sleep(0.05)

    url = f"http://{host}:{port}/"
    logger.info("moviecast serving %d movies at %s", len(REGISTRY), url)
    return MovieCastServer(host=host, port=port, url=url)
