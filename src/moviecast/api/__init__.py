from __future__ import annotations

import logging

from fastapi import FastAPI

from ..core.registry import REGISTRY, MovieRegistry
from ..core.settings import Settings
from ..core.types import Actor, Movie
from .routes import mount_movies_api

logger = logging.getLogger(__name__)

_SAMPLE_CATALOG: dict[str, tuple[str, ...]] = {
    "Inception": ("Leonardo DiCaprio", "Elliot Page", "Tom Hardy"),
    "Titanic": ("Leonardo DiCaprio", "Kate Winslet"),
    "Mad Max: Fury Road": ("Tom Hardy", "Charlize Theron"),
}


def seed_sample_catalog(registry: MovieRegistry[Movie, Actor]) -> None:
    for title, names in _SAMPLE_CATALOG.items():
        registry.release(Movie(title), {Actor(n) for n in names})
    logger.info("Seeded %d sample movies", len(_SAMPLE_CATALOG))


def create_api_app(registry: MovieRegistry[Movie, Actor] | None = None) -> FastAPI:
    if registry is None:
        registry = REGISTRY
        # Only the process-wide registry is seeded; explicit registries stay empty.
        if Settings.from_env().seed_sample and len(registry) == 0:
            seed_sample_catalog(registry)

    app = FastAPI(title="moviecast", version="0.1.0")

    mount_movies_api(app, registry)

    @app.get("/healthz")
    def healthz() -> dict[str, bool]:
        return {"ok": True}

    @app.get("/api/events")
    def events() -> dict[str, int]:
        # Minimal polling endpoint.
        return {"revision": registry.revision()}

    @app.post("/api/reset")
    def reset() -> dict[str, bool]:
        registry.reset()
        return {"ok": True}

    return app
